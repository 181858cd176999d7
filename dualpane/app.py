"""
Application Bootstrap

Loads configuration, sets up logging and builds the dual pane session a
GUI front end binds to.

Author: DualPane Project
License: MIT
"""

from typing import Callable, Optional

from .config.config_loader import ConfigLoader
from .config.schema import Config
from .panes.pane import ExplorerPane
from .panes.session import DualPaneSession
from .utils.logger import setup_logging


def configure_logging(config: Config):
    """Apply the logging section of the configuration."""
    app = config.app
    setup_logging(
        log_level=app.log_level,
        log_to_file=app.log_to_file,
        log_file_path=app.log_file_path,
        log_rotation_size=app.log_rotation_size,
        log_retention_count=app.log_retention_count,
        json_format=app.json_format
    )


def create_session(
    config_path: Optional[str] = None,
    on_change: Optional[Callable[[ExplorerPane], None]] = None
) -> DualPaneSession:
    """
    Build a ready-to-use session from the configuration file.

    Args:
        config_path: Optional path to config file
        on_change: Called with a pane after the watcher refreshed it

    Returns:
        DualPaneSession with both panes loaded
    """
    config = ConfigLoader(config_path).load()
    configure_logging(config)
    return DualPaneSession(config, on_change=on_change)
