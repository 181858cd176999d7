"""
Configuration Loader

Handles loading configuration from a YAML file, merging environment
variable overrides, and saving configuration back to disk.

Author: DualPane Project
License: MIT
"""

import os
import yaml
from pathlib import Path
from typing import Optional, Dict, Any
from dotenv import load_dotenv

from .schema import Config

DEFAULT_CONFIG_PATH = "~/.config/dualpane/config.yaml"

TRUE_VALUES = ("1", "true", "yes", "on")


class ConfigLoader:
    """
    Configuration loader and manager.

    Loads configuration from YAML file, merges with environment variables
    and validates the structure.
    """

    def __init__(self, config_path: Optional[str] = None):
        """
        Initialize the configuration loader.

        Args:
            config_path: Path to the configuration file. If None, uses
                $DUALPANE_CONFIG or the per-user default location.
        """
        # Load environment variables from .env if present
        load_dotenv()

        self.config_path = str(Path(
            config_path or os.getenv("DUALPANE_CONFIG", DEFAULT_CONFIG_PATH)
        ).expanduser())
        self._config: Optional[Config] = None

    def load(self) -> Config:
        """
        Load and validate configuration.

        Returns:
            Validated Config object

        Raises:
            ValueError: If YAML parsing or configuration validation fails
        """
        config_data = self._load_yaml()
        config_data = self._merge_env_vars(config_data)

        self._config = Config(**config_data)
        return self._config

    def _load_yaml(self) -> Dict[str, Any]:
        """
        Load YAML configuration file.

        Returns:
            Dictionary with configuration data
        """
        config_file = Path(self.config_path)

        if not config_file.exists():
            return self._create_default_config()

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ValueError(f"Failed to parse YAML config: {e}")

        if not isinstance(data, dict):
            raise ValueError(f"Config file must contain a mapping: {config_file}")
        return data

    def _create_default_config(self) -> Dict[str, Any]:
        """
        Create default configuration structure.

        Returns:
            Default configuration dictionary
        """
        return {
            "app": {
                "log_level": "INFO",
                "log_to_file": False
            },
            "panes": {
                "left_path": None,
                "right_path": None,
                "show_hidden": True
            },
            "transfer": {
                "preserve_metadata": True,
                "verify_copies": False,
                "hash_algorithm": "sha256"
            },
            "watcher": {
                "enabled": False,
                "debounce_seconds": 0.5
            }
        }

    def _merge_env_vars(self, config_data: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge environment variables into configuration.

        Environment variables override config file values.
        Naming convention: DUALPANE_KEY (e.g., DUALPANE_LOG_LEVEL)

        Args:
            config_data: Configuration dictionary from file

        Returns:
            Merged configuration dictionary
        """
        # App settings
        if os.getenv("DUALPANE_LOG_LEVEL"):
            config_data.setdefault("app", {})["log_level"] = os.getenv("DUALPANE_LOG_LEVEL").upper()
        if os.getenv("DUALPANE_LOG_FILE"):
            config_data.setdefault("app", {})["log_to_file"] = True
            config_data["app"]["log_file_path"] = os.getenv("DUALPANE_LOG_FILE")
        if os.getenv("DUALPANE_LOG_JSON"):
            config_data.setdefault("app", {})["json_format"] = os.getenv("DUALPANE_LOG_JSON").lower() in TRUE_VALUES

        # Panes
        if os.getenv("DUALPANE_LEFT_PATH"):
            config_data.setdefault("panes", {})["left_path"] = os.getenv("DUALPANE_LEFT_PATH")
        if os.getenv("DUALPANE_RIGHT_PATH"):
            config_data.setdefault("panes", {})["right_path"] = os.getenv("DUALPANE_RIGHT_PATH")
        if os.getenv("DUALPANE_SHOW_HIDDEN"):
            config_data.setdefault("panes", {})["show_hidden"] = os.getenv("DUALPANE_SHOW_HIDDEN").lower() in TRUE_VALUES

        # Transfers
        if os.getenv("DUALPANE_VERIFY_COPIES"):
            config_data.setdefault("transfer", {})["verify_copies"] = os.getenv("DUALPANE_VERIFY_COPIES").lower() in TRUE_VALUES

        # Watcher
        if os.getenv("DUALPANE_WATCH"):
            config_data.setdefault("watcher", {})["enabled"] = os.getenv("DUALPANE_WATCH").lower() in TRUE_VALUES

        return config_data

    def save(self, config: Config, path: Optional[str] = None) -> None:
        """
        Save configuration to YAML file.

        Args:
            config: Config object to save
            path: Path to save to (uses default if None)
        """
        save_path = Path(path or self.config_path).expanduser()
        save_path.parent.mkdir(parents=True, exist_ok=True)

        with open(save_path, 'w', encoding='utf-8') as f:
            yaml.safe_dump(config.dict(), f, default_flow_style=False, sort_keys=False)

    def reload(self) -> Config:
        """Reload configuration from file."""
        return self.load()

    @property
    def config(self) -> Optional[Config]:
        """Get the current configuration object."""
        return self._config


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Convenience function to load configuration.

    Args:
        config_path: Optional path to config file

    Returns:
        Loaded and validated Config object
    """
    loader = ConfigLoader(config_path)
    return loader.load()
