"""
Dual Pane Session

Wires the left and right panes to a shared transfer engine according to
the configuration, and optionally keeps them refreshed by a watcher.

Author: DualPane Project
License: MIT
"""

from typing import Callable, Iterable, Optional

from ..utils.logger import get_logger
from ..config.schema import Config
from ..transfer.engine import DirectoryTransferEngine
from ..transfer.models import TransferOutcome
from .pane import ExplorerPane

logger = get_logger(__name__)


class DualPaneSession:
    """
    The two panes of the explorer window.
    """

    def __init__(
        self,
        config: Optional[Config] = None,
        on_change: Optional[Callable[[ExplorerPane], None]] = None
    ):
        """
        Initialize both panes.

        Args:
            config: Configuration object (defaults apply when None)
            on_change: Called with a pane after the watcher refreshed it
        """
        self.config = config or Config()
        self.engine = DirectoryTransferEngine(self.config.transfer)

        panes_config = self.config.panes
        self.left = ExplorerPane(
            self.engine,
            start_path=panes_config.left_path,
            show_hidden=panes_config.show_hidden,
            name="left"
        )
        self.right = ExplorerPane(
            self.engine,
            start_path=panes_config.right_path,
            show_hidden=panes_config.show_hidden,
            name="right"
        )

        self.watcher = None
        if self.config.watcher.enabled:
            from ..monitoring.watcher import PaneWatcher
            self.watcher = PaneWatcher(
                [self.left, self.right],
                on_change=on_change,
                debounce_seconds=self.config.watcher.debounce_seconds
            )

        logger.info(f"Session started: left={self.left.current_path}, right={self.right.current_path}")

    def opposite(self, pane: ExplorerPane) -> ExplorerPane:
        """Return the other pane."""
        if pane is self.left:
            return self.right
        if pane is self.right:
            return self.left
        raise ValueError(f"Pane does not belong to this session: {pane!r}")

    def drag_between(self, source: ExplorerPane, names: Iterable[str], key_state: int = 0) -> TransferOutcome:
        """
        Drop the named entries of ``source`` into the opposite pane.

        Args:
            source: Pane the drag started in
            names: Entry names selected in the source pane
            key_state: Drag key state; Ctrl held copies, otherwise move

        Returns:
            TransferOutcome of the drop
        """
        target = self.opposite(source)
        outcome = target.accept_drop(source.resolve_selection(names), key_state)
        source.refresh()
        return outcome

    def start(self):
        """Start the watcher, if enabled."""
        if self.watcher:
            self.watcher.start()

    def close(self):
        """Stop the watcher, if running."""
        if self.watcher:
            self.watcher.stop()

    def __enter__(self) -> 'DualPaneSession':
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb):
        self.close()
