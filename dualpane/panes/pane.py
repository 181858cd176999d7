"""
Explorer Pane

Navigation state of one browser pane: its current directory, the listing
shown for it, and drop handling into it.

Author: DualPane Project
License: MIT
"""

import os
from pathlib import Path
from typing import Callable, Iterable, List, Optional, Union

from ..utils.logger import get_logger
from ..transfer.engine import DirectoryTransferEngine
from ..transfer.models import TransferMode, TransferOutcome, TransferRequest
from .listing import DirectoryEntry, ListingError, list_directory

logger = get_logger(__name__)

NavigationListener = Callable[['ExplorerPane'], None]


class ExplorerPane:
    """
    One side of the explorer.

    The pane owns its current path; drops into the pane are transferred
    into that path by the engine it was given.
    """

    def __init__(
        self,
        engine: DirectoryTransferEngine,
        start_path: Optional[Union[str, Path]] = None,
        show_hidden: bool = True,
        name: str = "pane"
    ):
        """
        Initialize the pane and load its start directory.

        Args:
            engine: Engine used for drops into this pane
            start_path: Initial directory (home directory if None or missing)
            show_hidden: List dot-prefixed entries
            name: Label used in log messages
        """
        self.engine = engine
        self.show_hidden = show_hidden
        self.name = name
        self.entries: List[DirectoryEntry] = []
        self.last_error: Optional[str] = None
        self._listeners: List[NavigationListener] = []

        self.current_path = Path.home()
        if start_path is None or not self.navigate_to(start_path):
            if start_path is not None:
                logger.warning(f"[{name}] Start path not found, using {self.current_path}: {start_path}")
            self.refresh()

    def add_listener(self, listener: NavigationListener):
        """Register a callback invoked after every navigation."""
        self._listeners.append(listener)

    def remove_listener(self, listener: NavigationListener):
        if listener in self._listeners:
            self._listeners.remove(listener)

    def navigate_to(self, path: Union[str, Path]) -> bool:
        """
        Make ``path`` the current directory.

        Args:
            path: Target directory

        Returns:
            True if the pane moved, False if the path is not a directory
        """
        target = Path(path).expanduser()
        try:
            if not target.is_dir():
                logger.debug(f"[{self.name}] Not a directory: {target}")
                return False
        except OSError as e:
            logger.error(f"[{self.name}] Error accessing path {target}: {e}")
            self.last_error = f"Error accessing path: {e}"
            return False

        self.current_path = Path(os.path.abspath(target))
        self.refresh()

        for listener in list(self._listeners):
            listener(self)

        return True

    def go_up(self) -> bool:
        """Navigate to the parent directory, if there is one."""
        parent = self.current_path.parent
        if parent == self.current_path:
            return False
        return self.navigate_to(parent)

    def open_entry(self, name: str) -> bool:
        """Enter the named entry if it is a directory."""
        return self.navigate_to(self.current_path / name)

    def refresh(self) -> List[DirectoryEntry]:
        """
        Re-read the current directory.

        On failure the listing is emptied and the error kept in
        ``last_error``.
        """
        try:
            self.entries = list_directory(self.current_path, show_hidden=self.show_hidden)
            self.last_error = None
        except ListingError as e:
            logger.error(f"[{self.name}] Error refreshing view: {e}")
            self.entries = []
            self.last_error = f"Error refreshing view: {e.reason}"
        return self.entries

    def resolve_selection(self, names: Iterable[str]) -> List[Path]:
        """Absolute paths of the selected entry names, for a drag start."""
        return [self.current_path / name for name in names]

    def accept_drop(self, paths: Iterable[Union[str, Path]], key_state: int = 0) -> TransferOutcome:
        """
        Transfer dropped paths into the current directory.

        Args:
            paths: Dropped file and folder paths
            key_state: Drag key state; Ctrl held copies, otherwise move

        Returns:
            TransferOutcome of the drop
        """
        request = TransferRequest(
            sources=[Path(p) for p in paths],
            destination_dir=self.current_path,
            mode=TransferMode.from_key_state(key_state)
        )
        outcome = self.engine.transfer(request)

        for message in outcome.error_messages():
            logger.warning(f"[{self.name}] {message}")

        self.refresh()
        return outcome

    def __repr__(self) -> str:
        return f"ExplorerPane(name={self.name!r}, path={str(self.current_path)!r})"
