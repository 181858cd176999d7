"""
Pane Watcher

Watches the current directory of each pane and refreshes the pane when
its contents change on disk. Uses the watchdog library; events are
debounced so a burst of writes triggers a single refresh.

Author: DualPane Project
License: MIT
"""

import time
from threading import Lock
from typing import Callable, Dict, Iterable, List, Optional
from watchdog.observers import Observer
from watchdog.events import FileSystemEvent, FileSystemEventHandler

from ..utils.logger import get_logger
from ..panes.pane import ExplorerPane

logger = get_logger(__name__)

# Access notifications that never change a listing
IGNORED_EVENT_TYPES = {"opened", "closed", "closed_no_write"}


class DirectoryChangeHandler(FileSystemEventHandler):
    """
    Forwards changes in one watched directory to a callback.
    """

    def __init__(self, on_change: Callable[[], None]):
        super().__init__()
        self.on_change = on_change

    def on_any_event(self, event: FileSystemEvent):
        if event.event_type in IGNORED_EVENT_TYPES:
            return
        logger.debug(f"Directory change: {event.event_type} {event.src_path}")
        self.on_change()


class PaneWatcher:
    """
    Keeps pane listings in sync with the file system.

    The observer thread only records which panes changed. Refreshes run
    on the caller's thread in ``process_pending``, which the host event
    loop calls periodically.
    """

    def __init__(
        self,
        panes: Iterable[ExplorerPane],
        on_change: Optional[Callable[[ExplorerPane], None]] = None,
        debounce_seconds: float = 0.5,
        observer_factory: Callable = Observer
    ):
        """
        Initialize the watcher.

        Args:
            panes: Panes to keep refreshed
            on_change: Called with each pane after it was refreshed
            debounce_seconds: Quiet period before a change is applied
            observer_factory: Creates the watchdog observer
        """
        self.panes = list(panes)
        self.on_change = on_change
        self.debounce_seconds = debounce_seconds
        self._observer_factory = observer_factory
        self.observer = observer_factory()

        self._watches: Dict[int, object] = {}
        self._pending: Dict[int, float] = {}
        self._lock = Lock()
        self._is_running = False

    @property
    def is_running(self) -> bool:
        return self._is_running

    def start(self):
        """Start watching the current directory of every pane."""
        if self._is_running:
            logger.warning("PaneWatcher already running")
            return

        for pane in self.panes:
            self._watch(pane)
            pane.add_listener(self._on_navigated)

        self.observer.start()
        self._is_running = True

        logger.info(f"PaneWatcher started, watching {len(self._watches)} folder(s)")

    def stop(self):
        """Stop watching."""
        if not self._is_running:
            return

        for pane in self.panes:
            pane.remove_listener(self._on_navigated)

        self.observer.stop()
        self.observer.join(timeout=5.0)
        # Observer threads cannot be restarted
        self.observer = self._observer_factory()
        self._watches.clear()
        with self._lock:
            self._pending.clear()
        self._is_running = False

        logger.info("PaneWatcher stopped")

    def _watch(self, pane: ExplorerPane):
        """(Re)point the watch of a pane at its current directory."""
        key = id(pane)

        old_watch = self._watches.pop(key, None)
        if old_watch is not None:
            try:
                self.observer.unschedule(old_watch)
            except KeyError:
                logger.debug(f"Watch for {pane.name} was already removed")

        handler = DirectoryChangeHandler(lambda: self._mark_pending(key))
        try:
            self._watches[key] = self.observer.schedule(
                handler, str(pane.current_path), recursive=False
            )
            logger.debug(f"Watching {pane.current_path} for {pane.name}")
        except OSError as e:
            logger.warning(f"Cannot watch {pane.current_path}: {e}")

    def _on_navigated(self, pane: ExplorerPane):
        with self._lock:
            self._pending.pop(id(pane), None)
        self._watch(pane)

    def _mark_pending(self, key: int):
        with self._lock:
            self._pending[key] = time.monotonic()

    def process_pending(self) -> List[ExplorerPane]:
        """
        Refresh panes whose directory has been quiet for the debounce period.

        Returns:
            Panes that were refreshed
        """
        now = time.monotonic()
        ready = []

        with self._lock:
            for key, timestamp in list(self._pending.items()):
                if now - timestamp >= self.debounce_seconds:
                    ready.append(key)
                    del self._pending[key]

        refreshed = []
        for pane in self.panes:
            if id(pane) not in ready:
                continue
            pane.refresh()
            refreshed.append(pane)
            if self.on_change:
                try:
                    self.on_change(pane)
                except Exception as e:
                    logger.error(f"Error in change callback for {pane.name}: {e}")

        return refreshed

    def get_watched_folders(self) -> List[str]:
        """Current directories of the watched panes."""
        return [str(pane.current_path) for pane in self.panes if id(pane) in self._watches]
