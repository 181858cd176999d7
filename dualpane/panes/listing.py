"""
Directory Listing

Reads a directory into display-ready entries: folders first, then files,
each with size, type and modification time columns.

Author: DualPane Project
License: MIT
"""

import os
from pathlib import Path
from typing import List, Optional, Union
from dataclasses import dataclass
from datetime import datetime

from ..utils.logger import get_logger
from ..utils.file_ops import format_file_size, is_hidden

logger = get_logger(__name__)

FOLDER_SIZE_LABEL = "<DIR>"
FOLDER_TYPE_LABEL = "Folder"


class ListingError(OSError):
    """A directory could not be read."""

    def __init__(self, path: Path, reason: str):
        super().__init__(f"Cannot list {path}: {reason}")
        self.path = path
        self.reason = reason


@dataclass(frozen=True)
class DirectoryEntry:
    """A single row of a pane listing."""
    name: str
    path: Path
    is_dir: bool
    size: Optional[int]
    modified: datetime

    @property
    def size_display(self) -> str:
        if self.is_dir:
            return FOLDER_SIZE_LABEL
        return format_file_size(self.size or 0)

    @property
    def type_display(self) -> str:
        """``Folder`` for directories, the extension (``.txt``) for files."""
        if self.is_dir:
            return FOLDER_TYPE_LABEL
        return self.path.suffix

    @property
    def modified_display(self) -> str:
        return self.modified.strftime("%Y-%m-%d %H:%M:%S")

    def columns(self) -> List[str]:
        """Name, Size, Type and Modified, in listing order."""
        return [self.name, self.size_display, self.type_display, self.modified_display]


def _entry_from_scan(entry: os.DirEntry) -> Optional[DirectoryEntry]:
    try:
        is_dir = entry.is_dir()
        try:
            stat = entry.stat()
        except FileNotFoundError:
            # Dangling symbolic link
            stat = entry.stat(follow_symlinks=False)
    except OSError as e:
        logger.debug(f"Skipping unreadable entry {entry.path}: {e}")
        return None

    return DirectoryEntry(
        name=entry.name,
        path=Path(entry.path),
        is_dir=is_dir,
        size=None if is_dir else stat.st_size,
        modified=datetime.fromtimestamp(stat.st_mtime)
    )


def list_directory(path: Union[str, Path], show_hidden: bool = True) -> List[DirectoryEntry]:
    """
    List the contents of a directory.

    Args:
        path: Directory to list
        show_hidden: Include dot-prefixed names

    Returns:
        Folders followed by files, each sorted case-insensitively by name

    Raises:
        ListingError: If the directory cannot be read
    """
    directory = Path(path)

    try:
        with os.scandir(directory) as it:
            scanned = list(it)
    except OSError as e:
        raise ListingError(directory, e.strerror or str(e)) from e

    folders = []
    files = []
    for scan_entry in scanned:
        if not show_hidden and is_hidden(scan_entry.name):
            continue

        entry = _entry_from_scan(scan_entry)
        if entry is None:
            continue

        (folders if entry.is_dir else files).append(entry)

    folders.sort(key=lambda e: e.name.casefold())
    files.sort(key=lambda e: e.name.casefold())

    logger.debug(f"Listed {directory}: {len(folders)} folder(s), {len(files)} file(s)")
    return folders + files
