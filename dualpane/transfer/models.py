"""
Transfer Models

Request and outcome types exchanged between the panes and the
transfer engine.

Author: DualPane Project
License: MIT
"""

import os
from enum import Enum
from pathlib import Path
from typing import Iterator, List, Optional, Sequence
from dataclasses import dataclass, field

# Drag key-state bit set while Ctrl is held
CTRL_KEY_STATE = 8


class TransferMode(Enum):
    """Whether dropped items are copied or moved."""
    COPY = "copy"
    MOVE = "move"

    @classmethod
    def from_key_state(cls, key_state: int) -> 'TransferMode':
        """Holding Ctrl copies, anything else moves."""
        return cls.COPY if key_state & CTRL_KEY_STATE else cls.MOVE


class ItemStatus(Enum):
    """Result of transferring a single source path."""
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class TransferErrorKind(Enum):
    """Why an item failed."""
    SOURCE_NOT_FOUND = "source_not_found"
    PERMISSION_DENIED = "permission_denied"
    IO_FAILURE = "io_failure"
    DESTINATION_UNWRITABLE = "destination_unwritable"


@dataclass(frozen=True)
class TransferRequest:
    """
    One drop action: sources in order, the directory they land in, and
    the mode.
    """
    sources: Sequence[Path]
    destination_dir: Path
    mode: TransferMode = TransferMode.MOVE

    def __post_init__(self):
        # Absolute and free of "." / ".." so every source has a real basename
        object.__setattr__(self, 'sources', tuple(Path(os.path.abspath(p)) for p in self.sources))
        object.__setattr__(self, 'destination_dir', Path(os.path.abspath(self.destination_dir)))


@dataclass
class ItemResult:
    """Result of transferring one source path."""
    source_path: Path
    status: ItemStatus
    destination_path: Optional[Path] = None
    error_kind: Optional[TransferErrorKind] = None
    error_message: Optional[str] = None

    @property
    def succeeded(self) -> bool:
        return self.status is ItemStatus.SUCCEEDED

    @classmethod
    def success(cls, source_path: Path, destination_path: Path) -> 'ItemResult':
        return cls(
            source_path=source_path,
            status=ItemStatus.SUCCEEDED,
            destination_path=destination_path
        )

    @classmethod
    def failure(
        cls,
        source_path: Path,
        kind: TransferErrorKind,
        message: str,
        destination_path: Optional[Path] = None
    ) -> 'ItemResult':
        return cls(
            source_path=source_path,
            status=ItemStatus.FAILED,
            destination_path=destination_path,
            error_kind=kind,
            error_message=message
        )


@dataclass
class TransferOutcome:
    """
    Per-item results of a request, in the order of its sources.
    """
    request: TransferRequest
    results: List[ItemResult] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.results)

    def __iter__(self) -> Iterator[ItemResult]:
        return iter(self.results)

    def __getitem__(self, index: int) -> ItemResult:
        return self.results[index]

    @property
    def succeeded(self) -> List[ItemResult]:
        return [r for r in self.results if r.succeeded]

    @property
    def failed(self) -> List[ItemResult]:
        return [r for r in self.results if not r.succeeded]

    @property
    def all_succeeded(self) -> bool:
        return not self.failed

    def error_messages(self) -> List[str]:
        """Messages for the failed items, ready to show to the user."""
        return [
            f"Error processing {r.source_path}: {r.error_message}"
            for r in self.failed
        ]
