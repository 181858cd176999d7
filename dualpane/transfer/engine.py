"""
Directory Transfer Engine

Copies or moves dropped files and folders into a destination directory.
Every source path gets its own result; an error on one item is recorded
and the batch continues with the next.

Author: DualPane Project
License: MIT
"""

import os
import errno
import shutil
from pathlib import Path
from typing import Optional

from ..utils.logger import get_logger
from ..utils.file_ops import calculate_file_hash, files_match, is_within
from ..config.schema import TransferConfig
from .models import (
    ItemResult,
    TransferErrorKind,
    TransferMode,
    TransferOutcome,
    TransferRequest,
)

logger = get_logger(__name__)


class ItemTransferError(Exception):
    """An item cannot be transferred as requested (conflict or failed check)."""


class DirectoryTransferEngine:
    """
    Recursive copy/move of files and folders.

    Features:
    - Files overwrite existing files at the destination
    - Folders are replicated depth first on copy
    - Folders are renamed in place on move, with copy-then-delete when the
      destination already exists or lives on another file system
    - Symbolic links are recreated as links, never followed
    - Optional hash verification of transferred files

    The engine keeps no state between requests.
    """

    def __init__(self, settings: Optional[TransferConfig] = None):
        """
        Initialize the transfer engine.

        Args:
            settings: Transfer settings (defaults apply when None)
        """
        self.settings = settings or TransferConfig()
        self._copy = shutil.copy2 if self.settings.preserve_metadata else shutil.copy

    def transfer(self, request: TransferRequest) -> TransferOutcome:
        """
        Transfer every source of the request into its destination directory.

        Args:
            request: Sources, destination directory and mode

        Returns:
            TransferOutcome with one result per source, in request order
        """
        outcome = TransferOutcome(request=request)
        destination_dir = request.destination_dir

        logger.info(
            f"{request.mode.value.capitalize()} {len(request.sources)} item(s) to {destination_dir}"
        )

        destination_error = self._prepare_destination(destination_dir)

        for source in request.sources:
            if destination_error:
                outcome.results.append(ItemResult.failure(
                    source,
                    TransferErrorKind.DESTINATION_UNWRITABLE,
                    destination_error
                ))
                continue

            outcome.results.append(self._transfer_item(source, destination_dir, request.mode))

        if outcome.all_succeeded:
            logger.info(f"Transfer finished: {len(outcome)} item(s) succeeded")
        else:
            logger.warning(
                f"Transfer finished with errors: {len(outcome.succeeded)} succeeded, "
                f"{len(outcome.failed)} failed"
            )

        return outcome

    def _prepare_destination(self, destination_dir: Path) -> Optional[str]:
        """
        Create the destination directory if needed.

        Returns:
            Error message if the directory cannot receive items, None otherwise
        """
        try:
            destination_dir.mkdir(parents=True, exist_ok=True)
        except FileExistsError:
            message = f"Destination is not a directory: {destination_dir}"
            logger.error(message)
            return message
        except OSError as e:
            logger.error(f"Cannot create destination {destination_dir}: {e}")
            return f"Cannot create destination: {e}"

        if not os.access(destination_dir, os.W_OK | os.X_OK):
            message = f"Destination is not writable: {destination_dir}"
            logger.error(message)
            return message

        return None

    def _transfer_item(self, source: Path, destination_dir: Path, mode: TransferMode) -> ItemResult:
        """Transfer one source path, converting every error into a failed result."""
        if not source.name:
            return ItemResult.failure(
                source,
                TransferErrorKind.IO_FAILURE,
                f"Cannot determine a name for {source}"
            )

        destination = destination_dir / source.name

        if not os.path.lexists(source):
            logger.warning(f"Source not found: {source}")
            return ItemResult.failure(
                source,
                TransferErrorKind.SOURCE_NOT_FOUND,
                f"Source not found: {source}",
                destination
            )

        try:
            if os.path.realpath(source.parent) == os.path.realpath(destination_dir):
                if mode is TransferMode.MOVE:
                    logger.debug(f"Already in place: {source}")
                    return ItemResult.success(source, destination)
                raise ItemTransferError("Source and destination are the same")

            if source.is_symlink():
                self._transfer_link(source, destination, mode)
            elif source.is_file():
                self._transfer_file(source, destination, mode)
            elif source.is_dir():
                self._transfer_directory(source, destination, mode)
            else:
                raise ItemTransferError(f"Unsupported file type: {source}")

        except ItemTransferError as e:
            logger.warning(f"Cannot {mode.value} {source}: {e}")
            return ItemResult.failure(source, TransferErrorKind.IO_FAILURE, str(e), destination)
        except PermissionError as e:
            logger.error(f"Permission error processing {source}: {e}")
            return ItemResult.failure(
                source, TransferErrorKind.PERMISSION_DENIED, f"Permission denied: {e}", destination
            )
        except FileNotFoundError as e:
            # The source can vanish between the drop and the copy
            kind = (
                TransferErrorKind.IO_FAILURE if os.path.lexists(source)
                else TransferErrorKind.SOURCE_NOT_FOUND
            )
            logger.error(f"File disappeared while processing {source}: {e}")
            return ItemResult.failure(source, kind, str(e), destination)
        except OSError as e:
            logger.error(f"OS error processing {source}: {e}")
            return ItemResult.failure(source, TransferErrorKind.IO_FAILURE, str(e), destination)
        except Exception as e:
            logger.exception(f"Unexpected error processing {source}: {e}")
            return ItemResult.failure(
                source, TransferErrorKind.IO_FAILURE, f"Unexpected error: {e}", destination
            )

        logger.debug(f"{mode.value.capitalize()}: {source} -> {destination}")
        return ItemResult.success(source, destination)

    # Files and links

    def _transfer_file(self, source: Path, destination: Path, mode: TransferMode):
        if destination.is_dir() and not destination.is_symlink():
            raise ItemTransferError(f"Destination is an existing folder: {destination}")

        if mode is TransferMode.COPY:
            self._copy_file(source, destination)
        else:
            self._move_file(source, destination)

    def _copy_file(self, source: Path, destination: Path):
        """Copy one file over whatever file or link sits at the destination."""
        if destination.is_symlink():
            # Copying onto a link would write through to its target
            destination.unlink()

        self._copy(str(source), str(destination))

        if self.settings.verify_copies and not files_match(
            source, destination, self.settings.hash_algorithm
        ):
            logger.error(f"Hash mismatch after copy: {destination}")
            destination.unlink()
            raise ItemTransferError(f"File integrity check failed for {destination}")

    def _move_file(self, source: Path, destination: Path):
        if destination.is_symlink():
            destination.unlink()
        elif destination.exists() and os.path.samefile(source, destination):
            # Hard links to one inode: rename would leave both names in place
            source.unlink()
            return

        source_hash = None
        if self.settings.verify_copies:
            source_hash = calculate_file_hash(source, self.settings.hash_algorithm)

        # Renames when possible, copies then deletes across file systems
        shutil.move(str(source), str(destination))

        if source_hash and calculate_file_hash(destination, self.settings.hash_algorithm) != source_hash:
            logger.error(f"Hash mismatch after move: {destination}")
            raise ItemTransferError(f"File integrity check failed for {destination}")

    def _transfer_link(self, source: Path, destination: Path, mode: TransferMode):
        if destination.is_dir() and not destination.is_symlink():
            raise ItemTransferError(f"Destination is an existing folder: {destination}")

        if os.path.lexists(destination):
            destination.unlink()

        if mode is TransferMode.COPY:
            self._copy(str(source), str(destination), follow_symlinks=False)
        else:
            shutil.move(str(source), str(destination))

    # Folders

    def _transfer_directory(self, source: Path, destination: Path, mode: TransferMode):
        if destination.is_symlink() or (os.path.lexists(destination) and not destination.is_dir()):
            raise ItemTransferError(f"Destination exists and is not a folder: {destination}")

        if is_within(destination, source):
            raise ItemTransferError(f"Cannot {mode.value} a folder into itself: {source}")

        if mode is TransferMode.COPY:
            self._copy_tree(source, destination)
        else:
            self._move_tree(source, destination)

    def _copy_tree(self, source: Path, destination: Path):
        """
        Replicate a folder: create it, copy its files, then recurse into
        its subfolders.
        """
        destination.mkdir(exist_ok=True)

        with os.scandir(source) as it:
            entries = sorted(it, key=lambda e: e.name)

        subdirs = []
        for entry in entries:
            target = destination / entry.name

            if entry.is_dir(follow_symlinks=False):
                subdirs.append(entry)
            elif entry.is_symlink():
                self._transfer_link(Path(entry.path), target, TransferMode.COPY)
            else:
                if target.is_dir() and not target.is_symlink():
                    raise ItemTransferError(f"Destination is an existing folder: {target}")
                self._copy_file(Path(entry.path), target)

        for entry in subdirs:
            target = destination / entry.name
            if target.is_symlink() or (os.path.lexists(target) and not target.is_dir()):
                raise ItemTransferError(f"Destination exists and is not a folder: {target}")
            self._copy_tree(Path(entry.path), target)

        if self.settings.preserve_metadata:
            shutil.copystat(str(source), str(destination))

    def _move_tree(self, source: Path, destination: Path):
        if not os.path.lexists(destination):
            try:
                os.rename(source, destination)
                return
            except OSError as e:
                if e.errno != errno.EXDEV:
                    raise
                logger.debug(f"Cross-device move of {source}, copying instead")

        # Merge into the existing folder (or cross-device): copy, then delete
        self._copy_tree(source, destination)
        shutil.rmtree(source)


def transfer(request: TransferRequest, settings: Optional[TransferConfig] = None) -> TransferOutcome:
    """
    Convenience function to run a single request.

    Args:
        request: Transfer request
        settings: Optional transfer settings

    Returns:
        TransferOutcome for the request
    """
    return DirectoryTransferEngine(settings).transfer(request)
