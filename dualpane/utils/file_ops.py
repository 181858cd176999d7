"""
File Operation Utilities

Provides hashing, size formatting, directory creation and path
relationship helpers shared by the transfer engine and the panes.

Author: DualPane Project
License: MIT
"""

import os
import hashlib
from pathlib import Path
from typing import Union

from .logger import get_logger

logger = get_logger(__name__)

PathLike = Union[str, Path]

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB")


def calculate_file_hash(file_path: PathLike, algorithm: str = "sha256", chunk_size: int = 65536) -> str:
    """
    Calculate hash of a file.

    Args:
        file_path: Path to the file
        algorithm: Hash algorithm (md5, sha1, sha256, etc.)
        chunk_size: Size of chunks to read (bytes)

    Returns:
        Hexadecimal hash string

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If algorithm is unsupported
    """
    if not os.path.exists(file_path):
        raise FileNotFoundError(f"File not found: {file_path}")

    try:
        hash_func = hashlib.new(algorithm)
    except ValueError:
        raise ValueError(f"Unsupported hash algorithm: {algorithm}")

    with open(file_path, 'rb') as f:
        while chunk := f.read(chunk_size):
            hash_func.update(chunk)

    return hash_func.hexdigest()


def files_match(first: PathLike, second: PathLike, algorithm: str = "sha256") -> bool:
    """
    Check whether two files have identical content.

    Sizes are compared first so differing files are rejected without hashing.
    """
    if os.path.getsize(first) != os.path.getsize(second):
        return False
    return calculate_file_hash(first, algorithm) == calculate_file_hash(second, algorithm)


def format_file_size(size_bytes: int) -> str:
    """
    Format a byte count for display.

    Uses 1024 steps and at most two decimals, dropping trailing zeros
    (``1536`` -> ``"1.5 KB"``, ``1024`` -> ``"1 KB"``).

    Args:
        size_bytes: Size in bytes

    Returns:
        Human readable size string
    """
    size = float(size_bytes)
    order = 0

    while size >= 1024 and order < len(SIZE_UNITS) - 1:
        order += 1
        size /= 1024

    text = f"{size:.2f}".rstrip("0").rstrip(".")
    return f"{text} {SIZE_UNITS[order]}"


def ensure_directory(directory: PathLike) -> bool:
    """
    Ensure a directory exists, creating it if necessary.

    Args:
        directory: Directory path

    Returns:
        True if directory exists or was created
    """
    try:
        Path(directory).mkdir(parents=True, exist_ok=True)
        return True
    except OSError as e:
        logger.error(f"Failed to create directory {directory}: {e}")
        return False


def is_within(path: PathLike, ancestor: PathLike) -> bool:
    """Return True if ``path`` is ``ancestor`` or lies below it."""
    resolved = Path(os.path.realpath(path))
    base = Path(os.path.realpath(ancestor))
    return resolved == base or base in resolved.parents


def is_hidden(path: PathLike) -> bool:
    """Check if a file or folder is hidden (dot-prefixed name)."""
    return Path(path).name.startswith('.')
