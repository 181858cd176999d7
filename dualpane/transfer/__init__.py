"""
Transfer Module

Recursive copy/move of dropped files and folders with per-item results.

Author: DualPane Project
License: MIT
"""

from .models import (
    CTRL_KEY_STATE,
    ItemResult,
    ItemStatus,
    TransferErrorKind,
    TransferMode,
    TransferOutcome,
    TransferRequest,
)
from .engine import DirectoryTransferEngine, ItemTransferError, transfer

__all__ = [
    'CTRL_KEY_STATE', 'ItemResult', 'ItemStatus', 'TransferErrorKind',
    'TransferMode', 'TransferOutcome', 'TransferRequest',
    'DirectoryTransferEngine', 'ItemTransferError', 'transfer'
]
