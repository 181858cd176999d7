"""
Panes Module

Directory listing and per-pane navigation state.

Author: DualPane Project
License: MIT
"""

from .listing import DirectoryEntry, ListingError, list_directory
from .pane import ExplorerPane
from .session import DualPaneSession

__all__ = ['DirectoryEntry', 'ListingError', 'list_directory', 'ExplorerPane', 'DualPaneSession']
