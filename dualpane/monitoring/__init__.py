"""
Monitoring Module

Watches pane directories for external changes.

Author: DualPane Project
License: MIT
"""

from .watcher import DirectoryChangeHandler, PaneWatcher

__all__ = ['DirectoryChangeHandler', 'PaneWatcher']
