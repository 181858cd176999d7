"""
DualPane

Non-visual core of a two-pane file explorer: pane navigation and listing,
and recursive copy/move of dropped files and folders.

Author: DualPane Project
License: MIT
"""

__version__ = "0.1.0"
