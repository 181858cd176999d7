"""
Shared utilities: logging setup and file helpers.

Author: DualPane Project
License: MIT
"""
