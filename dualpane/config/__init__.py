"""
DualPane Configuration Module

Handles configuration loading, validation, and management. Supports
YAML-based configuration with environment variable overrides.

Author: DualPane Project
License: MIT
"""

from .schema import Config, AppConfig, PanesConfig, TransferConfig, WatcherConfig, LogLevel
from .config_loader import ConfigLoader, load_config

__all__ = [
    'Config', 'AppConfig', 'PanesConfig', 'TransferConfig', 'WatcherConfig',
    'LogLevel', 'ConfigLoader', 'load_config'
]
