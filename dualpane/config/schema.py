"""
Configuration Schema and Models

Defines Pydantic models for the configuration schema, providing validation,
default values, and type checking for all configuration options.

Author: DualPane Project
License: MIT
"""

import hashlib
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field, validator
from pathlib import Path


class LogLevel(str, Enum):
    """Logging level options."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class AppConfig(BaseModel):
    """Logging and general application settings."""

    log_level: LogLevel = Field(
        default=LogLevel.INFO.value,
        description="Application logging level"
    )
    log_to_file: bool = Field(
        default=False,
        description="Enable logging to file"
    )
    log_file_path: str = Field(
        default="~/.local/state/dualpane/dualpane.log",
        description="Path of the rotating log file"
    )
    log_rotation_size: int = Field(
        default=1048576,  # 1MB
        description="Log file size before rotation (bytes)"
    )
    log_retention_count: int = Field(
        default=3,
        description="Number of rotated log files to keep"
    )
    json_format: bool = Field(
        default=False,
        description="Emit logs as JSON"
    )

    class Config:
        """Pydantic configuration."""
        use_enum_values = True


class PanesConfig(BaseModel):
    """Start locations and listing options for the two panes."""

    left_path: Optional[str] = Field(
        default=None,
        description="Start directory of the left pane (None uses the home directory)"
    )
    right_path: Optional[str] = Field(
        default=None,
        description="Start directory of the right pane (None uses the home directory)"
    )
    show_hidden: bool = Field(
        default=True,
        description="List dot-prefixed files and folders"
    )

    @validator("left_path", "right_path")
    def validate_paths(cls, v):
        """Ensure start paths are absolute."""
        if v is not None and not Path(v).expanduser().is_absolute():
            raise ValueError(f"Pane start path must be absolute: {v}")
        return v


class TransferConfig(BaseModel):
    """Copy and move behaviour."""

    preserve_metadata: bool = Field(
        default=True,
        description="Copy timestamps and permission bits along with file data"
    )
    verify_copies: bool = Field(
        default=False,
        description="Compare hashes of each copied file with its source"
    )
    hash_algorithm: str = Field(
        default="sha256",
        description="Hash algorithm used for copy verification"
    )

    @validator("hash_algorithm")
    def validate_hash_algorithm(cls, v):
        """Ensure the algorithm is available in hashlib."""
        v = v.lower()
        if v not in hashlib.algorithms_available:
            raise ValueError(f"Unsupported hash algorithm: {v}")
        return v


class WatcherConfig(BaseModel):
    """Directory watching for automatic pane refresh."""

    enabled: bool = Field(
        default=False,
        description="Refresh panes when their directory changes on disk"
    )
    debounce_seconds: float = Field(
        default=0.5,
        description="Quiet period before a change triggers a refresh"
    )

    @validator("debounce_seconds")
    def validate_debounce(cls, v):
        """Reject negative debounce periods."""
        if v < 0:
            raise ValueError(f"debounce_seconds must not be negative: {v}")
        return v


class Config(BaseModel):
    """
    Root configuration model for DualPane.

    Loaded from config.yaml and overridable by environment variables.
    """

    app: AppConfig = Field(default_factory=AppConfig)
    panes: PanesConfig = Field(default_factory=PanesConfig)
    transfer: TransferConfig = Field(default_factory=TransferConfig)
    watcher: WatcherConfig = Field(default_factory=WatcherConfig)

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
        validate_assignment = True
