"""Core module exports."""

from classfinder.core.errors import (
    AmbiguousAttributeError,
    ClassFinderError,
    ConfigError,
    ErrorCode,
    FileSystemError,
    ReflectionError,
)
from classfinder.core.logging import (
    clear_scan_id,
    configure_logging,
    get_logger,
    get_scan_id,
    set_scan_id,
)

__all__ = [
    # Errors
    "AmbiguousAttributeError",
    "ClassFinderError",
    "ConfigError",
    "ErrorCode",
    "FileSystemError",
    "ReflectionError",
    # Logging
    "clear_scan_id",
    "configure_logging",
    "get_logger",
    "get_scan_id",
    "set_scan_id",
]
