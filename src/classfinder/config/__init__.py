"""Config module exports."""

from classfinder.config.loader import ClassFinderSettings, load_config
from classfinder.config.models import (
    ClassFinderConfig,
    LoggingConfig,
    LogOutputConfig,
    ScannerConfig,
)

__all__ = [
    "load_config",
    "ClassFinderConfig",
    "ClassFinderSettings",
    "LoggingConfig",
    "LogOutputConfig",
    "ScannerConfig",
]
