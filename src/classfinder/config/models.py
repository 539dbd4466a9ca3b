"""Pydantic configuration models with env var support.

Configuration Hierarchy (highest to lowest precedence):
1. Direct kwargs to load_config()
2. Environment variables (CLASSFINDER__SECTION__KEY)
3. Project YAML (.classfinder/config.yaml)
4. Global YAML (~/.config/classfinder/config.yaml)
5. Built-in defaults (this file)

Environment Variable Format:
    CLASSFINDER__<SECTION>__<KEY>=<VALUE>

Examples:
    CLASSFINDER__LOGGING__LEVEL=DEBUG
    CLASSFINDER__SCANNER__SOURCE_EXTENSION=.inc
    CLASSFINDER__SCANNER__MAX_WORKERS=4
"""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field, field_validator

from classfinder.config.constants import (
    DEFAULT_HIDDEN_PREFIX,
    DEFAULT_NAMESPACE_SEPARATOR,
    DEFAULT_NON_RECURSIVE_MARKER,
    DEFAULT_SOURCE_EXTENSION,
    DEFAULT_STOP_TOKENS,
)

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class LogOutputConfig(BaseModel):
    """Single logging output configuration.

    Env vars: Not directly configurable via env (use YAML for multi-output).
    """

    format: Literal["json", "console"] = "console"
    destination: str = "stderr"  # stderr, stdout, or absolute file path
    level: LogLevel | None = None  # Inherits from parent if None

    @field_validator("destination")
    @classmethod
    def validate_destination(cls, v: str) -> str:
        if v in ("stderr", "stdout"):
            return v
        path = Path(v).expanduser()
        if not path.is_absolute():
            raise ValueError(f"File destination must be absolute path: {v}")
        return str(path)


class LoggingConfig(BaseModel):
    """Logging configuration.

    Env vars:
        CLASSFINDER__LOGGING__LEVEL: Log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
    """

    level: LogLevel = Field(
        default="INFO",
        description="Root log level. DEBUG logs every heuristic miss.",
    )
    outputs: list[LogOutputConfig] = Field(default_factory=lambda: [LogOutputConfig()])


class ScannerConfig(BaseModel):
    """Directory enumeration and line scanning.

    Env vars:
        CLASSFINDER__SCANNER__SOURCE_EXTENSION: Extension of candidate files
        CLASSFINDER__SCANNER__HIDDEN_PREFIX: Name prefix of skipped entries
        CLASSFINDER__SCANNER__NON_RECURSIVE_MARKER: Path suffix disabling recursion
        CLASSFINDER__SCANNER__NAMESPACE_SEPARATOR: Joins namespace and basename
        CLASSFINDER__SCANNER__STOP_TOKENS: JSON list of early-stop keywords
        CLASSFINDER__SCANNER__ENCODING: Text encoding of source files
        CLASSFINDER__SCANNER__MAX_WORKERS: Parallel per-file scans
    """

    source_extension: str = Field(
        default=DEFAULT_SOURCE_EXTENSION,
        description="Only files with this extension are scanned (case-sensitive).",
    )
    hidden_prefix: str = Field(
        default=DEFAULT_HIDDEN_PREFIX,
        description="Files and directories whose name starts with this are skipped.",
    )
    non_recursive_marker: str = Field(
        default=DEFAULT_NON_RECURSIVE_MARKER,
        description="A root path ending in this marker is scanned without recursion.",
    )
    namespace_separator: str = Field(
        default=DEFAULT_NAMESPACE_SEPARATOR,
        description="Separator between namespace segments and the basename.",
    )
    stop_tokens: list[str] = Field(
        default_factory=lambda: list(DEFAULT_STOP_TOKENS),
        description="A line opening with one of these words ends the scan of its file.",
    )
    encoding: str = Field(
        default="utf-8",
        description="Source file encoding. Undecodable bytes are replaced, never fatal.",
    )
    max_workers: int = Field(
        default=1,
        description="Parallel per-file scans within one root. "
        "Values >1 trade determinism of log ordering for throughput.",
    )

    @field_validator("source_extension")
    @classmethod
    def validate_source_extension(cls, v: str) -> str:
        if not v.startswith(".") or len(v) < 2:
            raise ValueError(f"Extension must start with '.', got {v!r}")
        return v

    @field_validator("hidden_prefix", "non_recursive_marker", "namespace_separator")
    @classmethod
    def validate_non_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("Must not be empty")
        return v

    @field_validator("stop_tokens")
    @classmethod
    def validate_stop_tokens(cls, v: list[str]) -> list[str]:
        for token in v:
            if not token.isidentifier():
                raise ValueError(f"Stop token must be a single word, got {token!r}")
        return v

    @field_validator("max_workers")
    @classmethod
    def validate_max_workers(cls, v: int) -> int:
        if v < 1:
            raise ValueError(f"max_workers must be >= 1, got {v}")
        return v


class ClassFinderConfig(BaseModel):
    """Root configuration for classfinder.

    All settings can be configured via:
    1. Environment variables: CLASSFINDER__SECTION__KEY
    2. YAML config files (project or global)
    3. Direct kwargs to load_config()
    """

    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    scanner: ScannerConfig = Field(default_factory=ScannerConfig)
