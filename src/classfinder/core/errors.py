"""classfinder error types with typed error codes.

Error code ranges:
- 2xxx: Config
- 3xxx: Filesystem
- 4xxx: Reflection

Heuristic misses (a file without a trustworthy declaration) are not errors
and never raise.
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any


class ErrorCode(IntEnum):
    """Typed error codes for programmatic handling."""

    # Config (2xxx)
    CONFIG_PARSE_ERROR = 2001
    CONFIG_INVALID_VALUE = 2002
    CONFIG_UNKNOWN_ATTRIBUTE = 2003

    # Filesystem (3xxx)
    FS_PATH_NOT_FOUND = 3001
    FS_NOT_A_DIRECTORY = 3002
    FS_UNREADABLE = 3003

    # Reflection (4xxx)
    REFLECTION_UNRESOLVABLE = 4001
    REFLECTION_FAILED = 4002
    ATTRIBUTE_AMBIGUOUS = 4003


@dataclass(frozen=True, slots=True)
class ClassFinderError(Exception):
    """Base error with structured context."""

    code: ErrorCode
    message: str
    retryable: bool = False
    details: dict[str, Any] = field(default_factory=dict)

    @property
    def error_name(self) -> str:
        """String identifier for logging (e.g., 'FS_PATH_NOT_FOUND')."""
        return self.code.name

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code.value,
            "error": self.error_name,
            "message": self.message,
            "retryable": self.retryable,
            "details": self.details,
        }

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.error_name}: {self.message}"


class ConfigError(ClassFinderError):
    """Configuration-related errors. Raised before any scanning begins."""

    @classmethod
    def parse_error(cls, path: str, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_PARSE_ERROR,
            message=f"Failed to parse config at {path}: {reason}",
            details={"path": path, "reason": reason},
        )

    @classmethod
    def invalid_value(cls, field: str, value: Any, reason: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_INVALID_VALUE,
            message=f"Invalid value for '{field}': {reason}",
            details={"field": field, "value": str(value), "reason": reason},
        )

    @classmethod
    def unknown_attribute(cls, name: str) -> "ConfigError":
        return cls(
            code=ErrorCode.CONFIG_UNKNOWN_ATTRIBUTE,
            message=f"Attribute class {name} does not exist",
            details={"attribute": name},
        )


class FileSystemError(ClassFinderError):
    """Missing or unreadable roots and files."""

    @classmethod
    def not_found(cls, path: str) -> "FileSystemError":
        return cls(
            code=ErrorCode.FS_PATH_NOT_FOUND,
            message=f"Path does not exist: {path}",
            details={"path": path},
        )

    @classmethod
    def not_a_directory(cls, path: str) -> "FileSystemError":
        return cls(
            code=ErrorCode.FS_NOT_A_DIRECTORY,
            message=f"Not a directory: {path}",
            details={"path": path},
        )

    @classmethod
    def unreadable(cls, path: str, reason: str) -> "FileSystemError":
        return cls(
            code=ErrorCode.FS_UNREADABLE,
            message=f"Unable to open {path}: {reason}",
            details={"path": path, "reason": reason},
        )


class ReflectionError(ClassFinderError):
    """Reflection failed for an identity."""

    @classmethod
    def unresolvable(cls, identity: str) -> "ReflectionError":
        return cls(
            code=ErrorCode.REFLECTION_UNRESOLVABLE,
            message=f"Unable to load class: {identity}",
            details={"identity": identity},
        )

    @classmethod
    def failed(cls, identity: str, reason: str) -> "ReflectionError":
        return cls(
            code=ErrorCode.REFLECTION_FAILED,
            message=f"Reflection failed for {identity}: {reason}",
            details={"identity": identity, "reason": reason},
        )


class AmbiguousAttributeError(ClassFinderError):
    """More than one attribute instance where exactly one was requested."""

    @classmethod
    def multiple(cls, identity: str, attribute: str, count: int) -> "AmbiguousAttributeError":
        return cls(
            code=ErrorCode.ATTRIBUTE_AMBIGUOUS,
            message=f"{identity} carries {count} {attribute} attributes, expected at most one",
            details={"identity": identity, "attribute": attribute, "count": count},
        )
