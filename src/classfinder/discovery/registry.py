"""Deduplicating registry of discovered classes, keyed by file fingerprint."""

from __future__ import annotations

import hashlib
import os
import threading
from collections.abc import Iterator, Mapping
from types import MappingProxyType

import structlog

from classfinder.config.constants import FINGERPRINT_HEX_DIGITS
from classfinder.models import ClassInfo

logger = structlog.get_logger()


def normalize_path(path: str | os.PathLike[str]) -> str:
    """Canonical absolute path of ``path`` with ``/`` separators.

    Relative spellings, ``..`` segments and symlinks all collapse onto the
    same physical file.
    """
    raw = os.fspath(path).replace("\\", "/")
    return os.path.realpath(raw).replace("\\", "/")


def fingerprint(path: str | os.PathLike[str]) -> str:
    """Deterministic 64-bit fingerprint of a normalized file path."""
    digest = hashlib.sha256(normalize_path(path).encode()).hexdigest()
    return digest[:FINGERPRINT_HEX_DIGITS]


class ClassRegistry:
    """Write-once mapping of fingerprint to ``ClassInfo``.

    The first registration for a file wins; later ones are no-ops.
    Iteration follows insertion order.
    """

    def __init__(self) -> None:
        self._found: dict[str, ClassInfo] = {}
        self._lock = threading.Lock()

    def register(self, info: ClassInfo) -> bool:
        """Insert ``info`` under its file fingerprint. True if newly inserted."""
        key = fingerprint(info.file)
        with self._lock:
            if key in self._found:
                inserted = False
            else:
                self._found[key] = info
                inserted = True

        if inserted:
            logger.debug("class_registered", class_name=info.class_name, fingerprint=key)
        else:
            logger.debug("duplicate_skipped", file=info.file, fingerprint=key)
        return inserted

    def all(self) -> Mapping[str, ClassInfo]:
        """Read-only view of every registered record."""
        return MappingProxyType(self._found)

    def get(self, key: str) -> ClassInfo | None:
        return self._found.get(key)

    def count(self) -> int:
        return len(self._found)

    def __len__(self) -> int:
        return len(self._found)

    def __contains__(self, key: object) -> bool:
        return key in self._found

    def __iter__(self) -> Iterator[tuple[str, ClassInfo]]:
        with self._lock:
            items = list(self._found.items())
        return iter(items)
