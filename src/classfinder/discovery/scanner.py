"""Single-pass scan of one source file for its class declaration.

The scan is a cheap guess. A declaration only becomes a ``ClassInfo`` once
the type catalog confirms the composed identity resolves; anything else is a
heuristic miss and is skipped without error.
"""

from __future__ import annotations

import os

import structlog

from classfinder.config.models import ScannerConfig
from classfinder.core.errors import FileSystemError
from classfinder.discovery.classifier import LineKind, classify_line, normalize_line
from classfinder.discovery.registry import normalize_path
from classfinder.models import ClassInfo, join_identity
from classfinder.reflection.catalog import TypeCatalog

logger = structlog.get_logger()


class FileScanner:
    """Find the one top-level class a source file declares."""

    def __init__(self, catalog: TypeCatalog, config: ScannerConfig | None = None) -> None:
        self.catalog = catalog
        self.config = config or ScannerConfig()
        self._stop_tokens = frozenset(self.config.stop_tokens)

    def _read_header(self, path: str) -> tuple[str | None, str | None]:
        """Return (namespace, basename) from the declaration header of ``path``."""
        namespace: str | None = None
        try:
            with open(path, encoding=self.config.encoding, errors="replace") as stream:
                for raw in stream:
                    result = classify_line(normalize_line(raw), self._stop_tokens)
                    if result.kind is LineKind.NAMESPACE:
                        if namespace is None:
                            namespace = result.value
                    elif result.kind is LineKind.DECLARATION:
                        return namespace, result.value
                    elif result.kind is LineKind.STOP:
                        break
        except OSError as e:
            raise FileSystemError.unreadable(path, e.strerror or str(e)) from e
        return namespace, None

    def scan(self, file: str | os.PathLike[str]) -> ClassInfo | None:
        """Scan ``file``. Returns None on a heuristic miss.

        Raises:
            FileSystemError: If the file cannot be opened or read.
            ReflectionError: If the catalog fails while confirming the identity
                rather than simply not finding it.
        """
        path = normalize_path(file)
        namespace, name = self._read_header(path)
        if name is None:
            logger.debug("heuristic_miss", file=path, reason="no_declaration")
            return None

        separator = self.config.namespace_separator
        namespace = (namespace or "").strip(separator)
        identity = join_identity(namespace, name, separator)

        if not self.catalog.exists(identity):
            logger.debug("heuristic_miss", file=path, class_name=identity, reason="unresolvable")
            return None

        logger.debug("class_discovered", file=path, class_name=identity)
        return ClassInfo(
            class_name=identity,
            basename=name,
            namespace=namespace,
            file=path,
            catalog=self.catalog,
            separator=separator,
        )
