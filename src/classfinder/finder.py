"""Public entry point: find classes declared under a set of directories."""

from __future__ import annotations

import os
import time
from collections.abc import Iterable, Iterator, Mapping
from concurrent.futures import ThreadPoolExecutor

import structlog

from classfinder.config.models import ScannerConfig
from classfinder.core.logging import clear_scan_id, get_scan_id, set_scan_id
from classfinder.discovery.enumerator import enumerate_sources
from classfinder.discovery.paths import PathSet
from classfinder.discovery.registry import ClassRegistry
from classfinder.discovery.scanner import FileScanner
from classfinder.filtering import AttributeFilter, AttributeSpec
from classfinder.models import ClassInfo
from classfinder.reflection.catalog import TypeCatalog
from classfinder.reflection.imports import ImportCatalog

logger = structlog.get_logger()

PathLike = str | os.PathLike[str]


class ClassFinder:
    """Discover classes declared in source files beneath configured roots.

    Scanning is lazy: iteration, ``all()``, ``count()``, ``len()`` and
    truth testing scan every root not scanned yet, so each of them can raise
    the errors ``scan_files`` raises. Each root is scanned once unless it is
    added again.

        finder = ClassFinder.scan(["src", "plugins^"], catalog=catalog)
        for fingerprint, info in finder.with_attribute("App\\Attr\\Route").matching():
            ...
    """

    def __init__(
        self,
        catalog: TypeCatalog | None = None,
        config: ScannerConfig | None = None,
    ) -> None:
        self.config = config or ScannerConfig()
        separator = self.config.namespace_separator
        self.catalog: TypeCatalog = catalog if catalog is not None else ImportCatalog(separator)
        self.paths = PathSet(self.config.non_recursive_marker)
        self.registry = ClassRegistry()
        self.filter = AttributeFilter(self.catalog, separator)
        self._scanner = FileScanner(self.catalog, self.config)
        self._scanned: set[str] = set()

    @classmethod
    def scan(
        cls,
        directories: PathLike | Iterable[PathLike],
        *,
        catalog: TypeCatalog | None = None,
        config: ScannerConfig | None = None,
    ) -> ClassFinder:
        """Create a finder over one or many roots.

        Each root is recursive unless it ends in the non-recursive marker.
        """
        finder = cls(catalog, config)
        if isinstance(directories, (str, os.PathLike)):
            directories = [directories]
        for directory in directories:
            finder.in_directory(directory)
        return finder

    def in_directory(self, path: PathLike, recursive: bool | None = None) -> ClassFinder:
        entry = self.paths.add(path, recursive)
        self._scanned.discard(entry.path)
        return self

    def with_attribute(
        self,
        attributes: AttributeSpec | Iterable[AttributeSpec],
        require_all: bool = False,
    ) -> ClassFinder:
        """Restrict ``matching()`` to classes carrying the given attributes.

        Raises:
            ConfigError: If an attribute type does not exist.
        """
        self.filter.with_attribute(attributes, require_all)
        return self

    def scan_files(self) -> ClassFinder:
        """Scan every root not scanned yet.

        Raises:
            FileSystemError: If a root or file cannot be read. The scan aborts.
            ReflectionError: If the catalog fails while confirming an identity,
                e.g. a module that exists but raises on import. The scan aborts.
        """
        pending = [entry for entry in self.paths if entry.path not in self._scanned]
        if not pending:
            return self

        own_scan_id = get_scan_id() is None
        if own_scan_id:
            set_scan_id()
        try:
            for entry in pending:
                start = time.perf_counter()
                before = self.registry.count()
                logger.info("scan_started", root=entry.path, recursive=entry.recursive)

                files = enumerate_sources(entry.path, entry.recursive, config=self.config)
                self._parse(files)
                self._scanned.add(entry.path)

                logger.info(
                    "scan_completed",
                    root=entry.path,
                    discovered=self.registry.count() - before,
                    elapsed_ms=round((time.perf_counter() - start) * 1000, 2),
                )
        finally:
            if own_scan_id:
                clear_scan_id()
        return self

    def parse_files(self, *files: PathLike) -> ClassFinder:
        """Scan explicit files, bypassing directory enumeration.

        Raises:
            FileSystemError: If a file cannot be read.
            ReflectionError: If the catalog fails while confirming an identity.
        """
        self._parse(files)
        return self

    def _parse(self, files: Iterable[PathLike]) -> None:
        if self.config.max_workers > 1:
            with ThreadPoolExecutor(
                max_workers=self.config.max_workers,
                thread_name_prefix="classfinder-scan",
            ) as executor:
                # map() yields in submission order, so registration order stays stable
                for info in executor.map(self._scanner.scan, files):
                    if info is not None:
                        self.registry.register(info)
            return

        for file in files:
            info = self._scanner.scan(file)
            if info is not None:
                self.registry.register(info)

    def all(self) -> Mapping[str, ClassInfo]:
        return self.scan_files().registry.all()

    def count(self) -> int:
        return self.scan_files().registry.count()

    def __len__(self) -> int:
        """Number of discovered classes. Scans first, so ``bool(finder)`` may raise."""
        return self.count()

    def __iter__(self) -> Iterator[tuple[str, ClassInfo]]:
        return iter(self.scan_files().registry)

    def matching(self) -> Iterator[tuple[str, ClassInfo]]:
        """Lazily yield the discovered classes that pass the attribute filter.

        Raises:
            ReflectionError: If a discovered class can no longer be reflected.
        """
        return self.filter.select(iter(self))
