"""Discovery pipeline: roots -> files -> line scan -> registry."""

from classfinder.discovery.classifier import (
    DECLARATION_PREFIXES,
    LineKind,
    LineResult,
    build_declaration_prefixes,
    classify_line,
    normalize_line,
)
from classfinder.discovery.enumerator import enumerate_sources
from classfinder.discovery.paths import PathSet, RootEntry
from classfinder.discovery.registry import ClassRegistry, fingerprint, normalize_path
from classfinder.discovery.scanner import FileScanner

__all__ = [
    # Roots
    "PathSet",
    "RootEntry",
    # Enumeration
    "enumerate_sources",
    # Classification
    "DECLARATION_PREFIXES",
    "LineKind",
    "LineResult",
    "build_declaration_prefixes",
    "classify_line",
    "normalize_line",
    # Scanning
    "FileScanner",
    # Registry
    "ClassRegistry",
    "fingerprint",
    "normalize_path",
]
