"""Candidate source file enumeration."""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import structlog

from classfinder.config.models import ScannerConfig
from classfinder.core.errors import FileSystemError

logger = structlog.get_logger()


def _list_dir(directory: Path) -> list[os.DirEntry[str]]:
    try:
        with os.scandir(directory) as it:
            return sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise FileSystemError.unreadable(str(directory), e.strerror or str(e)) from e


def _walk(
    entries: list[os.DirEntry[str]],
    recursive: bool,
    config: ScannerConfig,
) -> Iterator[Path]:
    subdirs: list[Path] = []
    for entry in entries:
        if entry.name.startswith(config.hidden_prefix):
            continue
        if entry.is_dir(follow_symlinks=False):
            if recursive:
                subdirs.append(Path(entry.path))
            continue
        if entry.is_file() and Path(entry.name).suffix == config.source_extension:
            yield Path(entry.path)

    # Pre-order: this directory's files first, then each subtree in name order
    for subdir in subdirs:
        yield from _walk(_list_dir(subdir), recursive, config)


def enumerate_sources(
    root: str | os.PathLike[str],
    recursive: bool = True,
    *,
    config: ScannerConfig | None = None,
) -> Iterator[Path]:
    """Lazily yield candidate source files beneath ``root``.

    Hidden entries are skipped and hidden directories are never descended.
    The root itself is checked eagerly; unreadable subdirectories raise
    while iterating.

    Raises:
        FileSystemError: If ``root`` is missing, not a directory, or unreadable.
    """
    config = config or ScannerConfig()
    root_path = Path(root)

    if not root_path.exists():
        raise FileSystemError.not_found(str(root_path))
    if not root_path.is_dir():
        raise FileSystemError.not_a_directory(str(root_path))

    entries = _list_dir(root_path)
    logger.debug("root_enumerated", root=str(root_path), recursive=recursive, entries=len(entries))
    return _walk(entries, recursive, config)
