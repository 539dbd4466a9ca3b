"""Root directories to scan."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from os import PathLike

from classfinder.config.constants import DEFAULT_NON_RECURSIVE_MARKER
from classfinder.discovery.registry import normalize_path


@dataclass(frozen=True)
class RootEntry:
    path: str
    recursive: bool


class PathSet:
    """Ordered set of scan roots, each tagged recursive or not.

    A path ending in the non-recursive marker (``src/^``) defaults to a
    shallow scan. The marker is stripped and roots are stored in canonical
    form, so ``src`` and its absolute spelling are the same root.
    """

    def __init__(self, non_recursive_marker: str = DEFAULT_NON_RECURSIVE_MARKER) -> None:
        self.non_recursive_marker = non_recursive_marker
        self._entries: dict[str, bool] = {}

    def add(self, path: str | PathLike[str], recursive: bool | None = None) -> RootEntry:
        raw = str(path)
        marked = raw.endswith(self.non_recursive_marker)
        if marked:
            raw = raw[: -len(self.non_recursive_marker)] or "."
        if recursive is None:
            recursive = not marked
        key = normalize_path(raw)
        self._entries[key] = recursive
        return RootEntry(key, recursive)

    def __iter__(self) -> Iterator[RootEntry]:
        return (RootEntry(path, recursive) for path, recursive in self._entries.items())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, (str, PathLike)):
            return False
        return normalize_path(path) in self._entries
