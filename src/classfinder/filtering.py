"""Opt-in attribute filter evaluated lazily against discovered classes."""

from __future__ import annotations

from collections.abc import Iterable, Iterator, Mapping
from enum import Enum
from types import MappingProxyType

import structlog

from classfinder.config.constants import DEFAULT_NAMESPACE_SEPARATOR
from classfinder.core.errors import ConfigError
from classfinder.models import ClassInfo, basename
from classfinder.reflection.attributes import type_name
from classfinder.reflection.catalog import TypeCatalog

logger = structlog.get_logger()

AttributeSpec = str | type


class FilterPolicy(Enum):
    UNSET = "unset"
    ANY = "any"
    ALL = "all"


class AttributeFilter:
    """Required attribute types plus an any/all policy.

    The policy is fixed by the first ``with_attribute`` call; later calls may
    add names but never change it. Nothing is reflected until ``matches`` or
    ``select`` is called.
    """

    def __init__(self, catalog: TypeCatalog, separator: str = DEFAULT_NAMESPACE_SEPARATOR) -> None:
        self.catalog = catalog
        self.separator = separator
        self._required: dict[str, str] = {}
        self._policy = FilterPolicy.UNSET

    @property
    def policy(self) -> FilterPolicy:
        return self._policy

    @property
    def required(self) -> Mapping[str, str]:
        """Required attribute identity -> lower-cased display name."""
        return MappingProxyType(self._required)

    @property
    def active(self) -> bool:
        return bool(self._required)

    def with_attribute(
        self,
        attributes: AttributeSpec | Iterable[AttributeSpec],
        require_all: bool = False,
    ) -> AttributeFilter:
        """Require one or more attribute types.

        Raises:
            ConfigError: If an attribute type does not exist in the catalog.
                Nothing from the failing call is recorded.
        """
        if isinstance(attributes, (str, type)):
            attributes = [attributes]
        names = [type_name(a, self.separator) for a in attributes]

        for name in names:
            if not self.catalog.exists(name):
                raise ConfigError.unknown_attribute(name)

        if self._policy is FilterPolicy.UNSET:
            self._policy = FilterPolicy.ALL if require_all else FilterPolicy.ANY

        for name in names:
            self._required[name] = basename(name, self.separator)

        logger.debug(
            "attribute_filter_configured",
            attributes=list(self._required),
            policy=self._policy.value,
        )
        return self

    def matches(self, info: ClassInfo) -> bool:
        """True if ``info`` satisfies the filter. An empty filter matches all.

        Raises:
            ReflectionError: If the catalog can no longer reflect ``info``.
        """
        if not self._required:
            return True
        present = (info.has_attribute(name) for name in self._required)
        if self._policy is FilterPolicy.ALL:
            return all(present)
        return any(present)

    def select(self, items: Iterable[tuple[str, ClassInfo]]) -> Iterator[tuple[str, ClassInfo]]:
        """Lazily yield the (fingerprint, info) pairs that match."""
        for key, info in items:
            if self.matches(info):
                yield key, info
