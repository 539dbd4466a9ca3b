"""Type catalog: the reflection collaborator behind the scanner.

The textual scan only guesses identities. A ``TypeCatalog`` is the
authority that confirms an identity resolves to a live type and exposes its
defining file and attached attributes.
"""

from __future__ import annotations

import threading
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any, Protocol, runtime_checkable

from classfinder.core.errors import ReflectionError
from classfinder.reflection.attributes import AttributeRef


@dataclass(frozen=True)
class TypeReflection:
    """Full reflection of one resolvable type."""

    identity: str
    file: str | None = None
    attributes: tuple[AttributeRef, ...] = ()
    factory: Callable[..., Any] | None = field(default=None, compare=False, repr=False)

    def attributes_of(self, type_name: str | None = None) -> list[AttributeRef]:
        """Attributes whose type is ``type_name`` or a subtype of it; all if None."""
        if type_name is None:
            return list(self.attributes)
        return [a for a in self.attributes if a.has_type(type_name)]

    def instantiate(self, *args: Any, **kwargs: Any) -> Any:
        if self.factory is None:
            raise ReflectionError.failed(self.identity, "type is not instantiable")
        return self.factory(*args, **kwargs)


@runtime_checkable
class TypeCatalog(Protocol):
    """Capability the scanner and filter depend on."""

    def exists(self, identity: str) -> bool:
        """True if ``identity`` resolves, loading it if necessary."""
        ...

    def is_loaded(self, identity: str) -> bool:
        """True if ``identity`` is already loaded; never triggers loading."""
        ...

    def reflect(self, identity: str) -> TypeReflection:
        """Reflect ``identity``. Raises ReflectionError if it does not resolve."""
        ...


class InMemoryCatalog:
    """Catalog of explicitly defined types.

    Types defined with ``loaded=False`` behave like autoloadable types: they
    resolve through ``exists`` (which loads them) but ``is_loaded`` reports
    False until then.
    """

    def __init__(self) -> None:
        self._types: dict[str, TypeReflection] = {}
        self._loaded: set[str] = set()
        self._lock = threading.Lock()

    def define(
        self,
        identity: str,
        factory: Callable[..., Any] | None = None,
        *,
        attributes: Iterable[AttributeRef | str] = (),
        file: str | None = None,
        loaded: bool = True,
    ) -> TypeReflection:
        refs = tuple(a if isinstance(a, AttributeRef) else AttributeRef(name=a) for a in attributes)
        reflection = TypeReflection(identity=identity, file=file, attributes=refs, factory=factory)
        with self._lock:
            self._types[identity] = reflection
            if loaded:
                self._loaded.add(identity)
            else:
                self._loaded.discard(identity)
        return reflection

    def exists(self, identity: str) -> bool:
        with self._lock:
            if identity not in self._types:
                return False
            self._loaded.add(identity)
            return True

    def is_loaded(self, identity: str) -> bool:
        with self._lock:
            return identity in self._loaded

    def reflect(self, identity: str) -> TypeReflection:
        with self._lock:
            reflection = self._types.get(identity)
        if reflection is None:
            raise ReflectionError.unresolvable(identity)
        return reflection

    def __len__(self) -> int:
        return len(self._types)

    def __contains__(self, identity: object) -> bool:
        return identity in self._types
