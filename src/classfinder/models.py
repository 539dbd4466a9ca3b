"""Identity records produced by the scanner."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from classfinder.config.constants import DEFAULT_NAMESPACE_SEPARATOR
from classfinder.core.errors import AmbiguousAttributeError, ReflectionError
from classfinder.reflection.attributes import AttributeRef, type_name
from classfinder.reflection.catalog import TypeCatalog, TypeReflection


def split_identity(identity: str, separator: str = DEFAULT_NAMESPACE_SEPARATOR) -> tuple[str, str]:
    """Split ``Acme\\Shapes\\Widget`` into ``("Acme\\Shapes", "Widget")``."""
    namespace, _, name = identity.rpartition(separator)
    return namespace, name


def join_identity(namespace: str, basename: str, separator: str = DEFAULT_NAMESPACE_SEPARATOR) -> str:
    return f"{namespace}{separator}{basename}" if namespace else basename


def basename(identity: str, separator: str = DEFAULT_NAMESPACE_SEPARATOR, *, lower: bool = True) -> str:
    """Name of a type without its namespace, lower-cased by default.

    >>> basename("Acme\\\\Shapes\\\\Widget")
    'widget'
    """
    name = split_identity(identity, separator)[1]
    return name.lower() if lower else name


@dataclass(frozen=True)
class ClassInfo:
    """A discovered type. Equal to another record iff ``class_name`` matches.

    Reflection is bound to the catalog that confirmed the identity and is
    cached after first use.
    """

    class_name: str
    basename: str = field(compare=False)
    namespace: str = field(compare=False)
    file: str = field(compare=False)
    catalog: TypeCatalog = field(compare=False, repr=False)
    separator: str = field(default=DEFAULT_NAMESPACE_SEPARATOR, compare=False, repr=False)
    exists: bool = field(init=False, compare=False)
    _reflection: TypeReflection | None = field(default=None, init=False, compare=False, repr=False)

    def __post_init__(self) -> None:
        if not self.basename:
            raise ValueError("basename must not be empty")
        if self.namespace.endswith(self.separator):
            raise ValueError(f"namespace has a trailing separator: {self.namespace!r}")
        expected = join_identity(self.namespace, self.basename, self.separator)
        if self.class_name != expected:
            raise ValueError(f"class_name {self.class_name!r} does not match {expected!r}")
        object.__setattr__(self, "exists", self.catalog.is_loaded(self.class_name))

    @classmethod
    def from_identity(
        cls,
        identity: str,
        catalog: TypeCatalog,
        separator: str = DEFAULT_NAMESPACE_SEPARATOR,
    ) -> ClassInfo:
        """Build a record for an identity that is already live in ``catalog``.

        Raises:
            ReflectionError: If the identity does not resolve or its defining
                file is unknown.
        """
        reflection = catalog.reflect(identity)
        if not reflection.file:
            raise ReflectionError.failed(identity, "defining file is unknown")

        namespace, name = split_identity(identity, separator)
        info = cls(
            class_name=identity,
            basename=name,
            namespace=namespace,
            file=reflection.file.replace("\\", "/"),
            catalog=catalog,
            separator=separator,
        )
        object.__setattr__(info, "_reflection", reflection)
        return info

    def __str__(self) -> str:
        return self.class_name

    def __call__(self, *args: Any, **kwargs: Any) -> Any:
        """Instantiate the identified type with the given arguments."""
        return self.reflect().instantiate(*args, **kwargs)

    def reflect(self) -> TypeReflection:
        if self._reflection is None:
            object.__setattr__(self, "_reflection", self.catalog.reflect(self.class_name))
        assert self._reflection is not None
        return self._reflection

    def attributes(self, filter_type: str | type | None = None) -> list[AttributeRef]:
        """Attached attributes, optionally limited to instances of ``filter_type``."""
        if filter_type is None:
            return self.reflect().attributes_of()
        return self.reflect().attributes_of(type_name(filter_type, self.separator))

    def has_attribute(self, attribute_type: str | type) -> bool:
        return bool(self.attributes(attribute_type))

    def attribute(self, attribute_type: str | type) -> Any | None:
        """Instantiate the single attribute of ``attribute_type``.

        Returns None when the type carries no such attribute.

        Raises:
            AmbiguousAttributeError: If more than one is attached; use
                ``attributes()`` when multiplicity is expected.
        """
        found = self.attributes(attribute_type)
        if not found:
            return None
        if len(found) > 1:
            raise AmbiguousAttributeError.multiple(
                self.class_name, type_name(attribute_type, self.separator), len(found)
            )
        return found[0].instantiate()
