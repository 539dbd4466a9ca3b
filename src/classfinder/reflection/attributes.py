"""Attribute references and the ``attach`` class decorator.

An attribute is structured metadata attached to a type. The scanner never
needs the attribute objects themselves, only their type names, so every
attribute is handed out as an ``AttributeRef`` that can be matched by name
and instantiated on demand.
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from typing import Any, TypeVar

from classfinder.config.constants import DEFAULT_NAMESPACE_SEPARATOR
from classfinder.core.errors import ReflectionError

ATTRIBUTES_SLOT = "__classfinder_attributes__"

T = TypeVar("T", bound=type)


def identity_of(cls: type, separator: str = DEFAULT_NAMESPACE_SEPARATOR) -> str:
    """Qualified identity of a Python class, e.g. ``acme\\shapes\\Widget``."""
    return f"{cls.__module__}.{cls.__qualname__}".replace(".", separator)


def type_name(attribute_type: str | type, separator: str = DEFAULT_NAMESPACE_SEPARATOR) -> str:
    """Identity of an attribute type given either by name or as a class."""
    if isinstance(attribute_type, type):
        return identity_of(attribute_type, separator)
    return attribute_type


@dataclass(frozen=True)
class AttributeRef:
    """A single attribute attached to a type.

    ``ancestors`` lists the identities of every base type of the attribute,
    so a filter on a base attribute type also matches its subtypes.
    """

    name: str
    ancestors: tuple[str, ...] = ()
    arguments: tuple[Any, ...] = field(default=(), compare=False)
    keywords: Mapping[str, Any] = field(default_factory=dict, compare=False)
    factory: Callable[..., Any] | None = field(default=None, compare=False, repr=False)

    def has_type(self, name: str) -> bool:
        return name == self.name or name in self.ancestors

    def instantiate(self) -> Any:
        """Build the attribute object."""
        if self.factory is None:
            raise ReflectionError.failed(self.name, "attribute is not instantiable")
        try:
            return self.factory(*self.arguments, **dict(self.keywords))
        except Exception as e:
            raise ReflectionError.failed(self.name, str(e)) from e

    @classmethod
    def of(cls, instance: Any, separator: str = DEFAULT_NAMESPACE_SEPARATOR) -> AttributeRef:
        """Reference an already-built attribute object."""
        attribute_type = type(instance)
        ancestors = tuple(
            identity_of(base, separator)
            for base in attribute_type.__mro__[1:]
            if base is not object
        )
        return cls(
            name=identity_of(attribute_type, separator),
            ancestors=ancestors,
            factory=lambda: instance,
        )


def attach(*attributes: Any) -> Callable[[T], T]:
    """Class decorator attaching attribute objects to the decorated class.

    Attributes are not inherited: each class only reports its own.

        @attach(Route("/home"), Tag("public"))
        class HomeController: ...
    """

    def decorator(cls: T) -> T:
        existing = cls.__dict__.get(ATTRIBUTES_SLOT, ())
        setattr(cls, ATTRIBUTES_SLOT, (*existing, *attributes))
        return cls

    return decorator


def attached(cls: type) -> tuple[Any, ...]:
    """Attribute objects attached directly to ``cls``."""
    return tuple(cls.__dict__.get(ATTRIBUTES_SLOT, ()))
