"""Reflection collaborators."""

from classfinder.reflection.attributes import (
    AttributeRef,
    attach,
    attached,
    identity_of,
    type_name,
)
from classfinder.reflection.catalog import InMemoryCatalog, TypeCatalog, TypeReflection
from classfinder.reflection.imports import ImportCatalog

__all__ = [
    "AttributeRef",
    "ImportCatalog",
    "InMemoryCatalog",
    "TypeCatalog",
    "TypeReflection",
    "attach",
    "attached",
    "identity_of",
    "type_name",
]
