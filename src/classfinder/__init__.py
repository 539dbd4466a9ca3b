"""classfinder - heuristic discovery of class declarations in source trees."""

from classfinder.core.errors import (
    AmbiguousAttributeError,
    ClassFinderError,
    ConfigError,
    FileSystemError,
    ReflectionError,
)
from classfinder.filtering import AttributeFilter, FilterPolicy
from classfinder.finder import ClassFinder
from classfinder.models import ClassInfo, basename
from classfinder.reflection import (
    AttributeRef,
    ImportCatalog,
    InMemoryCatalog,
    TypeCatalog,
    attach,
)

__version__ = "0.1.0"

__all__ = [
    "AmbiguousAttributeError",
    "AttributeFilter",
    "AttributeRef",
    "ClassFinder",
    "ClassFinderError",
    "ClassInfo",
    "ConfigError",
    "FileSystemError",
    "FilterPolicy",
    "ImportCatalog",
    "InMemoryCatalog",
    "ReflectionError",
    "TypeCatalog",
    "attach",
    "basename",
]
