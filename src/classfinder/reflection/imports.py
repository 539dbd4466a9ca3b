"""Catalog resolving identities against importable Python modules.

``acme\\shapes\\Widget`` resolves to attribute ``Widget`` of module
``acme.shapes``. Attributes are those attached with ``@attach``.
"""

from __future__ import annotations

import importlib
import inspect
import sys

import structlog

from classfinder.config.constants import DEFAULT_NAMESPACE_SEPARATOR
from classfinder.core.errors import ReflectionError
from classfinder.reflection.attributes import AttributeRef, attached
from classfinder.reflection.catalog import TypeReflection

logger = structlog.get_logger()


class ImportCatalog:
    """Resolve identities through ``importlib``."""

    def __init__(self, separator: str = DEFAULT_NAMESPACE_SEPARATOR) -> None:
        self.separator = separator

    def _split(self, identity: str) -> tuple[str, str] | None:
        module_path, sep, name = identity.rpartition(self.separator)
        if not sep or not module_path or not name:
            return None
        return module_path.replace(self.separator, "."), name

    def _lookup(self, identity: str, *, load: bool) -> type | None:
        parts = self._split(identity)
        if parts is None:
            return None
        module_path, name = parts

        module = sys.modules.get(module_path)
        if module is None:
            if not load:
                return None
            try:
                module = importlib.import_module(module_path)
            except ImportError:
                return None
            except Exception as e:
                # Module exists but is broken; not a heuristic miss.
                raise ReflectionError.failed(identity, f"import of {module_path} failed: {e}") from e
            logger.debug("module_imported", module=module_path)

        candidate = getattr(module, name, None)
        return candidate if isinstance(candidate, type) else None

    def exists(self, identity: str) -> bool:
        return self._lookup(identity, load=True) is not None

    def is_loaded(self, identity: str) -> bool:
        return self._lookup(identity, load=False) is not None

    def reflect(self, identity: str) -> TypeReflection:
        cls = self._lookup(identity, load=True)
        if cls is None:
            raise ReflectionError.unresolvable(identity)

        try:
            file: str | None = inspect.getsourcefile(cls)
        except TypeError:
            file = None

        return TypeReflection(
            identity=identity,
            file=file.replace("\\", "/") if file else None,
            attributes=tuple(AttributeRef.of(a, self.separator) for a in attached(cls)),
            factory=cls,
        )
