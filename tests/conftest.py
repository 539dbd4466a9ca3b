"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages.
"""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
# This ensures that the local classfinder package is used, not any installed one
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of classfinder modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("classfinder"):
        del sys.modules[module_name]

from classfinder.reflection.catalog import InMemoryCatalog  # noqa: E402

WriteSource = Callable[[str, str], Path]


@pytest.fixture
def catalog() -> InMemoryCatalog:
    """Empty in-memory type catalog."""
    return InMemoryCatalog()


@pytest.fixture
def write_source(tmp_path: Path) -> WriteSource:
    """Write a source file relative to tmp_path, creating parents."""

    def _write(relative: str, content: str) -> Path:
        path = tmp_path / relative
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write
