"""Tests for config/loader.py module.

Covers:
- _load_yaml() function
- _deep_merge() function
- load_config() precedence and error mapping
"""

from __future__ import annotations

import os
from collections.abc import Generator
from pathlib import Path
from unittest.mock import patch

import pytest

from classfinder.config.loader import _deep_merge, _load_yaml, load_config
from classfinder.config.models import ClassFinderConfig
from classfinder.core.errors import ConfigError, ErrorCode


@pytest.fixture(autouse=True)
def clean_env() -> Generator[None, None, None]:
    """Remove CLASSFINDER__* env vars for clean tests."""
    orig = {k: v for k, v in os.environ.items() if k.startswith("CLASSFINDER__")}
    for k in orig:
        del os.environ[k]
    yield
    for k in [k for k in os.environ if k.startswith("CLASSFINDER__")]:
        del os.environ[k]
    os.environ.update(orig)


@pytest.fixture
def no_global(tmp_path: Path) -> Generator[None, None, None]:
    with patch("classfinder.config.loader.GLOBAL_CONFIG_PATH", tmp_path / "none.yaml"):
        yield


def _write_project_config(root: Path, content: str) -> None:
    config_dir = root / ".classfinder"
    config_dir.mkdir(exist_ok=True)
    (config_dir / "config.yaml").write_text(content)


class TestLoadYaml:
    """Tests for _load_yaml function."""

    def test_returns_empty_dict_for_missing_file(self, tmp_path: Path) -> None:
        assert _load_yaml(tmp_path / "nonexistent.yaml") == {}

    def test_loads_valid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "config.yaml"
        yaml_file.write_text("scanner:\n  max_workers: 2\n")

        assert _load_yaml(yaml_file) == {"scanner": {"max_workers": 2}}

    def test_returns_empty_for_empty_file(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "empty.yaml"
        yaml_file.write_text("")

        assert _load_yaml(yaml_file) == {}

    def test_raises_config_error_for_invalid_yaml(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "bad.yaml"
        yaml_file.write_text("scanner: [unclosed\n")

        with pytest.raises(ConfigError) as exc_info:
            _load_yaml(yaml_file)
        assert exc_info.value.code == ErrorCode.CONFIG_PARSE_ERROR

    def test_raises_config_error_for_non_mapping(self, tmp_path: Path) -> None:
        yaml_file = tmp_path / "list.yaml"
        yaml_file.write_text("- a\n- b\n")

        with pytest.raises(ConfigError, match="mapping"):
            _load_yaml(yaml_file)


class TestDeepMerge:
    """Tests for _deep_merge function."""

    def test_override_wins(self) -> None:
        assert _deep_merge({"a": 1}, {"a": 2}) == {"a": 2}

    def test_nested_merge(self) -> None:
        base = {"scanner": {"encoding": "latin-1", "max_workers": 1}}
        override = {"scanner": {"max_workers": 4}}

        assert _deep_merge(base, override) == {"scanner": {"encoding": "latin-1", "max_workers": 4}}

    def test_does_not_mutate_base(self) -> None:
        base = {"scanner": {"max_workers": 1}}
        _deep_merge(base, {"scanner": {"max_workers": 2}})
        assert base == {"scanner": {"max_workers": 1}}


@pytest.mark.usefixtures("no_global")
class TestLoadConfig:
    """Tests for load_config precedence."""

    def test_returns_default_config_when_no_files(self, tmp_path: Path) -> None:
        config = load_config(project_root=tmp_path)

        assert isinstance(config, ClassFinderConfig)
        assert config.scanner.source_extension == ".php"
        assert config.logging.level == "INFO"

    def test_loads_project_config(self, tmp_path: Path) -> None:
        _write_project_config(tmp_path, "scanner:\n  source_extension: .inc\n")

        config = load_config(project_root=tmp_path)

        assert config.scanner.source_extension == ".inc"

    def test_env_vars_override_yaml(self, tmp_path: Path) -> None:
        _write_project_config(tmp_path, "logging:\n  level: DEBUG\n")

        with patch.dict(os.environ, {"CLASSFINDER__LOGGING__LEVEL": "WARNING"}):
            config = load_config(project_root=tmp_path)

        assert config.logging.level == "WARNING"

    def test_kwargs_override_all(self, tmp_path: Path) -> None:
        _write_project_config(tmp_path, "scanner:\n  max_workers: 2\n")

        config = load_config(project_root=tmp_path, scanner={"max_workers": 6})

        assert config.scanner.max_workers == 6

    def test_project_config_overrides_global(self, tmp_path: Path) -> None:
        global_file = tmp_path / "global.yaml"
        global_file.write_text("scanner:\n  encoding: latin-1\n  max_workers: 3\n")
        _write_project_config(tmp_path, "scanner:\n  max_workers: 5\n")

        with patch("classfinder.config.loader.GLOBAL_CONFIG_PATH", global_file):
            config = load_config(project_root=tmp_path)

        assert config.scanner.encoding == "latin-1"
        assert config.scanner.max_workers == 5

    def test_raises_config_error_for_invalid_value(self, tmp_path: Path) -> None:
        _write_project_config(tmp_path, "scanner:\n  max_workers: 0\n")

        with pytest.raises(ConfigError) as exc_info:
            load_config(project_root=tmp_path)

        assert exc_info.value.code == ErrorCode.CONFIG_INVALID_VALUE
        assert "max_workers" in exc_info.value.details["field"]
