"""Tests for ClassInfo records."""

from __future__ import annotations

import pytest

from classfinder.core.errors import AmbiguousAttributeError, ErrorCode, ReflectionError
from classfinder.models import ClassInfo, basename, join_identity, split_identity
from classfinder.reflection.attributes import AttributeRef
from classfinder.reflection.catalog import InMemoryCatalog


class Route:
    def __init__(self, path: str) -> None:
        self.path = path


def _widget(catalog: InMemoryCatalog, **overrides) -> ClassInfo:
    fields = {
        "class_name": "Acme\\Shapes\\Widget",
        "basename": "Widget",
        "namespace": "Acme\\Shapes",
        "file": "/src/Widget.php",
        "catalog": catalog,
    }
    fields.update(overrides)
    return ClassInfo(**fields)


class TestIdentityHelpers:
    def test_given_identity_when_split_then_namespace_and_name(self) -> None:
        assert split_identity("Acme\\Shapes\\Widget") == ("Acme\\Shapes", "Widget")
        assert split_identity("Widget") == ("", "Widget")

    def test_given_parts_when_joined_then_global_has_no_separator(self) -> None:
        assert join_identity("Acme", "Widget") == "Acme\\Widget"
        assert join_identity("", "Widget") == "Widget"

    def test_given_identity_when_basename_then_lowercased_by_default(self) -> None:
        assert basename("App\\Attr\\Route") == "route"
        assert basename("App\\Attr\\Route", lower=False) == "Route"


class TestInvariants:
    """Construction-time checks."""

    def test_given_valid_fields_when_built_then_exists_from_catalog(
        self, catalog: InMemoryCatalog
    ) -> None:
        catalog.define("Acme\\Shapes\\Widget", loaded=False)

        info = _widget(catalog)

        assert info.exists is False

    @pytest.mark.parametrize(
        "overrides",
        [
            {"basename": ""},
            {"namespace": "Acme\\Shapes\\"},
            {"class_name": "Acme\\Widget"},
            {"namespace": "", "class_name": "Acme\\Shapes\\Widget"},
        ],
    )
    def test_given_inconsistent_fields_when_built_then_raises(
        self, catalog: InMemoryCatalog, overrides: dict
    ) -> None:
        with pytest.raises(ValueError):
            _widget(catalog, **overrides)

    def test_given_two_records_same_identity_when_compared_then_equal(
        self, catalog: InMemoryCatalog
    ) -> None:
        """Equality and hashing use the identity only."""
        a = _widget(catalog, file="/a/Widget.php")
        b = _widget(catalog, file="/b/Widget.php")

        assert a == b
        assert hash(a) == hash(b)
        assert a != _widget(catalog, class_name="Acme\\Widget", namespace="Acme")

    def test_given_record_when_stringified_then_identity(self, catalog: InMemoryCatalog) -> None:
        assert str(_widget(catalog)) == "Acme\\Shapes\\Widget"


class TestReflection:
    """Reflection and instantiation through the bound catalog."""

    def test_given_record_when_called_then_type_instantiated(
        self, catalog: InMemoryCatalog
    ) -> None:
        catalog.define("Acme\\Shapes\\Widget", factory=lambda size=1: {"size": size})

        assert _widget(catalog)(size=4) == {"size": 4}

    def test_given_record_when_reflected_twice_then_cached(self, catalog: InMemoryCatalog) -> None:
        # Given
        catalog.define("Acme\\Shapes\\Widget", attributes=["App\\Route"])
        info = _widget(catalog)
        first = info.reflect()

        # When
        catalog.define("Acme\\Shapes\\Widget", attributes=["App\\Tag"])

        # Then
        assert info.reflect() is first
        assert info.has_attribute("App\\Route")

    def test_given_undefined_type_when_reflected_then_raises(
        self, catalog: InMemoryCatalog
    ) -> None:
        with pytest.raises(ReflectionError):
            _widget(catalog).reflect()


class TestAttributes:
    """Attribute lookup on a record."""

    def test_given_attributes_when_listed_then_filtered_by_type(
        self, catalog: InMemoryCatalog
    ) -> None:
        get = AttributeRef("App\\Get", ancestors=("App\\Route",))
        catalog.define("Acme\\Shapes\\Widget", attributes=[get, "App\\Tag"])
        info = _widget(catalog)

        assert info.attributes("App\\Route") == [get]
        assert len(info.attributes()) == 2
        assert info.has_attribute("App\\Tag")
        assert not info.has_attribute("App\\Missing")

    def test_given_no_matching_attribute_when_requested_then_none(
        self, catalog: InMemoryCatalog
    ) -> None:
        catalog.define("Acme\\Shapes\\Widget")

        assert _widget(catalog).attribute("App\\Route") is None

    def test_given_single_attribute_when_requested_then_instantiated(
        self, catalog: InMemoryCatalog
    ) -> None:
        ref = AttributeRef("App\\Route", arguments=("/w",), factory=Route)
        catalog.define("Acme\\Shapes\\Widget", attributes=[ref])

        result = _widget(catalog).attribute("App\\Route")

        assert isinstance(result, Route)
        assert result.path == "/w"

    def test_given_repeated_attribute_when_requested_then_ambiguous(
        self, catalog: InMemoryCatalog
    ) -> None:
        catalog.define("Acme\\Shapes\\Widget", attributes=["App\\Route", "App\\Route"])

        with pytest.raises(AmbiguousAttributeError) as exc_info:
            _widget(catalog).attribute("App\\Route")

        assert exc_info.value.code == ErrorCode.ATTRIBUTE_AMBIGUOUS
        assert exc_info.value.details["count"] == 2


class TestFromIdentity:
    """Records built from already-live types."""

    def test_given_live_type_when_built_then_fields_derived(self, catalog: InMemoryCatalog) -> None:
        catalog.define("Acme\\Shapes\\Widget", file="C:\\src\\Widget.php")

        info = ClassInfo.from_identity("Acme\\Shapes\\Widget", catalog)

        assert info.basename == "Widget"
        assert info.namespace == "Acme\\Shapes"
        assert info.file == "C:/src/Widget.php"
        assert info.exists is True

    def test_given_unknown_file_when_built_then_raises(self, catalog: InMemoryCatalog) -> None:
        catalog.define("Acme\\Shapes\\Widget")

        with pytest.raises(ReflectionError) as exc_info:
            ClassInfo.from_identity("Acme\\Shapes\\Widget", catalog)

        assert exc_info.value.code == ErrorCode.REFLECTION_FAILED
