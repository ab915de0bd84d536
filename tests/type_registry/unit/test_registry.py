"""Type registry tests."""

from __future__ import annotations

import pytest
from tfschema_bindgen.type_formats import (
    IntFormat,
    NamedFormat,
    OptionFormat,
    StringFormat,
    StructContainer,
    TypeRef,
    UnitStructContainer,
)
from tfschema_bindgen.type_registry import (
    DuplicatePolicy,
    DuplicateQualifiedNameError,
    QualifiedName,
    Registry,
    UnresolvedReferenceError,
)


def _struct(*fields: tuple[str, object]) -> StructContainer:
    return StructContainer(fields=tuple(NamedFormat(name, value) for name, value in fields))


def test_full_name_joins_namespace_and_name() -> None:
    assert QualifiedName(None, "config").full_name == "config"
    assert QualifiedName("", "config").full_name == "config"
    assert QualifiedName("outer_block_type", "inner").full_name == "outer_block_type_inner"


def test_identical_reinsert_is_a_no_op() -> None:
    registry = Registry()
    key = QualifiedName(None, "a_details")
    registry.insert(key, _struct(("id", StringFormat())))
    registry.insert(key, _struct(("id", StringFormat())))

    assert len(registry) == 1


def test_conflicting_insert_raises_by_default() -> None:
    registry = Registry()
    key = QualifiedName(None, "a_details")
    registry.insert(key, _struct(("id", StringFormat())))

    with pytest.raises(DuplicateQualifiedNameError) as excinfo:
        registry.insert(key, _struct(("id", IntFormat())))

    assert excinfo.value.key == key
    assert registry.get(key) == _struct(("id", StringFormat()))


def test_conflicting_insert_overwrites_when_configured() -> None:
    registry = Registry(on_duplicate=DuplicatePolicy.OVERWRITE)
    key = QualifiedName(None, "a_details")
    registry.insert(key, _struct(("id", StringFormat())))
    registry.insert(key, _struct(("id", IntFormat())))

    assert registry.get(key) == _struct(("id", IntFormat()))


def test_distinct_keys_with_same_full_name_are_rejected() -> None:
    registry = Registry(on_duplicate=DuplicatePolicy.OVERWRITE)
    registry.insert(QualifiedName("a", "b_c"), UnitStructContainer())

    with pytest.raises(DuplicateQualifiedNameError, match="both emit as a_b_c"):
        registry.insert(QualifiedName("a_b", "c"), UnitStructContainer())


def test_iteration_order_is_deterministic() -> None:
    registry = Registry()
    registry.insert(QualifiedName("zeta_block_type", "child"), UnitStructContainer())
    registry.insert(QualifiedName(None, "zeta_details"), UnitStructContainer())
    registry.insert(QualifiedName("alpha_block_type", "child"), UnitStructContainer())
    registry.insert(QualifiedName(None, "alpha_details"), UnitStructContainer())

    assert [key.full_name for key in registry] == [
        "alpha_details",
        "zeta_details",
        "alpha_block_type_child",
        "zeta_block_type_child",
    ]


def test_resolve_and_contains_use_registered_keys() -> None:
    registry = Registry()
    registry.insert(QualifiedName("ns", "item"), UnitStructContainer())

    assert registry.resolve("ns_item") == UnitStructContainer()
    assert registry.resolve("item") is None
    assert ("ns", "item") in registry
    assert "ns_item" not in registry


def test_validate_references_reports_every_missing_name() -> None:
    registry = Registry()
    registry.insert(
        QualifiedName(None, "holder"),
        _struct(("first", OptionFormat(TypeRef("missing_a"))), ("second", TypeRef("missing_b"))),
    )

    with pytest.raises(UnresolvedReferenceError) as excinfo:
        registry.validate_references()

    assert excinfo.value.missing == (("holder", "missing_a"), ("holder", "missing_b"))
    registry.validate_references(external_names=["missing_a", "missing_b"])


def test_merge_combines_disjoint_registries_and_rejects_conflicts() -> None:
    left = Registry()
    left.insert(QualifiedName(None, "a"), _struct(("x", StringFormat())))
    right = Registry()
    right.insert(QualifiedName(None, "a"), _struct(("x", StringFormat())))
    right.insert(QualifiedName(None, "b"), UnitStructContainer())

    left.merge(right)
    assert [key.name for key in left] == ["a", "b"]

    conflicting = Registry()
    conflicting.insert(QualifiedName(None, "a"), _struct(("x", IntFormat())))
    overwriting = Registry(on_duplicate=DuplicatePolicy.OVERWRITE)
    overwriting.merge(left)
    with pytest.raises(DuplicateQualifiedNameError, match="Cannot merge"):
        overwriting.merge(conflicting)


def test_replace_overwrites_regardless_of_policy() -> None:
    registry = Registry()
    key = QualifiedName(None, "config")
    registry.insert(key, _struct(("x", StringFormat())))
    registry.replace(key, UnitStructContainer())

    assert registry.get(key) == UnitStructContainer()
