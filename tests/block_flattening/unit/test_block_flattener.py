"""Block flattening tests."""

from __future__ import annotations

import pytest
from tfschema_bindgen.attribute_translation import UnsupportedTypeError
from tfschema_bindgen.block_flattening import (
    child_namespace,
    details_name,
    flatten_block,
    nested_block_type_name,
)
from tfschema_bindgen.configuration import FlatteningSettings
from tfschema_bindgen.schema_ingestion import Attribute, Block, NestedBlock, PrimitiveType
from tfschema_bindgen.type_formats import (
    NamedFormat,
    OptionFormat,
    SeqFormat,
    StringFormat,
    StructContainer,
    TypeRef,
)
from tfschema_bindgen.type_registry import QualifiedName, Registry


def _string(**flags: bool) -> Attribute:
    return Attribute(type=PrimitiveType("string"), **flags)


def test_naming_helpers() -> None:
    assert details_name("okta_user") == QualifiedName(None, "okta_user_details")
    assert nested_block_type_name("resource", "okta_user", "profile") == QualifiedName(
        "okta_user_resource_block_type", "profile"
    )
    assert nested_block_type_name(None, "okta", "retry") == QualifiedName(
        "okta_block_type", "retry"
    )
    assert child_namespace("resource", "okta_user") == "okta_user_resource"
    assert child_namespace(None, "okta") == "okta"


def test_flat_block_registers_single_details_struct() -> None:
    registry = Registry()

    struct = flatten_block(
        None,
        "test_provider",
        Block(attributes={"base_url": _string(optional=True), "org": _string(required=True)}),
        registry,
    )

    assert registry.keys() == [QualifiedName(None, "test_provider_details")]
    assert struct.fields == (
        NamedFormat("base_url", OptionFormat(StringFormat())),
        NamedFormat("org", StringFormat()),
    )


def test_empty_block_yields_empty_struct() -> None:
    registry = Registry()

    flatten_block("data_source", "empty", Block(), registry)

    assert registry.get(QualifiedName(None, "empty_details")) == StructContainer()


def test_nested_block_is_registered_and_referenced() -> None:
    registry = Registry()
    block = Block(
        attributes={"name": _string(required=True)},
        block_types={
            "rule": NestedBlock(
                block=Block(attributes={"pattern": _string(optional=True)}),
                nesting_mode="list",
                max_items=3,
            )
        },
    )

    struct = flatten_block("resource", "firewall", block, registry)

    nested_key = QualifiedName("firewall_resource_block_type", "rule")
    assert registry.get(nested_key) == StructContainer(
        fields=(NamedFormat("pattern", OptionFormat(StringFormat())),)
    )
    assert struct.fields[-1] == NamedFormat(
        "rule", OptionFormat(SeqFormat(TypeRef("firewall_resource_block_type_rule")))
    )
    registry.validate_references()


def test_deeply_nested_blocks_use_parent_derived_namespaces() -> None:
    registry = Registry()
    block = Block(
        block_types={
            "outer": NestedBlock(
                block=Block(
                    block_types={
                        "inner": NestedBlock(block=Block(attributes={"v": _string(optional=True)}))
                    }
                )
            )
        }
    )

    flatten_block("resource", "top", block, registry)

    assert {key.full_name for key in registry} == {
        "top_details",
        "top_resource_block_type_outer",
        "outer_top_resource_block_type_inner",
    }
    outer = registry.get(QualifiedName("top_resource_block_type", "outer"))
    assert outer is not None
    assert outer.fields == (
        NamedFormat(
            "inner", OptionFormat(SeqFormat(TypeRef("outer_top_resource_block_type_inner")))
        ),
    )
    registry.validate_references()


def test_same_named_children_under_different_parents_do_not_collide() -> None:
    registry = Registry()
    child = {"config": NestedBlock(block=Block(attributes={"a": _string(optional=True)}))}
    other_child = {"config": NestedBlock(block=Block(attributes={"b": _string(optional=True)}))}

    flatten_block("resource", "first", Block(block_types=child), registry)
    flatten_block("resource", "second", Block(block_types=other_child), registry)

    assert ("first_resource_block_type", "config") in registry
    assert ("second_resource_block_type", "config") in registry


def test_nested_block_names_are_escaped() -> None:
    registry = Registry()
    block = Block(block_types={"match": NestedBlock(block=Block())})

    settings = FlatteningSettings(reserved_words=frozenset({"match"}))

    struct = flatten_block("resource", "router", block, registry, settings)

    assert struct.fields[0].name == "r#match"
    assert ("router_resource_block_type", "match") in registry


def test_unsupported_attribute_aborts_flattening() -> None:
    registry = Registry()
    block = Block(attributes={"blob": Attribute(type=PrimitiveType("dynamic"), optional=True)})

    with pytest.raises(UnsupportedTypeError):
        flatten_block(None, "broken", block, registry)

    assert len(registry) == 0
