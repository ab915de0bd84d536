"""Flattening of nested schema blocks into registry entries."""

from __future__ import annotations

import logging

from tfschema_bindgen.attribute_translation import escape_field_name, translate_attributes
from tfschema_bindgen.configuration.runtime_settings import FlatteningSettings
from tfschema_bindgen.schema_ingestion import Block
from tfschema_bindgen.type_formats import (
    FieldMetadata,
    NamedFormat,
    OptionFormat,
    SeqFormat,
    StructContainer,
    TypeRef,
)
from tfschema_bindgen.type_registry import QualifiedName, Registry

_LOGGER = logging.getLogger(__name__)

DETAILS_SUFFIX = "_details"
BLOCK_TYPE_SUFFIX = "_block_type"


def details_name(name: str) -> QualifiedName:
    """Registry key of a top-level entity's struct."""
    return QualifiedName(None, f"{name}{DETAILS_SUFFIX}")


def nested_block_type_name(namespace: str | None, name: str, child_name: str) -> QualifiedName:
    """Registry key of a block type nested under block ``name``.

    The parent's name and namespace are part of the key, so same-named block
    types under different parents never collide.
    """
    if namespace:
        return QualifiedName(f"{name}_{namespace}{BLOCK_TYPE_SUFFIX}", child_name)
    return QualifiedName(f"{name}{BLOCK_TYPE_SUFFIX}", child_name)


def child_namespace(namespace: str | None, name: str) -> str:
    """Namespace hint handed down to the children of block ``name``."""
    return f"{name}_{namespace}" if namespace else name


def flatten_block(
    namespace: str | None,
    name: str,
    block: Block,
    registry: Registry,
    settings: FlatteningSettings | None = None,
) -> StructContainer:
    """Register the struct of ``block`` and of all its nested block types.

    The block itself lands under ``(None, "{name}_details")``. Failures abort
    the call; entries registered for already flattened children remain.
    """
    resolved_settings = settings or FlatteningSettings()
    struct = _build_block_struct(namespace, name, block, registry, resolved_settings)
    key = details_name(name)
    registry.insert(key, struct)
    _LOGGER.debug("Flattened block %s (%d fields)", key.full_name, len(struct.fields))
    return struct


def _build_block_struct(
    namespace: str | None,
    name: str,
    block: Block,
    registry: Registry,
    settings: FlatteningSettings,
) -> StructContainer:
    fields = translate_attributes(
        block.attributes,
        reserved_words=settings.reserved_words,
        escape_template=settings.reserved_word_escape,
        path_keywords=settings.path_keywords,
        path_keyword_escape=settings.path_keyword_escape,
    )
    for child_name in sorted(block.block_types):
        nested = block.block_types[child_name]
        child_struct = _build_block_struct(
            child_namespace(namespace, name), child_name, nested.block, registry, settings
        )
        key = nested_block_type_name(namespace, name, child_name)
        registry.insert(key, child_struct)
        _LOGGER.debug("Registered nested block type %s", key.full_name)
        # Cardinality (min_items/max_items) is not reflected in the shape.
        fields.append(
            NamedFormat(
                name=escape_field_name(
                    child_name,
                    settings.reserved_words,
                    settings.reserved_word_escape,
                    path_keywords=settings.path_keywords,
                    path_keyword_escape=settings.path_keyword_escape,
                ),
                value=OptionFormat(SeqFormat(TypeRef(key.full_name))),
                metadata=FieldMetadata(source_name=child_name),
            )
        )
    return StructContainer(fields=tuple(fields))
