"""Terraform provider schema entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum


class DescriptionKind(str, Enum):
    """Markup used by an attribute description."""

    PLAIN = "plain"
    MARKDOWN = "markdown"


@dataclass(frozen=True)
class PrimitiveType:
    """Attribute type given as a bare tag, e.g. ``"string"``."""

    tag: str


@dataclass(frozen=True)
class TaggedType:
    """Attribute type given as an array, e.g. ``["list", "string"]``."""

    tag: str
    rest: tuple[object, ...] = ()


AttributeType = PrimitiveType | TaggedType


@dataclass(frozen=True)
class Attribute:  # pylint: disable=too-many-instance-attributes
    """One typed attribute of a block."""

    type: AttributeType
    description: str | None = None
    required: bool = False
    optional: bool = False
    computed: bool = False
    sensitive: bool = False
    description_kind: DescriptionKind | None = None
    deprecated: bool = False


@dataclass(frozen=True)
class Block:
    """Named attributes plus nested block types."""

    attributes: Mapping[str, Attribute] = field(default_factory=dict)
    block_types: Mapping[str, NestedBlock] = field(default_factory=dict)


@dataclass(frozen=True)
class NestedBlock:
    """A block type nested in a parent block, with its cardinality metadata."""

    block: Block
    nesting_mode: str | None = None
    min_items: int | None = None
    max_items: int | None = None


@dataclass(frozen=True)
class SchemaItem:
    """Versioned block definition of a provider, resource or data source."""

    version: int
    block: Block


@dataclass(frozen=True)
class ProviderSchema:
    """Everything one provider declares."""

    provider: SchemaItem
    resource_schemas: Mapping[str, SchemaItem] = field(default_factory=dict)
    data_source_schemas: Mapping[str, SchemaItem] = field(default_factory=dict)


@dataclass(frozen=True)
class SchemaExport:
    """Top-level ``terraform providers schema -json`` document."""

    format_version: str
    provider_schemas: Mapping[str, ProviderSchema]
