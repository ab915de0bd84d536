"""Schema ingestion exports."""

from .schema_models import (
    Attribute,
    AttributeType,
    Block,
    DescriptionKind,
    NestedBlock,
    PrimitiveType,
    ProviderSchema,
    SchemaExport,
    SchemaItem,
    TaggedType,
)
from .schema_reader import (
    SchemaError,
    load_schema_export,
    parse_attribute_type,
    parse_schema_data,
    parse_schema_export,
)

__all__ = [
    "Attribute",
    "AttributeType",
    "Block",
    "DescriptionKind",
    "NestedBlock",
    "PrimitiveType",
    "ProviderSchema",
    "SchemaExport",
    "SchemaItem",
    "TaggedType",
    "SchemaError",
    "load_schema_export",
    "parse_attribute_type",
    "parse_schema_data",
    "parse_schema_export",
]
