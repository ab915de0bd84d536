"""Framework-level attributes every resource block accepts implicitly."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from types import MappingProxyType

from tfschema_bindgen.schema_ingestion import Attribute, Block, PrimitiveType, TaggedType

META_ATTRIBUTES: Mapping[str, Attribute] = MappingProxyType(
    {
        "count": Attribute(
            type=PrimitiveType("number"),
            optional=True,
            description="Number of instances to create.",
        ),
        "depends_on": Attribute(
            type=TaggedType("list", ("string",)),
            optional=True,
            description="Explicit dependencies on other objects.",
        ),
        "for_each": Attribute(
            type=TaggedType("set", ("string",)),
            optional=True,
            description="Keys of the instances to create.",
        ),
        "provider": Attribute(
            type=PrimitiveType("string"),
            optional=True,
            description="Non-default provider configuration to use.",
        ),
    }
)


def inject_meta_attributes(block: Block) -> Block:
    """Return a copy of ``block`` extended with the meta-attributes.

    Attributes the schema already declares keep their own definition.
    """
    merged = dict(META_ATTRIBUTES)
    merged.update(block.attributes)
    return replace(block, attributes=merged)
