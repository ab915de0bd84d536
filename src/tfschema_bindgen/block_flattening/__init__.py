"""Block flattening exports."""

from .block_flattener import (
    child_namespace,
    details_name,
    flatten_block,
    nested_block_type_name,
)
from .meta_attributes import META_ATTRIBUTES, inject_meta_attributes

__all__ = [
    "META_ATTRIBUTES",
    "child_namespace",
    "details_name",
    "flatten_block",
    "inject_meta_attributes",
    "nested_block_type_name",
]
