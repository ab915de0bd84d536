"""Attribute translation exports."""

from .attribute_translator import (
    UnsupportedTypeError,
    escape_field_name,
    resolve_attribute_format,
    translate_attribute,
    translate_attributes,
)

__all__ = [
    "UnsupportedTypeError",
    "escape_field_name",
    "resolve_attribute_format",
    "translate_attribute",
    "translate_attributes",
]
