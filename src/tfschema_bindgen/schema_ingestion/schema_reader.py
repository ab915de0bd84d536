"""Schema document loading and structural parsing service."""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

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


class SchemaError(Exception):
    """Raised when a schema document is unreadable or structurally malformed."""


def load_schema_export(schema_path: Path | str) -> SchemaExport:
    """Read and parse a JSON provider schema export from disk."""
    path = Path(schema_path)
    if not path.exists():
        raise SchemaError(f"Schema file not found: {path}")
    try:
        text = path.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise SchemaError(f"Failed to read schema file {path}: {exc}") from exc
    return parse_schema_export(text)


def parse_schema_export(text: str) -> SchemaExport:
    """Parse schema text into typed entities."""
    try:
        root = json.loads(text)
    except json.JSONDecodeError as exc:
        raise SchemaError(f"Invalid schema document: {exc}") from exc
    return parse_schema_data(root)


def parse_schema_data(root: Any) -> SchemaExport:
    """Convert an already decoded JSON value into typed entities."""
    document = _require_mapping(root, "$")
    format_version = _require_string(document.get("format_version"), "$.format_version")
    providers = _require_mapping(document.get("provider_schemas"), "$.provider_schemas")
    return SchemaExport(
        format_version=format_version,
        provider_schemas={
            _require_key(name, "$.provider_schemas"): _parse_provider(
                value, f"$.provider_schemas.{name}"
            )
            for name, value in providers.items()
        },
    )


def parse_attribute_type(value: Any, path: str = "type") -> AttributeType:
    """Resolve the loosely typed ``type`` field into a closed variant."""
    if isinstance(value, str):
        return PrimitiveType(tag=value)
    if isinstance(value, list) and value and isinstance(value[0], str):
        return TaggedType(tag=value[0], rest=tuple(value[1:]))
    raise SchemaError(f"{path} must be a type tag string or a non-empty tagged array.")


def _parse_provider(value: Any, path: str) -> ProviderSchema:
    section = _require_mapping(value, path)
    return ProviderSchema(
        provider=_parse_schema_item(section.get("provider"), f"{path}.provider"),
        resource_schemas=_parse_schema_items(
            section.get("resource_schemas"), f"{path}.resource_schemas"
        ),
        data_source_schemas=_parse_schema_items(
            section.get("data_source_schemas"), f"{path}.data_source_schemas"
        ),
    )


def _parse_schema_items(value: Any, path: str) -> dict[str, SchemaItem]:
    if value is None:
        return {}
    section = _require_mapping(value, path)
    return {
        _require_key(name, path): _parse_schema_item(item, f"{path}.{name}")
        for name, item in section.items()
    }


def _parse_schema_item(value: Any, path: str) -> SchemaItem:
    section = _require_mapping(value, path)
    version = _require_int(section.get("version"), f"{path}.version")
    return SchemaItem(version=version, block=_parse_block(section.get("block"), f"{path}.block"))


def _parse_block(value: Any, path: str) -> Block:
    section = _require_mapping(value, path)
    attributes = section.get("attributes")
    block_types = section.get("block_types")
    return Block(
        attributes={}
        if attributes is None
        else {
            _require_key(name, f"{path}.attributes"): _parse_attribute(
                attribute, f"{path}.attributes.{name}"
            )
            for name, attribute in _require_mapping(attributes, f"{path}.attributes").items()
        },
        block_types={}
        if block_types is None
        else {
            _require_key(name, f"{path}.block_types"): _parse_nested_block(
                nested, f"{path}.block_types.{name}"
            )
            for name, nested in _require_mapping(block_types, f"{path}.block_types").items()
        },
    )


def _parse_attribute(value: Any, path: str) -> Attribute:
    section = _require_mapping(value, path)
    if "type" not in section:
        raise SchemaError(f"{path}.type is required.")
    return Attribute(
        type=parse_attribute_type(section["type"], f"{path}.type"),
        description=_optional_string(section.get("description"), f"{path}.description"),
        required=_optional_bool(section.get("required"), f"{path}.required"),
        optional=_optional_bool(section.get("optional"), f"{path}.optional"),
        computed=_optional_bool(section.get("computed"), f"{path}.computed"),
        sensitive=_optional_bool(section.get("sensitive"), f"{path}.sensitive"),
        description_kind=_parse_description_kind(
            section.get("description_kind"), f"{path}.description_kind"
        ),
        deprecated=_optional_bool(section.get("deprecated"), f"{path}.deprecated"),
    )


def _parse_nested_block(value: Any, path: str) -> NestedBlock:
    section = _require_mapping(value, path)
    return NestedBlock(
        block=_parse_block(section.get("block"), f"{path}.block"),
        nesting_mode=_optional_string(section.get("nesting_mode"), f"{path}.nesting_mode"),
        min_items=_optional_count(section.get("min_items"), f"{path}.min_items"),
        max_items=_optional_count(section.get("max_items"), f"{path}.max_items"),
    )


def _parse_description_kind(value: Any, path: str) -> DescriptionKind | None:
    if value is None:
        return None
    try:
        return DescriptionKind(value)
    except ValueError as exc:
        raise SchemaError(f"{path} must be 'plain' or 'markdown'.") from exc


def _require_mapping(value: Any, path: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise SchemaError(f"{path} must be an object.")
    return value


def _require_key(name: Any, path: str) -> str:
    if not isinstance(name, str) or not name:
        raise SchemaError(f"{path} keys must be non-empty strings.")
    return name


def _require_string(value: Any, path: str) -> str:
    if not isinstance(value, str):
        raise SchemaError(f"{path} must be a string.")
    return value


def _optional_string(value: Any, path: str) -> str | None:
    if value is None:
        return None
    return _require_string(value, path)


def _require_int(value: Any, path: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise SchemaError(f"{path} must be an integer.")
    return value


def _optional_count(value: Any, path: str) -> int | None:
    if value is None:
        return None
    count = _require_int(value, path)
    if count < 0:
        raise SchemaError(f"{path} must not be negative.")
    return count


def _optional_bool(value: Any, path: str) -> bool:
    if value is None:
        return False
    if not isinstance(value, bool):
        raise SchemaError(f"{path} must be a boolean.")
    return value
