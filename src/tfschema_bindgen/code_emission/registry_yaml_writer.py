"""Language-neutral YAML dump of a type registry."""

from __future__ import annotations

from typing import Any

import yaml

from tfschema_bindgen.configuration.runtime_settings import GeneratorSettings
from tfschema_bindgen.type_formats import (
    BoolFormat,
    BytesFormat,
    CharFormat,
    ContainerFormat,
    EnumContainer,
    FixedArrayFormat,
    FloatFormat,
    Format,
    IntFormat,
    MapFormat,
    NamedFormat,
    NewTypeContainer,
    NewTypeVariant,
    OptionFormat,
    SeqFormat,
    StringFormat,
    StructContainer,
    StructVariant,
    TupleFormat,
    TupleVariant,
    TypeRef,
    UnitFormat,
    UnitStructContainer,
    UnitVariant,
    VariantShape,
)
from tfschema_bindgen.type_registry import Registry

from .emission_errors import EmissionError, validate_registry

_SCALAR_TAGS: dict[type, str] = {
    UnitFormat: "UNIT",
    BoolFormat: "BOOL",
    CharFormat: "CHAR",
    StringFormat: "STR",
    BytesFormat: "BYTES",
}


def dump_registry_yaml(registry: Registry, settings: GeneratorSettings | None = None) -> str:
    """Render the registry as YAML keyed by emitted container name."""
    resolved_settings = settings or GeneratorSettings()
    validate_registry(registry, resolved_settings.external_names)
    return yaml.safe_dump(registry_to_data(registry), sort_keys=False, default_flow_style=False)


def registry_to_data(registry: Registry) -> dict[str, Any]:
    """Plain-data view of the registry in deterministic order."""
    return {key.full_name: container_to_data(container) for key, container in registry.items()}


def container_to_data(container: ContainerFormat) -> Any:
    if isinstance(container, UnitStructContainer):
        return "UNITSTRUCT"
    if isinstance(container, NewTypeContainer):
        return {"NEWTYPESTRUCT": format_to_data(container.format)}
    if isinstance(container, StructContainer):
        return {"STRUCT": _fields_to_data(container.fields)}
    if isinstance(container, EnumContainer):
        return {
            "ENUM": {
                variant.discriminant: {variant.name: _variant_to_data(variant.shape)}
                for variant in container.variants
            }
        }
    raise EmissionError(f"Cannot serialize container: {container!r}")


def format_to_data(value: Format) -> Any:
    scalar = _SCALAR_TAGS.get(type(value))
    if scalar is not None:
        return scalar
    if isinstance(value, IntFormat):
        return f"{'I' if value.signed else 'U'}{value.width}"
    if isinstance(value, FloatFormat):
        return f"F{value.width}"
    if isinstance(value, OptionFormat):
        return {"OPTION": format_to_data(value.inner)}
    if isinstance(value, SeqFormat):
        return {"SEQ": format_to_data(value.element)}
    if isinstance(value, MapFormat):
        return {"MAP": {"KEY": format_to_data(value.key), "VALUE": format_to_data(value.value)}}
    if isinstance(value, TupleFormat):
        return {"TUPLE": [format_to_data(element) for element in value.elements]}
    if isinstance(value, FixedArrayFormat):
        return {"TUPLEARRAY": {"CONTENT": format_to_data(value.element), "SIZE": value.size}}
    if isinstance(value, TypeRef):
        return {"TYPENAME": value.name}
    raise EmissionError(f"Cannot serialize format: {value!r}")


def _fields_to_data(fields: tuple[NamedFormat, ...]) -> list[dict[str, Any]]:
    return [{field.name: format_to_data(field.value)} for field in fields]


def _variant_to_data(shape: VariantShape) -> Any:
    if isinstance(shape, UnitVariant):
        return "UNIT"
    if isinstance(shape, NewTypeVariant):
        return {"NEWTYPE": format_to_data(shape.format)}
    if isinstance(shape, TupleVariant):
        return {"TUPLE": [format_to_data(value) for value in shape.formats]}
    if isinstance(shape, StructVariant):
        return {"STRUCT": _fields_to_data(shape.fields)}
    raise EmissionError(f"Cannot serialize variant: {shape!r}")
