"""Rust source generation with serde derives for a type registry."""

from __future__ import annotations

from collections.abc import Sequence

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
from tfschema_bindgen.type_registry import QualifiedName, Registry

from .emission_errors import EmissionError, validate_registry

_INDENT = "    "
_ALLOW_ATTRIBUTE = (
    "#![allow(unused_imports, non_snake_case, non_camel_case_types, non_upper_case_globals)]"
)
_SERDE_DERIVES = ("Serialize", "Deserialize")


def generate_rust_source(registry: Registry, settings: GeneratorSettings | None = None) -> str:
    """Render every registry entry as a serde-annotated Rust definition.

    Type references are validated first; nothing is rendered if any is unresolved.
    """
    resolved_settings = settings or GeneratorSettings()
    validate_registry(registry, resolved_settings.external_names)
    return _RustEmitter(resolved_settings).emit(registry)


def quote_type(value: Format, known_names: set[str] | frozenset[str] | None = None) -> str:
    """Rust spelling of ``value``.

    When ``known_names`` is given, references to names outside it are boxed.
    Elements of ``Vec`` and ``Map`` are never boxed.
    """
    if isinstance(value, TypeRef):
        if known_names is not None and value.name not in known_names:
            return f"Box<{value.name}>"
        return value.name
    if isinstance(value, UnitFormat):
        return "()"
    if isinstance(value, BoolFormat):
        return "bool"
    if isinstance(value, IntFormat):
        return f"{'i' if value.signed else 'u'}{value.width}"
    if isinstance(value, FloatFormat):
        return f"f{value.width}"
    if isinstance(value, CharFormat):
        return "char"
    if isinstance(value, StringFormat):
        return "String"
    if isinstance(value, BytesFormat):
        return "Bytes"
    if isinstance(value, OptionFormat):
        return f"Option<{quote_type(value.inner, known_names)}>"
    if isinstance(value, SeqFormat):
        return f"Vec<{quote_type(value.element)}>"
    if isinstance(value, MapFormat):
        return f"Map<{quote_type(value.key)}, {quote_type(value.value)}>"
    if isinstance(value, TupleFormat):
        return _quote_tuple(value.elements, known_names)
    if isinstance(value, FixedArrayFormat):
        return f"[{quote_type(value.element, known_names)}; {value.size}]"
    raise EmissionError(f"Cannot render format: {value!r}")


def _quote_tuple(
    elements: Sequence[Format], known_names: set[str] | frozenset[str] | None
) -> str:
    quoted = [quote_type(element, known_names) for element in elements]
    if len(quoted) == 1:
        return f"({quoted[0]},)"
    return f"({', '.join(quoted)})"


class _RustEmitter:
    """Accumulates the lines of one generated Rust module."""

    def __init__(self, settings: GeneratorSettings) -> None:
        self._settings = settings
        self._lines: list[str] = []
        self._level = 0
        self._known_names: set[str] = set(settings.external_names)

    def emit(self, registry: Registry) -> str:
        self._output_preamble()
        for key, container in registry.items():
            self._output_container(key, container)
            self._known_names.add(key.full_name)
        return "\n".join(self._lines).rstrip("\n") + "\n"

    def _write(self, text: str = "") -> None:
        self._lines.append(f"{_INDENT * self._level}{text}" if text else "")

    def _output_preamble(self) -> None:
        external_names = self._settings.external_names
        self._write(f"//! Serde bindings for module `{self._settings.module_name}`.")
        self._write(_ALLOW_ATTRIBUTE)
        if "Map" not in external_names:
            self._write("use std::collections::BTreeMap as Map;")
        self._write("use serde::{Serialize, Deserialize};")
        if "Bytes" not in external_names:
            self._write("use serde_bytes::ByteBuf as Bytes;")
        for module, definitions in self._settings.external_definitions.items():
            # Names declared without a module are assumed to be in scope already.
            if module and definitions:
                self._write(f"use {module}::{{{', '.join(definitions)}}};")
        self._write()

    def _output_container(self, key: QualifiedName, container: ContainerFormat) -> None:
        derives = [*self._settings.derive_macros, *_SERDE_DERIVES]
        if isinstance(container, StructContainer) and "Default" not in derives:
            derives.append("Default")
        self._write(f"#[derive({', '.join(derives)})]")
        if key.namespace:
            self._write(f'#[serde(rename = "{key.name}")]')

        visibility = self._visibility()
        name = key.full_name
        if isinstance(container, UnitStructContainer):
            self._write(f"{visibility}struct {name};")
        elif isinstance(container, NewTypeContainer):
            quoted = quote_type(container.format, self._known_names)
            self._write(f"{visibility}struct {name}({visibility}{quoted});")
        elif isinstance(container, StructContainer):
            self._write(f"{visibility}struct {name} {{")
            self._output_fields(container.fields, visibility)
            self._write("}")
        elif isinstance(container, EnumContainer):
            self._write(f"{visibility}enum {name} {{")
            self._level += 1
            for variant in container.variants:
                self._output_variant(variant.name, variant.shape)
            self._level -= 1
            self._write("}")
        else:
            raise EmissionError(f"Cannot render container {name}: {container!r}")
        self._write()

    def _output_fields(self, fields: Sequence[NamedFormat], visibility: str) -> None:
        self._level += 1
        for field in fields:
            self._output_doc(field)
            self._output_field_rename(field)
            self._output_field_annotation(field.value)
            self._write(f"{visibility}{field.name}: {quote_type(field.value, self._known_names)},")
        self._level -= 1

    def _output_doc(self, field: NamedFormat) -> None:
        description = field.metadata.description
        if not self._settings.emit_docs or not description or not description.strip():
            return
        for line in description.strip().splitlines():
            stripped = line.rstrip()
            self._write(f"/// {stripped}" if stripped else "///")

    def _output_field_rename(self, field: NamedFormat) -> None:
        source_name = field.metadata.source_name
        # serde strips the `r#` prefix of raw identifiers by itself.
        if source_name and field.name not in (source_name, f"r#{source_name}"):
            self._write(f'#[serde(rename = "{source_name}")]')

    def _output_field_annotation(self, value: Format) -> None:
        if isinstance(value, OptionFormat):
            self._write('#[serde(skip_serializing_if = "Option::is_none")]')
        elif isinstance(value, StringFormat):
            self._write('#[serde(default, skip_serializing_if = "String::is_empty")]')

    def _output_variant(self, name: str, shape: VariantShape) -> None:
        if isinstance(shape, UnitVariant):
            self._write(f"{name},")
        elif isinstance(shape, NewTypeVariant):
            self._write(f"{name}({quote_type(shape.format, self._known_names)}),")
        elif isinstance(shape, TupleVariant):
            quoted = ", ".join(quote_type(value, self._known_names) for value in shape.formats)
            self._write(f"{name}({quoted}),")
        elif isinstance(shape, StructVariant):
            self._write(f"{name} {{")
            # Fields inside variants never carry `pub`.
            self._output_fields(shape.fields, "")
            self._write("},")
        else:
            raise EmissionError(f"Cannot render variant {name}: {shape!r}")

    def _visibility(self) -> str:
        return "pub " if self._settings.track_visibility else ""
