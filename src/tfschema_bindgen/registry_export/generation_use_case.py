"""Generation use-case service: schema file to rendered bindings."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path

from tfschema_bindgen.attribute_translation import UnsupportedTypeError
from tfschema_bindgen.code_emission import EmissionError, render_registry
from tfschema_bindgen.configuration import (
    Configuration,
    ConfigurationError,
    OutputFormat,
    default_configuration,
    load_configuration,
)
from tfschema_bindgen.root_indexing import RootIndexError
from tfschema_bindgen.schema_ingestion import SchemaError, load_schema_export
from tfschema_bindgen.type_formats import FormatModelError
from tfschema_bindgen.type_registry import RegistryError

from .generation_contracts import GenerationOutcome, GenerationRequest
from .schema_export import export_schema_to_registry

_LOGGER = logging.getLogger(__name__)


class BindgenError(Exception):
    """Raised when a generation run cannot be completed."""


def generate_bindings(request: GenerationRequest) -> GenerationOutcome:
    """Load configuration and schema, build the registry and render it."""
    configuration = _load_effective_configuration(request)
    try:
        schema = load_schema_export(request.input_path)
        registry = export_schema_to_registry(schema, configuration.flattening)
        source = render_registry(registry, configuration.generator)
    except (
        SchemaError,
        UnsupportedTypeError,
        RegistryError,
        FormatModelError,
        RootIndexError,
        EmissionError,
    ) as exc:
        raise BindgenError(str(exc)) from exc

    _LOGGER.debug(
        "Rendered %d registry entries as %s",
        len(registry),
        configuration.generator.output_format.value,
    )
    return GenerationOutcome(
        source=source,
        output_path=_write_output(source, request.output_path),
        entry_count=len(registry),
    )


def _load_effective_configuration(request: GenerationRequest) -> Configuration:
    try:
        configuration = (
            load_configuration(request.config_path)
            if request.config_path
            else default_configuration()
        )
    except ConfigurationError as exc:
        raise BindgenError(str(exc)) from exc

    overrides: dict[str, object] = {}
    if request.output_format:
        try:
            overrides["output_format"] = OutputFormat(request.output_format.lower())
        except ValueError as exc:
            raise BindgenError(f"Unsupported output format: {request.output_format}") from exc
    if request.module_name:
        overrides["module_name"] = request.module_name
    if not overrides:
        return configuration
    return replace(configuration, generator=replace(configuration.generator, **overrides))


def _write_output(source: str, output_path: str | None) -> Path | None:
    if output_path is None:
        return None
    destination = Path(output_path)
    try:
        destination.parent.mkdir(parents=True, exist_ok=True)
        destination.write_text(source, encoding="utf-8")
    except OSError as exc:
        raise BindgenError(f"Failed to write output {destination}: {exc}") from exc
    return destination.resolve()
