"""Dispatch from configured output format to emitter."""

from __future__ import annotations

from tfschema_bindgen.configuration.runtime_settings import GeneratorSettings, OutputFormat
from tfschema_bindgen.type_registry import Registry

from .registry_yaml_writer import dump_registry_yaml
from .rust_emitter import generate_rust_source


def render_registry(registry: Registry, settings: GeneratorSettings | None = None) -> str:
    """Render the registry in the configured output format."""
    resolved_settings = settings or GeneratorSettings()
    if resolved_settings.output_format is OutputFormat.YAML:
        return dump_registry_yaml(registry, resolved_settings)
    return generate_rust_source(registry, resolved_settings)
