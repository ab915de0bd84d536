"""Code emission exports."""

from .emission_errors import EmissionError, validate_registry
from .registry_yaml_writer import (
    container_to_data,
    dump_registry_yaml,
    format_to_data,
    registry_to_data,
)
from .rendering import render_registry
from .rust_emitter import generate_rust_source, quote_type

__all__ = [
    "EmissionError",
    "container_to_data",
    "dump_registry_yaml",
    "format_to_data",
    "generate_rust_source",
    "quote_type",
    "registry_to_data",
    "render_registry",
    "validate_registry",
]
