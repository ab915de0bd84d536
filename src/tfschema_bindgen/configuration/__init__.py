"""Configuration domain exports."""

from .config_scaffold_builder import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    write_placeholder_configuration,
)
from .loader import ConfigurationError, load_configuration
from .logging_setup import configure_logging
from .runtime_settings import (
    RUST_PATH_KEYWORDS,
    RUST_RESERVED_WORDS,
    Configuration,
    FlatteningSettings,
    GeneratorSettings,
    OutputFormat,
    default_configuration,
)

__all__ = [
    "Configuration",
    "FlatteningSettings",
    "GeneratorSettings",
    "OutputFormat",
    "RUST_PATH_KEYWORDS",
    "RUST_RESERVED_WORDS",
    "default_configuration",
    "ConfigurationError",
    "configure_logging",
    "load_configuration",
    "DEFAULT_CONFIG_FILENAME",
    "build_placeholder_configuration",
    "write_placeholder_configuration",
]
