"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from tfschema_bindgen.type_registry import DuplicatePolicy

from .runtime_settings import (
    DEFAULT_DERIVE_MACROS,
    DEFAULT_MODULE_NAME,
    DEFAULT_PATH_KEYWORD_ESCAPE,
    DEFAULT_RESERVED_WORD_ESCAPE,
    RUST_PATH_KEYWORDS,
    RUST_RESERVED_WORDS,
    Configuration,
    FlatteningSettings,
    GeneratorSettings,
    OutputFormat,
)

_ESCAPE_PLACEHOLDER = "{name}"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the configuration file."""
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")

    unknown_sections = sorted(set(parsed) - {"generator", "flattening"})
    if unknown_sections:
        raise ConfigurationError(f"Unknown configuration sections: {', '.join(unknown_sections)}")

    return Configuration(
        path=path,
        generator=_parse_generator_section(parsed.get("generator")),
        flattening=_parse_flattening_section(parsed.get("flattening")),
    )


def _parse_generator_section(value: Any) -> GeneratorSettings:
    section = _optional_mapping(value, "generator")
    module_name = _require_non_empty_string(
        section.get("module_name", DEFAULT_MODULE_NAME), "generator.module_name"
    )
    output_format = _parse_choice(
        section.get("output_format", OutputFormat.RUST.value),
        OutputFormat,
        "generator.output_format",
    )
    derive_macros = _normalize_string_sequence(
        section.get("derive_macros", list(DEFAULT_DERIVE_MACROS)), "generator.derive_macros"
    )
    for reserved in ("Serialize", "Deserialize"):
        if reserved in derive_macros:
            raise ConfigurationError(
                f"generator.derive_macros must not list {reserved}; it is always derived."
            )
    if "Default" in derive_macros:
        raise ConfigurationError(
            "generator.derive_macros must not list Default; structs always derive it."
        )
    return GeneratorSettings(
        module_name=module_name,
        output_format=output_format,
        derive_macros=derive_macros,
        track_visibility=_optional_bool(
            section.get("track_visibility"), "generator.track_visibility", default=True
        ),
        emit_docs=_optional_bool(section.get("emit_docs"), "generator.emit_docs", default=True),
        external_definitions=_parse_external_definitions(section.get("external_definitions")),
    )


def _parse_flattening_section(value: Any) -> FlatteningSettings:
    section = _optional_mapping(value, "flattening")
    reserved_words = section.get("reserved_words")
    path_keywords = section.get("path_keywords")
    return FlatteningSettings(
        reserved_words=frozenset(
            RUST_RESERVED_WORDS
            if reserved_words is None
            else _normalize_string_sequence(reserved_words, "flattening.reserved_words")
        ),
        reserved_word_escape=_parse_escape_template(
            section.get("reserved_word_escape", DEFAULT_RESERVED_WORD_ESCAPE),
            "flattening.reserved_word_escape",
        ),
        path_keywords=frozenset(
            RUST_PATH_KEYWORDS
            if path_keywords is None
            else _normalize_string_sequence(path_keywords, "flattening.path_keywords")
        ),
        path_keyword_escape=_parse_escape_template(
            section.get("path_keyword_escape", DEFAULT_PATH_KEYWORD_ESCAPE),
            "flattening.path_keyword_escape",
        ),
        inject_meta_attributes=_optional_bool(
            section.get("inject_meta_attributes"),
            "flattening.inject_meta_attributes",
            default=True,
        ),
        on_duplicate=_parse_choice(
            section.get("on_duplicate", DuplicatePolicy.ERROR.value),
            DuplicatePolicy,
            "flattening.on_duplicate",
        ),
    )


def _parse_escape_template(value: Any, field_name: str) -> str:
    template = _require_non_empty_string(value, field_name)
    if template.count(_ESCAPE_PLACEHOLDER) != 1:
        raise ConfigurationError(
            f"{field_name} must contain the {_ESCAPE_PLACEHOLDER} placeholder exactly once."
        )
    return template


def _parse_external_definitions(value: Any) -> dict[str, tuple[str, ...]]:
    if value is None:
        return {}
    section = _require_mapping(value, "generator.external_definitions")
    definitions: dict[str, tuple[str, ...]] = {}
    for module, names in section.items():
        if not isinstance(module, str):
            raise ConfigurationError("generator.external_definitions keys must be strings.")
        definitions[module.strip()] = _normalize_string_sequence(
            names, f"generator.external_definitions.{module}"
        )
    return definitions


def _parse_choice(value: Any, choices: type, field_name: str):
    text = _require_non_empty_string(value, field_name).lower()
    try:
        return choices(text)
    except ValueError as exc:
        allowed = ", ".join(choice.value for choice in choices)
        raise ConfigurationError(f"{field_name} must be one of: {allowed}.") from exc


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _optional_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if value is None:
        return {}
    return _require_mapping(value, section_name)


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' must be a mapping.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_bool(value: Any, field_name: str, *, default: bool) -> bool:
    if value is None:
        return default
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
