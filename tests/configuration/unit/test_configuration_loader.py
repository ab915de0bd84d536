"""Configuration loader tests."""

from __future__ import annotations

import json
from pathlib import Path

import pytest
from tfschema_bindgen.configuration import RUST_PATH_KEYWORDS, RUST_RESERVED_WORDS, OutputFormat
from tfschema_bindgen.configuration.loader import ConfigurationError, load_configuration
from tfschema_bindgen.type_registry import DuplicatePolicy


def _write_file(path: Path, contents: str) -> Path:
    path.write_text(contents, encoding="utf-8")
    return path


def test_loads_yaml_configuration_with_defaults(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "tfbindgen.yaml",
        """
generator:
  module_name: "okta_bindings"
""",
    )

    configuration = load_configuration(config_path)

    assert configuration.path == config_path
    assert configuration.generator.module_name == "okta_bindings"
    assert configuration.generator.output_format is OutputFormat.RUST
    assert configuration.generator.derive_macros == ("Clone", "Debug", "PartialEq", "PartialOrd")
    assert configuration.generator.track_visibility is True
    assert configuration.generator.emit_docs is True
    assert configuration.generator.external_definitions == {}
    assert configuration.flattening.reserved_words == frozenset(RUST_RESERVED_WORDS)
    assert configuration.flattening.reserved_word_escape == "r#{name}"
    assert configuration.flattening.path_keywords == frozenset(RUST_PATH_KEYWORDS)
    assert configuration.flattening.path_keyword_escape == "{name}_"
    assert configuration.flattening.inject_meta_attributes is True
    assert configuration.flattening.on_duplicate is DuplicatePolicy.ERROR


def test_empty_file_yields_default_configuration(tmp_path: Path) -> None:
    configuration = load_configuration(_write_file(tmp_path / "empty.yaml", ""))

    assert configuration.generator.module_name == "default"
    assert configuration.flattening.inject_meta_attributes is True


def test_loads_json_configuration_with_every_option(tmp_path: Path) -> None:
    config_path = _write_file(
        tmp_path / "config.json",
        json.dumps(
            {
                "generator": {
                    "module_name": "bindings",
                    "output_format": "YAML",
                    "derive_macros": ["Debug", " Hash "],
                    "track_visibility": False,
                    "emit_docs": False,
                    "external_definitions": {"chrono": ["DateTime", "Utc"], "": "Local"},
                },
                "flattening": {
                    "reserved_words": "type",
                    "reserved_word_escape": "{name}_",
                    "path_keywords": ["self"],
                    "path_keyword_escape": "{name}_field",
                    "inject_meta_attributes": False,
                    "on_duplicate": "overwrite",
                },
            }
        ),
    )

    configuration = load_configuration(config_path)

    assert configuration.generator.output_format is OutputFormat.YAML
    assert configuration.generator.derive_macros == ("Debug", "Hash")
    assert configuration.generator.track_visibility is False
    assert configuration.generator.emit_docs is False
    assert configuration.generator.external_definitions == {
        "chrono": ("DateTime", "Utc"),
        "": ("Local",),
    }
    assert configuration.generator.external_names == frozenset({"DateTime", "Utc", "Local"})
    assert configuration.flattening.reserved_words == frozenset({"type"})
    assert configuration.flattening.reserved_word_escape == "{name}_"
    assert configuration.flattening.path_keywords == frozenset({"self"})
    assert configuration.flattening.path_keyword_escape == "{name}_field"
    assert configuration.flattening.inject_meta_attributes is False
    assert configuration.flattening.on_duplicate is DuplicatePolicy.OVERWRITE


@pytest.mark.parametrize(
    ("contents", "fragment"),
    [
        ("- just\n- a list\n", "Configuration root must be a mapping"),
        ("output:\n  path: x\n", "Unknown configuration sections: output"),
        ("generator: []\n", "'generator' must be a mapping"),
        ("generator:\n  module_name: '  '\n", "generator.module_name must not be empty"),
        ("generator:\n  output_format: go\n", "generator.output_format must be one of: rust, yaml"),
        ("generator:\n  derive_macros: [Debug, Serialize]\n", "must not list Serialize"),
        ("generator:\n  derive_macros: [Clone, Default]\n", "must not list Default"),
        ("generator:\n  derive_macros: [1]\n", "generator.derive_macros entries must be strings"),
        ("generator:\n  emit_docs: 'yes'\n", "generator.emit_docs must be a boolean"),
        ("flattening:\n  reserved_word_escape: escaped\n", "placeholder exactly once"),
        (
            "flattening:\n  path_keyword_escape: suffixed\n",
            "flattening.path_keyword_escape must contain",
        ),
        ("flattening:\n  on_duplicate: ignore\n", "flattening.on_duplicate must be one of"),
    ],
)
def test_invalid_configuration_is_rejected(tmp_path: Path, contents: str, fragment: str) -> None:
    config_path = _write_file(tmp_path / "invalid.yaml", contents)

    with pytest.raises(ConfigurationError, match=fragment):
        load_configuration(config_path)


def test_missing_configuration_file_is_reported(tmp_path: Path) -> None:
    with pytest.raises(ConfigurationError, match="Configuration file not found"):
        load_configuration(tmp_path / "absent.yaml")
