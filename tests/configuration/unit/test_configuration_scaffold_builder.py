"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from tfschema_bindgen.configuration import (
    DEFAULT_CONFIG_FILENAME,
    build_placeholder_configuration,
    load_configuration,
    write_placeholder_configuration,
)


def test_placeholder_configuration_documents_every_section() -> None:
    scaffold = build_placeholder_configuration()

    assert "generator:" in scaffold
    assert "flattening:" in scaffold
    assert "# Escape template, must contain {name} exactly once." in scaffold
    assert set(yaml.safe_load(scaffold)) == {"generator", "flattening"}


def test_written_placeholder_loads_as_valid_configuration(tmp_path: Path) -> None:
    destination = write_placeholder_configuration(tmp_path / DEFAULT_CONFIG_FILENAME)

    configuration = load_configuration(destination)

    assert destination == (tmp_path / "tfbindgen.yaml").resolve()
    assert configuration.generator.module_name == "default"
    assert configuration.flattening.reserved_word_escape == "r#{name}"


def test_existing_file_is_not_overwritten(tmp_path: Path) -> None:
    existing = tmp_path / "tfbindgen.yaml"
    existing.write_text("generator: {}\n", encoding="utf-8")

    with pytest.raises(FileExistsError, match="already exists"):
        write_placeholder_configuration(existing)

    assert existing.read_text(encoding="utf-8") == "generator: {}\n"
