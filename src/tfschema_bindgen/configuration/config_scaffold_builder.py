"""Configuration scaffold generation helpers."""

from __future__ import annotations

from pathlib import Path

DEFAULT_CONFIG_FILENAME = "tfbindgen.yaml"

_CONFIG_SCAFFOLD_TEMPLATE = """# Generator configuration for tfschema-bindgen.
# Every key is optional; remove the ones you do not need.

generator:
  # Module name recorded for the generated definitions.
  module_name: "default"
  # Output rendering: rust (serde type definitions) or yaml (registry dump).
  output_format: "rust"
  # Derive macros added to every container besides Serialize/Deserialize.
  derive_macros:
    - "Clone"
    - "Debug"
    - "PartialEq"
    - "PartialOrd"
  # Mark generated definitions and fields as `pub`.
  track_visibility: true
  # Turn attribute descriptions into doc comments.
  emit_docs: true
  # Type names provided by other modules; references to them are not reported as unresolved.
  # external_definitions:
  #   my_crate::types:
  #     - "Timestamp"

flattening:
  # Add depends_on, count, for_each and provider to every resource block.
  inject_meta_attributes: true
  # What to do when two different definitions share a qualified name: error or overwrite.
  on_duplicate: "error"
  # Field names that must be escaped; defaults to the Rust raw-identifier keyword table.
  # reserved_words:
  #   - "type"
  # Escape template, must contain {name} exactly once.
  reserved_word_escape: "r#{name}"
  # Keywords that cannot be raw identifiers (Self, crate, self, super) take this suffix escape.
  # The emitted field keeps its schema name on the wire through a serde rename.
  path_keyword_escape: "{name}_"
"""


def build_placeholder_configuration() -> str:
    """Build a YAML generator configuration template with inline guidance."""
    return _CONFIG_SCAFFOLD_TEMPLATE


def write_placeholder_configuration(output_path: Path | str) -> Path:
    """Write the generator configuration template to the requested output path.

    Args:
      output_path: Destination file path for the scaffold.

    Returns:
      The resolved destination path.

    Raises:
      FileExistsError: If the destination file already exists.
      OSError: If writing the scaffold fails.
    """
    destination = Path(output_path)
    if destination.exists():
        raise FileExistsError(f"Configuration file already exists: {destination.resolve()}")
    destination.write_text(build_placeholder_configuration(), encoding="utf-8")
    return destination.resolve()
