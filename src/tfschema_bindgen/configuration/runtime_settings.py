"""Configuration domain entities."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from tfschema_bindgen.type_registry import DuplicatePolicy

# Keywords usable as raw identifiers (`r#name`).
RUST_RESERVED_WORDS: tuple[str, ...] = (
    "abstract",
    "as",
    "async",
    "await",
    "become",
    "box",
    "break",
    "const",
    "continue",
    "do",
    "dyn",
    "else",
    "enum",
    "extern",
    "false",
    "final",
    "fn",
    "for",
    "gen",
    "if",
    "impl",
    "in",
    "let",
    "loop",
    "macro",
    "match",
    "mod",
    "move",
    "mut",
    "override",
    "priv",
    "pub",
    "ref",
    "return",
    "static",
    "struct",
    "trait",
    "true",
    "try",
    "type",
    "typeof",
    "unsafe",
    "unsized",
    "use",
    "virtual",
    "where",
    "while",
    "yield",
)
# Path keywords cannot be raw identifiers; they get a suffix instead.
RUST_PATH_KEYWORDS: tuple[str, ...] = ("Self", "crate", "self", "super")
DEFAULT_RESERVED_WORD_ESCAPE = "r#{name}"
DEFAULT_PATH_KEYWORD_ESCAPE = "{name}_"
DEFAULT_DERIVE_MACROS: tuple[str, ...] = ("Clone", "Debug", "PartialEq", "PartialOrd")
DEFAULT_MODULE_NAME = "default"


class OutputFormat(str, Enum):
    """Supported renderings of a registry."""

    RUST = "rust"
    YAML = "yaml"


@dataclass(frozen=True)
class GeneratorSettings:
    """Options of the emission pass."""

    module_name: str = DEFAULT_MODULE_NAME
    output_format: OutputFormat = OutputFormat.RUST
    derive_macros: tuple[str, ...] = DEFAULT_DERIVE_MACROS
    track_visibility: bool = True
    emit_docs: bool = True
    external_definitions: Mapping[str, tuple[str, ...]] = field(default_factory=dict)

    @property
    def external_names(self) -> frozenset[str]:
        """Type names provided by external modules."""
        return frozenset(name for names in self.external_definitions.values() for name in names)


@dataclass(frozen=True)
class FlatteningSettings:
    """Options of attribute translation and block flattening."""

    reserved_words: frozenset[str] = frozenset(RUST_RESERVED_WORDS)
    reserved_word_escape: str = DEFAULT_RESERVED_WORD_ESCAPE
    path_keywords: frozenset[str] = frozenset(RUST_PATH_KEYWORDS)
    path_keyword_escape: str = DEFAULT_PATH_KEYWORD_ESCAPE
    inject_meta_attributes: bool = True
    on_duplicate: DuplicatePolicy = DuplicatePolicy.ERROR


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path | None
    generator: GeneratorSettings
    flattening: FlatteningSettings


def default_configuration() -> Configuration:
    """Configuration used when no config file is given."""
    return Configuration(path=None, generator=GeneratorSettings(), flattening=FlatteningSettings())
