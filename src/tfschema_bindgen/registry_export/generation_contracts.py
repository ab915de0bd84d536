"""Generation run entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class GenerationRequest:
    """Input contract for one generation run."""

    input_path: str
    config_path: str | None = None
    output_path: str | None = None
    output_format: str | None = None
    module_name: str | None = None


@dataclass(frozen=True)
class GenerationOutcome:
    """Output contract for one completed generation run."""

    source: str
    output_path: Path | None
    entry_count: int
