"""Errors and pre-flight checks shared by the emitters."""

from __future__ import annotations

from collections.abc import Iterable

from tfschema_bindgen.type_registry import Registry, UnresolvedReferenceError


class EmissionError(Exception):
    """Raised when a registry cannot be rendered."""


def validate_registry(registry: Registry, external_names: Iterable[str] = ()) -> None:
    """Fail before rendering when any type reference is unresolved."""
    try:
        registry.validate_references(external_names)
    except UnresolvedReferenceError as exc:
        raise EmissionError(str(exc)) from exc
