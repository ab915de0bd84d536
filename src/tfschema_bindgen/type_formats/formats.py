"""Language-agnostic value formats used as the intermediate representation."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass

INT_WIDTHS: frozenset[int] = frozenset({8, 16, 32, 64, 128})
FLOAT_WIDTHS: frozenset[int] = frozenset({32, 64})


class FormatModelError(Exception):
    """Raised when a format or container definition violates the type model."""


@dataclass(frozen=True)
class UnitFormat:
    """The empty value."""


@dataclass(frozen=True)
class BoolFormat:
    """Boolean value."""


@dataclass(frozen=True)
class IntFormat:
    """Fixed-width integer."""

    width: int = 64
    signed: bool = True

    def __post_init__(self) -> None:
        if self.width not in INT_WIDTHS:
            raise FormatModelError(f"Unsupported integer width: {self.width}")


@dataclass(frozen=True)
class FloatFormat:
    """IEEE-754 floating point number."""

    width: int = 64

    def __post_init__(self) -> None:
        if self.width not in FLOAT_WIDTHS:
            raise FormatModelError(f"Unsupported float width: {self.width}")


@dataclass(frozen=True)
class CharFormat:
    """Single character."""


@dataclass(frozen=True)
class StringFormat:
    """UTF-8 string."""


@dataclass(frozen=True)
class BytesFormat:
    """Opaque byte buffer."""


@dataclass(frozen=True)
class OptionFormat:
    """Value that may be absent."""

    inner: Format


@dataclass(frozen=True)
class SeqFormat:
    """Variable-length sequence."""

    element: Format


@dataclass(frozen=True)
class MapFormat:
    """Ordered key/value mapping."""

    key: Format
    value: Format


@dataclass(frozen=True)
class TupleFormat:
    """Heterogeneous fixed-length tuple."""

    elements: tuple[Format, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "elements", tuple(self.elements))


@dataclass(frozen=True)
class FixedArrayFormat:
    """Homogeneous array with a size known ahead of time."""

    element: Format
    size: int

    def __post_init__(self) -> None:
        if isinstance(self.size, bool) or not isinstance(self.size, int) or self.size <= 0:
            raise FormatModelError(f"Fixed array size must be a positive integer: {self.size!r}")


@dataclass(frozen=True)
class TypeRef:
    """Reference to a named container, resolved only after the registry is complete."""

    name: str

    def __post_init__(self) -> None:
        if not self.name:
            raise FormatModelError("Type references require a non-empty name.")


Format = (
    UnitFormat
    | BoolFormat
    | IntFormat
    | FloatFormat
    | CharFormat
    | StringFormat
    | BytesFormat
    | OptionFormat
    | SeqFormat
    | MapFormat
    | TupleFormat
    | FixedArrayFormat
    | TypeRef
)


def iter_type_refs(value: Format) -> Iterator[str]:
    """Yield every referenced type name reachable from ``value``, depth first."""
    if isinstance(value, TypeRef):
        yield value.name
    elif isinstance(value, OptionFormat):
        yield from iter_type_refs(value.inner)
    elif isinstance(value, SeqFormat):
        yield from iter_type_refs(value.element)
    elif isinstance(value, MapFormat):
        yield from iter_type_refs(value.key)
        yield from iter_type_refs(value.value)
    elif isinstance(value, TupleFormat):
        for element in value.elements:
            yield from iter_type_refs(element)
    elif isinstance(value, FixedArrayFormat):
        yield from iter_type_refs(value.element)
