"""Container definitions: the named shapes stored in a type registry."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

from .formats import Format, FormatModelError, iter_type_refs


@dataclass(frozen=True)
class FieldMetadata:
    """Schema details carried alongside a field for emission only."""

    source_name: str | None = None
    description: str | None = None
    description_kind: str | None = None
    required: bool = False
    sensitive: bool = False
    deprecated: bool = False


@dataclass(frozen=True)
class NamedFormat:
    """A named field. Metadata is excluded from structural equality."""

    name: str
    value: Format
    metadata: FieldMetadata = field(default_factory=FieldMetadata, compare=False)


@dataclass(frozen=True)
class UnitVariant:
    """Variant without payload."""


@dataclass(frozen=True)
class NewTypeVariant:
    """Variant wrapping exactly one value."""

    format: Format


@dataclass(frozen=True)
class TupleVariant:
    """Variant wrapping an anonymous tuple."""

    formats: tuple[Format, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "formats", tuple(self.formats))


@dataclass(frozen=True)
class StructVariant:
    """Variant with named fields."""

    fields: tuple[NamedFormat, ...]

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", _unique_fields(self.fields, "struct variant"))


VariantShape = UnitVariant | NewTypeVariant | TupleVariant | StructVariant


@dataclass(frozen=True)
class EnumVariant:
    """One tagged-union alternative."""

    discriminant: int
    name: str
    shape: VariantShape


@dataclass(frozen=True)
class StructContainer:
    """Plain record of named fields."""

    fields: tuple[NamedFormat, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", _unique_fields(self.fields, "struct"))


@dataclass(frozen=True)
class EnumContainer:
    """Tagged union; discriminants are the dense sequence 0..N-1 in declaration order."""

    variants: tuple[EnumVariant, ...] = ()

    def __post_init__(self) -> None:
        variants = tuple(self.variants)
        seen_names: set[str] = set()
        for expected, variant in enumerate(variants):
            if variant.discriminant != expected:
                raise FormatModelError(
                    f"Enum variant '{variant.name}' has discriminant {variant.discriminant}, "
                    f"expected {expected}."
                )
            if variant.name in seen_names:
                raise FormatModelError(f"Duplicate enum variant name: {variant.name}")
            seen_names.add(variant.name)
        object.__setattr__(self, "variants", variants)


@dataclass(frozen=True)
class NewTypeContainer:
    """Named wrapper around a single format."""

    format: Format


@dataclass(frozen=True)
class UnitStructContainer:
    """Named type without any value."""


ContainerFormat = StructContainer | EnumContainer | NewTypeContainer | UnitStructContainer


def enum_from_variants(variants: Iterable[tuple[str, VariantShape]]) -> EnumContainer:
    """Build an enum assigning discriminants by enumeration order."""
    return EnumContainer(
        variants=tuple(
            EnumVariant(discriminant=position, name=name, shape=shape)
            for position, (name, shape) in enumerate(variants)
        )
    )


def iter_container_type_refs(container: ContainerFormat) -> Iterator[str]:
    """Yield every type name referenced by a container definition."""
    if isinstance(container, StructContainer):
        for named in container.fields:
            yield from iter_type_refs(named.value)
    elif isinstance(container, NewTypeContainer):
        yield from iter_type_refs(container.format)
    elif isinstance(container, EnumContainer):
        for variant in container.variants:
            yield from _iter_variant_type_refs(variant.shape)


def _iter_variant_type_refs(shape: VariantShape) -> Iterator[str]:
    if isinstance(shape, NewTypeVariant):
        yield from iter_type_refs(shape.format)
    elif isinstance(shape, TupleVariant):
        for value in shape.formats:
            yield from iter_type_refs(value)
    elif isinstance(shape, StructVariant):
        for named in shape.fields:
            yield from iter_type_refs(named.value)


def _unique_fields(fields: Iterable[NamedFormat], owner: str) -> tuple[NamedFormat, ...]:
    normalized = tuple(fields)
    seen: set[str] = set()
    for named in normalized:
        if named.name in seen:
            raise FormatModelError(f"Duplicate field name in {owner}: {named.name}")
        seen.add(named.name)
    return normalized
