"""Type-format model tests."""

from __future__ import annotations

import pytest
from tfschema_bindgen.type_formats import (
    EnumContainer,
    EnumVariant,
    FixedArrayFormat,
    FloatFormat,
    FormatModelError,
    IntFormat,
    MapFormat,
    NamedFormat,
    NewTypeContainer,
    NewTypeVariant,
    OptionFormat,
    SeqFormat,
    StringFormat,
    StructContainer,
    StructVariant,
    TupleFormat,
    TypeRef,
    UnitVariant,
    enum_from_variants,
    iter_container_type_refs,
    iter_type_refs,
)
from tfschema_bindgen.type_formats.containers import FieldMetadata


def test_formats_are_structurally_comparable() -> None:
    assert OptionFormat(SeqFormat(TypeRef("a"))) == OptionFormat(SeqFormat(TypeRef("a")))
    assert MapFormat(StringFormat(), IntFormat()) != MapFormat(StringFormat(), IntFormat(32))
    assert TupleFormat([StringFormat(), IntFormat()]).elements == (StringFormat(), IntFormat())


@pytest.mark.parametrize("width", [0, 7, 256])
def test_integer_width_outside_supported_set_is_rejected(width: int) -> None:
    with pytest.raises(FormatModelError, match="integer width"):
        IntFormat(width=width)


def test_float_and_fixed_array_constraints() -> None:
    with pytest.raises(FormatModelError):
        FloatFormat(width=16)
    with pytest.raises(FormatModelError, match="positive integer"):
        FixedArrayFormat(StringFormat(), 0)
    assert FixedArrayFormat(StringFormat(), 4).size == 4


def test_type_reference_requires_name() -> None:
    with pytest.raises(FormatModelError):
        TypeRef("")


def test_iter_type_refs_walks_nested_formats() -> None:
    value = TupleFormat(
        (
            OptionFormat(TypeRef("first")),
            MapFormat(StringFormat(), SeqFormat(TypeRef("second"))),
            FixedArrayFormat(TypeRef("third"), 2),
        )
    )

    assert list(iter_type_refs(value)) == ["first", "second", "third"]


def test_struct_rejects_duplicate_field_names() -> None:
    with pytest.raises(FormatModelError, match="Duplicate field name"):
        StructContainer(
            fields=(NamedFormat("id", StringFormat()), NamedFormat("id", IntFormat()))
        )


def test_field_metadata_does_not_affect_equality() -> None:
    left = NamedFormat("name", StringFormat(), FieldMetadata(description="one"))
    right = NamedFormat("name", StringFormat(), FieldMetadata(description="two"))

    assert left == right


def test_enum_discriminants_must_be_dense_from_zero() -> None:
    with pytest.raises(FormatModelError, match="expected 0"):
        EnumContainer(variants=(EnumVariant(1, "late", UnitVariant()),))

    with pytest.raises(FormatModelError, match="Duplicate enum variant"):
        EnumContainer(
            variants=(EnumVariant(0, "same", UnitVariant()), EnumVariant(1, "same", UnitVariant()))
        )


def test_enum_from_variants_assigns_positions() -> None:
    container = enum_from_variants(
        [("alpha", UnitVariant()), ("beta", NewTypeVariant(TypeRef("beta_details")))]
    )

    assert [(v.discriminant, v.name) for v in container.variants] == [(0, "alpha"), (1, "beta")]


def test_iter_container_type_refs_covers_every_container_kind() -> None:
    struct = StructContainer(fields=(NamedFormat("child", OptionFormat(TypeRef("child_t"))),))
    newtype = NewTypeContainer(SeqFormat(TypeRef("item")))
    enum = enum_from_variants(
        [
            ("plain", UnitVariant()),
            ("wrapped", NewTypeVariant(TypeRef("wrapped_t"))),
            ("record", StructVariant((NamedFormat("inner", TypeRef("record_t")),))),
        ]
    )

    assert list(iter_container_type_refs(struct)) == ["child_t"]
    assert list(iter_container_type_refs(newtype)) == ["item"]
    assert list(iter_container_type_refs(enum)) == ["wrapped_t", "record_t"]
