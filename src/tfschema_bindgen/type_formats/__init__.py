"""Type-format model exports."""

from .containers import (
    ContainerFormat,
    EnumContainer,
    EnumVariant,
    FieldMetadata,
    NamedFormat,
    NewTypeContainer,
    NewTypeVariant,
    StructContainer,
    StructVariant,
    TupleVariant,
    UnitStructContainer,
    UnitVariant,
    VariantShape,
    enum_from_variants,
    iter_container_type_refs,
)
from .formats import (
    BoolFormat,
    BytesFormat,
    CharFormat,
    FixedArrayFormat,
    FloatFormat,
    Format,
    FormatModelError,
    IntFormat,
    MapFormat,
    OptionFormat,
    SeqFormat,
    StringFormat,
    TupleFormat,
    TypeRef,
    UnitFormat,
    iter_type_refs,
)

__all__ = [
    "BoolFormat",
    "BytesFormat",
    "CharFormat",
    "FixedArrayFormat",
    "FloatFormat",
    "Format",
    "FormatModelError",
    "IntFormat",
    "MapFormat",
    "OptionFormat",
    "SeqFormat",
    "StringFormat",
    "TupleFormat",
    "TypeRef",
    "UnitFormat",
    "iter_type_refs",
    "ContainerFormat",
    "EnumContainer",
    "EnumVariant",
    "FieldMetadata",
    "NamedFormat",
    "NewTypeContainer",
    "NewTypeVariant",
    "StructContainer",
    "StructVariant",
    "TupleVariant",
    "UnitStructContainer",
    "UnitVariant",
    "VariantShape",
    "enum_from_variants",
    "iter_container_type_refs",
]
