"""Synthesis of the root union types and the umbrella config struct."""

from __future__ import annotations

from enum import Enum

from tfschema_bindgen.block_flattening import details_name
from tfschema_bindgen.type_formats import (
    MapFormat,
    NamedFormat,
    NewTypeVariant,
    OptionFormat,
    SeqFormat,
    StringFormat,
    StructContainer,
    TypeRef,
    enum_from_variants,
)
from tfschema_bindgen.type_registry import QualifiedName, Registry

CONFIG_NAME = QualifiedName(None, "config")


class RootIndexError(Exception):
    """Raised for invalid root category bookkeeping."""


class RootCategory(str, Enum):
    """Top-level groupings of a Terraform configuration document."""

    PROVIDER = "provider"
    RESOURCE = "resource"
    DATA = "data"


class RootCategories:
    """Member names discovered per root category, in discovery order."""

    def __init__(self) -> None:
        self._members: dict[RootCategory, list[str]] = {category: [] for category in RootCategory}

    def add(self, category: RootCategory | str, member: str) -> None:
        """Record ``member``; repeated members are ignored."""
        members = self._members[_coerce_category(category)]
        if member not in members:
            members.append(member)

    def members(self, category: RootCategory | str) -> tuple[str, ...]:
        return tuple(self._members[_coerce_category(category)])

    def items(self) -> list[tuple[RootCategory, tuple[str, ...]]]:
        return [(category, tuple(members)) for category, members in self._members.items()]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, RootCategories):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self) -> str:
        return f"RootCategories({dict((c.value, m) for c, m in self.items())!r})"


def root_name(category: RootCategory | str) -> QualifiedName:
    """Registry key of a category's root union."""
    return QualifiedName(None, f"{_coerce_category(category).value}_root")


def build_root_enums(categories: RootCategories, registry: Registry) -> None:
    """Register one tagged union per category, one variant per member."""
    for category, members in categories.items():
        registry.replace(
            root_name(category),
            enum_from_variants(
                (member, NewTypeVariant(_member_format(category, member))) for member in members
            ),
        )


def build_config_struct(categories: RootCategories, registry: Registry) -> None:
    """Register the struct aggregating every category as an optional sequence."""
    registry.replace(
        CONFIG_NAME,
        StructContainer(
            fields=tuple(
                NamedFormat(
                    name=category.value,
                    value=OptionFormat(SeqFormat(TypeRef(root_name(category).full_name))),
                )
                for category, _ in categories.items()
            )
        ),
    )


def build_root_index(categories: RootCategories, registry: Registry) -> None:
    """Register root unions and the config struct; re-running overwrites both."""
    build_root_enums(categories, registry)
    build_config_struct(categories, registry)


def _member_format(category: RootCategory, member: str) -> SeqFormat:
    instances = SeqFormat(TypeRef(details_name(member).full_name))
    if category is RootCategory.PROVIDER:
        return instances
    # Non-provider entities are keyed by an instance label.
    return SeqFormat(MapFormat(key=StringFormat(), value=instances))


def _coerce_category(category: RootCategory | str) -> RootCategory:
    try:
        return RootCategory(category)
    except ValueError as exc:
        raise RootIndexError(f"Unknown root category: {category}") from exc
