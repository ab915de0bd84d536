"""Translation of schema attributes into type formats."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from tfschema_bindgen.schema_ingestion import Attribute, AttributeType, PrimitiveType
from tfschema_bindgen.type_formats import (
    BoolFormat,
    FieldMetadata,
    Format,
    IntFormat,
    MapFormat,
    NamedFormat,
    OptionFormat,
    SeqFormat,
    StringFormat,
)

_LOGGER = logging.getLogger(__name__)

_SCALAR_FORMATS: Mapping[str, Format] = {
    "string": StringFormat(),
    "bool": BoolFormat(),
    "number": IntFormat(width=64, signed=True),
}
_SEQUENCE_TAGS = frozenset({"set", "list"})
_MAP_TAG = "map"
_NAME_PLACEHOLDER = "{name}"


class UnsupportedTypeError(Exception):
    """Raised when an attribute type is outside the supported primitive/collection set."""

    def __init__(self, tag: str, attribute_name: str | None = None) -> None:
        message = f"Unsupported attribute type '{tag}'"
        if attribute_name is not None:
            message = f"{message} for attribute '{attribute_name}'"
        super().__init__(message)
        self.tag = tag
        self.attribute_name = attribute_name


def resolve_attribute_format(attribute_type: AttributeType) -> Format:
    """Map a declared attribute type onto a format, ignoring optionality."""
    tag = attribute_type.tag
    if isinstance(attribute_type, PrimitiveType):
        if tag in _SCALAR_FORMATS:
            return _SCALAR_FORMATS[tag]
        if tag in _SEQUENCE_TAGS:
            return SeqFormat(StringFormat())
        if tag == _MAP_TAG:
            return MapFormat(key=StringFormat(), value=StringFormat())
        raise UnsupportedTypeError(tag)

    if tag in _SEQUENCE_TAGS:
        return SeqFormat(_element_format(attribute_type.rest))
    if tag == _MAP_TAG:
        return MapFormat(key=StringFormat(), value=_element_format(attribute_type.rest))
    raise UnsupportedTypeError(tag)


def escape_field_name(
    name: str,
    reserved_words: Iterable[str],
    escape_template: str,
    *,
    path_keywords: Iterable[str] = (),
    path_keyword_escape: str = "{name}_",
) -> str:
    """Return ``name`` escaped when it collides with a keyword.

    Path keywords take ``path_keyword_escape``; other reserved words take
    ``escape_template``.
    """
    if name in frozenset(path_keywords):
        return path_keyword_escape.replace(_NAME_PLACEHOLDER, name)
    if name in frozenset(reserved_words):
        return escape_template.replace(_NAME_PLACEHOLDER, name)
    return name


def translate_attribute(
    name: str,
    attribute: Attribute,
    *,
    reserved_words: Iterable[str] = (),
    escape_template: str = "r#{name}",
    path_keywords: Iterable[str] = (),
    path_keyword_escape: str = "{name}_",
) -> NamedFormat:
    """Translate one attribute into its emitted field name and format."""
    try:
        resolved = resolve_attribute_format(attribute.type)
    except UnsupportedTypeError as exc:
        raise UnsupportedTypeError(exc.tag, name) from exc

    if attribute.optional or attribute.computed:
        resolved = OptionFormat(resolved)

    return NamedFormat(
        name=escape_field_name(
            name,
            reserved_words,
            escape_template,
            path_keywords=path_keywords,
            path_keyword_escape=path_keyword_escape,
        ),
        value=resolved,
        metadata=FieldMetadata(
            source_name=name,
            description=attribute.description,
            description_kind=(
                attribute.description_kind.value if attribute.description_kind else None
            ),
            required=attribute.required,
            sensitive=attribute.sensitive,
            deprecated=attribute.deprecated,
        ),
    )


def translate_attributes(
    attributes: Mapping[str, Attribute],
    *,
    reserved_words: Iterable[str] = (),
    escape_template: str = "r#{name}",
    path_keywords: Iterable[str] = (),
    path_keyword_escape: str = "{name}_",
) -> list[NamedFormat]:
    """Translate every attribute in name order; the first failure aborts."""
    reserved = frozenset(reserved_words)
    path_reserved = frozenset(path_keywords)
    return [
        translate_attribute(
            name,
            attributes[name],
            reserved_words=reserved,
            escape_template=escape_template,
            path_keywords=path_reserved,
            path_keyword_escape=path_keyword_escape,
        )
        for name in sorted(attributes)
    ]


def _element_format(rest: tuple[object, ...]) -> Format:
    inner = rest[0] if rest else None
    if isinstance(inner, str) and inner in _SCALAR_FORMATS:
        return _SCALAR_FORMATS[inner]
    if inner is not None:
        # Nested object and collection element types are not modeled.
        _LOGGER.info("Approximating element type %r as string", inner)
    return StringFormat()
