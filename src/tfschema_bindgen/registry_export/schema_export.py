"""Full schema pass: every provider, resource and data source into one registry."""

from __future__ import annotations

import logging

from tfschema_bindgen.block_flattening import flatten_block, inject_meta_attributes
from tfschema_bindgen.configuration.runtime_settings import FlatteningSettings
from tfschema_bindgen.root_indexing import RootCategories, RootCategory, build_root_index
from tfschema_bindgen.schema_ingestion import ProviderSchema, SchemaExport
from tfschema_bindgen.type_registry import Registry

_LOGGER = logging.getLogger(__name__)

RESOURCE_NAMESPACE = "resource"
DATA_SOURCE_NAMESPACE = "data_source"


def export_schema_to_registry(
    schema: SchemaExport, settings: FlatteningSettings | None = None
) -> Registry:
    """Flatten the whole schema into a single registry, then add the root index."""
    resolved_settings = settings or FlatteningSettings()
    registry = Registry(on_duplicate=resolved_settings.on_duplicate)
    categories = RootCategories()
    for provider_name in sorted(schema.provider_schemas):
        export_provider(
            provider_name,
            schema.provider_schemas[provider_name],
            registry,
            categories,
            resolved_settings,
        )
    build_root_index(categories, registry)
    _LOGGER.debug("Registry complete with %d entries", len(registry))
    return registry


def export_providers_independently(
    schema: SchemaExport, settings: FlatteningSettings | None = None
) -> Registry:
    """Flatten each provider into its own registry and merge the results.

    Merging rejects qualified names defined differently by two providers.
    """
    resolved_settings = settings or FlatteningSettings()
    merged = Registry(on_duplicate=resolved_settings.on_duplicate)
    categories = RootCategories()
    for provider_name in sorted(schema.provider_schemas):
        provider_registry = Registry(on_duplicate=resolved_settings.on_duplicate)
        export_provider(
            provider_name,
            schema.provider_schemas[provider_name],
            provider_registry,
            categories,
            resolved_settings,
        )
        merged.merge(provider_registry)
    build_root_index(categories, merged)
    return merged


def export_provider(
    provider_name: str,
    provider: ProviderSchema,
    registry: Registry,
    categories: RootCategories,
    settings: FlatteningSettings,
) -> None:
    """Flatten one provider's blocks and record its members per root category."""
    _LOGGER.debug("Exporting provider %s", provider_name)
    flatten_block(None, provider_name, provider.provider.block, registry, settings)
    categories.add(RootCategory.PROVIDER, provider_name)

    for resource_name in sorted(provider.resource_schemas):
        block = provider.resource_schemas[resource_name].block
        if settings.inject_meta_attributes:
            block = inject_meta_attributes(block)
        flatten_block(RESOURCE_NAMESPACE, resource_name, block, registry, settings)
        categories.add(RootCategory.RESOURCE, resource_name)

    for data_source_name in sorted(provider.data_source_schemas):
        block = provider.data_source_schemas[data_source_name].block
        flatten_block(DATA_SOURCE_NAMESPACE, data_source_name, block, registry, settings)
        categories.add(RootCategory.DATA, data_source_name)
