"""Root index exports."""

from .root_index_builder import (
    CONFIG_NAME,
    RootCategories,
    RootCategory,
    RootIndexError,
    build_config_struct,
    build_root_enums,
    build_root_index,
    root_name,
)

__all__ = [
    "CONFIG_NAME",
    "RootCategories",
    "RootCategory",
    "RootIndexError",
    "build_config_struct",
    "build_root_enums",
    "build_root_index",
    "root_name",
]
