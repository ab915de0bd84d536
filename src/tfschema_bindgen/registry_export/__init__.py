"""Registry export domain exports."""

from .generation_contracts import GenerationOutcome, GenerationRequest
from .generation_use_case import BindgenError, generate_bindings
from .schema_export import (
    DATA_SOURCE_NAMESPACE,
    RESOURCE_NAMESPACE,
    export_provider,
    export_providers_independently,
    export_schema_to_registry,
)

__all__ = [
    "BindgenError",
    "DATA_SOURCE_NAMESPACE",
    "GenerationOutcome",
    "GenerationRequest",
    "RESOURCE_NAMESPACE",
    "export_provider",
    "export_providers_independently",
    "export_schema_to_registry",
    "generate_bindings",
]
