"""Type registry exports."""

from .registry import (
    DuplicatePolicy,
    DuplicateQualifiedNameError,
    QualifiedName,
    Registry,
    RegistryError,
    UnresolvedReferenceError,
)

__all__ = [
    "DuplicatePolicy",
    "DuplicateQualifiedNameError",
    "QualifiedName",
    "Registry",
    "RegistryError",
    "UnresolvedReferenceError",
]
