"""Registry of container definitions keyed by qualified name."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from enum import Enum
from typing import NamedTuple

from tfschema_bindgen.type_formats import ContainerFormat, iter_container_type_refs

_LOGGER = logging.getLogger(__name__)


class RegistryError(Exception):
    """Base class for registry consistency failures."""


class DuplicateQualifiedNameError(RegistryError):
    """Raised when an entry conflicts with one already registered."""

    def __init__(self, key: QualifiedName, message: str) -> None:
        super().__init__(message)
        self.key = key


class UnresolvedReferenceError(RegistryError):
    """Raised when type references point at names nobody defines."""

    def __init__(self, missing: tuple[tuple[str, str], ...]) -> None:
        details = ", ".join(f"{owner} -> {name}" for owner, name in missing)
        super().__init__(f"Unresolved type references: {details}")
        self.missing = missing


class DuplicatePolicy(str, Enum):
    """What to do when a key is registered twice with different definitions."""

    ERROR = "error"
    OVERWRITE = "overwrite"


class QualifiedName(NamedTuple):
    """Registry key: optional namespace plus local name."""

    namespace: str | None
    name: str

    @property
    def full_name(self) -> str:
        """Name under which the container is emitted and referenced."""
        if self.namespace:
            return f"{self.namespace}_{self.name}"
        return self.name


def _sort_key(key: QualifiedName) -> tuple[bool, str, str]:
    return (key.namespace is not None, key.namespace or "", key.name)


class Registry:
    """Mutable mapping from qualified name to container definition.

    Entries are never removed. Iteration is deterministic: keys without a
    namespace first, then by namespace and local name.
    """

    def __init__(self, *, on_duplicate: DuplicatePolicy = DuplicatePolicy.ERROR) -> None:
        self._entries: dict[QualifiedName, ContainerFormat] = {}
        self._keys_by_full_name: dict[str, QualifiedName] = {}
        self._on_duplicate = on_duplicate

    @property
    def on_duplicate(self) -> DuplicatePolicy:
        return self._on_duplicate

    def insert(self, key: QualifiedName, container: ContainerFormat) -> None:
        """Register ``container``; identical re-registration is a no-op."""
        key = QualifiedName(*key)
        self._check_full_name(key)
        existing = self._entries.get(key)
        if existing is None:
            self._store(key, container)
            return
        if existing == container:
            return
        if self._on_duplicate is DuplicatePolicy.OVERWRITE:
            _LOGGER.debug("Overwriting registry entry %s", key.full_name)
            self._store(key, container)
            return
        raise DuplicateQualifiedNameError(
            key, f"Conflicting definitions registered for {key.full_name}"
        )

    def replace(self, key: QualifiedName, container: ContainerFormat) -> None:
        """Register ``container``, overwriting any previous definition for ``key``."""
        key = QualifiedName(*key)
        self._check_full_name(key)
        self._store(key, container)

    def merge(self, other: Registry) -> None:
        """Insert every entry of ``other``.

        Conflicting entries are rejected whatever the duplicate policy is.
        """
        for key, container in other.items():
            existing = self._entries.get(key)
            if existing is not None and existing != container:
                raise DuplicateQualifiedNameError(
                    key, f"Cannot merge conflicting definitions for {key.full_name}"
                )
            self.insert(key, container)

    def get(self, key: QualifiedName) -> ContainerFormat | None:
        return self._entries.get(QualifiedName(*key))

    def resolve(self, full_name: str) -> ContainerFormat | None:
        """Look up a container by the name type references use."""
        key = self._keys_by_full_name.get(full_name)
        return None if key is None else self._entries[key]

    def keys(self) -> list[QualifiedName]:
        return sorted(self._entries, key=_sort_key)

    def items(self) -> list[tuple[QualifiedName, ContainerFormat]]:
        return [(key, self._entries[key]) for key in self.keys()]

    def full_names(self) -> frozenset[str]:
        return frozenset(self._keys_by_full_name)

    def validate_references(self, external_names: Iterable[str] = ()) -> None:
        """Check that every type reference resolves to an entry or an external name."""
        known = self.full_names() | frozenset(external_names)
        missing: list[tuple[str, str]] = []
        for key, container in self.items():
            for name in iter_container_type_refs(container):
                if name not in known and (key.full_name, name) not in missing:
                    missing.append((key.full_name, name))
        if missing:
            raise UnresolvedReferenceError(tuple(missing))

    def __contains__(self, key: object) -> bool:
        return isinstance(key, tuple) and len(key) == 2 and QualifiedName(*key) in self._entries

    def __iter__(self) -> Iterator[QualifiedName]:
        return iter(self.keys())

    def __len__(self) -> int:
        return len(self._entries)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Registry):
            return NotImplemented
        return self.items() == other.items()

    def __repr__(self) -> str:
        return f"Registry({[key.full_name for key in self.keys()]!r})"

    def _check_full_name(self, key: QualifiedName) -> None:
        owner = self._keys_by_full_name.get(key.full_name)
        if owner is not None and owner != key:
            raise DuplicateQualifiedNameError(
                key,
                f"Qualified names {owner} and {key} both emit as {key.full_name}",
            )

    def _store(self, key: QualifiedName, container: ContainerFormat) -> None:
        self._entries[key] = container
        self._keys_by_full_name[key.full_name] = key
