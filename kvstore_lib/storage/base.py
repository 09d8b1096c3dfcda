"""Storage backend interface definitions.

Defines the StorageBackend abstract class the namespace store uses as its
persistence substrate. A backend keeps one storage unit (a table, or the
equivalent) per namespace. Backends do not validate namespace identifiers;
callers must do that before handing one over.
"""
from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Any, Iterable


class StorageBackend(ABC):
    """Abstract storage backend.

    Implementations must be safe to call from multiple threads when shared
    by a single process.
    """

    name = "abstract"

    @abstractmethod
    def unit_exists(self, namespace: str) -> bool:
        """Return True if the storage unit for `namespace` exists."""

    @abstractmethod
    def ensure_unit(self, namespace: str) -> None:
        """Create the storage unit for `namespace` if it is absent."""

    @abstractmethod
    def upsert(self, namespace: str, key: str, value: Any) -> int:
        """Insert or replace `key` in `namespace` and return the affected row count.

        The unit must already exist.
        """

    @abstractmethod
    def lookup(self, namespace: str, key: str) -> Any:
        """Return the value stored under `namespace`/`key`.

        Should raise `KeyError` if the unit or the key does not exist.
        """

    @abstractmethod
    def remove(self, namespace: str, key: str) -> int:
        """Delete `key` from `namespace` and return the number of rows removed."""

    @abstractmethod
    def drop_unit(self, namespace: str) -> None:
        """Drop the unit and every entry in it. Raise `KeyError` if absent."""

    @abstractmethod
    def list_units(self) -> Iterable[str]:
        """Return an iterable of existing namespaces."""

    @abstractmethod
    def list_keys(self, namespace: str) -> Iterable[str]:
        """Return an iterable of keys stored in `namespace`."""

    def close(self) -> None:
        """Release any handle held by the backend. Default is a no-op."""
        return
