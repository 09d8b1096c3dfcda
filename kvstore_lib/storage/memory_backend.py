"""Simple memory-backed storage backend

This backend stores Python objects in memory as a data structure `[<namespace>][<key>]`.
Each inner dict plays the role of a storage unit. Values are deep-copied on the
way in and out so callers cannot mutate what is stored.
"""
import copy
from threading import RLock
from typing import Dict, Any, Iterable

from .base import StorageBackend


class MemoryStorageBackend(StorageBackend):
    name = "memory"

    def __init__(self):
        self._lock = RLock()
        self._store: Dict[str, Dict[str, Any]] = {}

    def unit_exists(self, namespace: str) -> bool:
        with self._lock:
            return namespace in self._store

    def ensure_unit(self, namespace: str) -> None:
        with self._lock:
            self._store.setdefault(namespace, {})

    def upsert(self, namespace: str, key: str, value: Any) -> int:
        with self._lock:
            self._store[namespace][key] = copy.deepcopy(value)
            return 1

    def lookup(self, namespace: str, key: str) -> Any:
        with self._lock:
            return copy.deepcopy(self._store[namespace][key])

    def remove(self, namespace: str, key: str) -> int:
        with self._lock:
            ns = self._store.get(namespace, {})
            if key not in ns:
                return 0
            del ns[key]
            return 1

    def drop_unit(self, namespace: str) -> None:
        with self._lock:
            del self._store[namespace]

    def list_units(self) -> Iterable[str]:
        with self._lock:
            return sorted(self._store.keys())

    def list_keys(self, namespace: str) -> Iterable[str]:
        with self._lock:
            return sorted(self._store[namespace].keys())
