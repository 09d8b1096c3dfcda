"""Storage abstraction package for kvstore."""
from typing import Optional

from .base import StorageBackend
from .memory_backend import MemoryStorageBackend
from .serializer import get_serializer
from .sqlite_backend import SQLiteStorageBackend


def create_storage(
    backend: str = "sqlite",
    serializer: str = "raw",
    database: Optional[str] = None,
) -> StorageBackend:
    """Build a storage backend by name.

    `serializer` only applies to the SQLite backend; the memory backend keeps
    Python objects as they are.
    """
    if backend == "sqlite":
        return SQLiteStorageBackend(database=database or ":memory:", serializer=get_serializer(serializer))
    if backend == "memory":
        return MemoryStorageBackend()
    raise ValueError(f"Unknown storage backend '{backend}'")


__all__ = [
    "StorageBackend",
    "SQLiteStorageBackend",
    "MemoryStorageBackend",
    "create_storage",
]
