"""SQLite-backed storage backend.

Each namespace maps to one table `"<namespace>" (key TEXT PRIMARY KEY, value)`.
The `value` column is declared without a type so SQLite applies no affinity
and values keep the type they were written with.

A single connection is opened for the lifetime of the backend. The default
database is `:memory:`, so data does not survive a restart.
"""
from __future__ import annotations
import logging
import sqlite3
from threading import RLock
from typing import Any, Iterable, List, Optional

from .base import StorageBackend
from .serializer import RawSerializer, Serializer

logger = logging.getLogger(__name__)


def _quote(namespace: str) -> str:
    # Namespaces are validated against [A-Za-z0-9_]+ before they get here;
    # quoting only protects against reserved words and leading digits.
    return '"' + namespace + '"'


class SQLiteStorageBackend(StorageBackend):
    name = "sqlite"

    def __init__(self, database: str = ":memory:", serializer: Optional[Serializer] = None) -> None:
        self.database = database
        self.serializer = serializer or RawSerializer()
        self._lock = RLock()
        # Requests may be served from worker threads; access is serialized
        # through the lock instead.
        self._conn: Optional[sqlite3.Connection] = sqlite3.connect(
            database, check_same_thread=False, isolation_level=None
        )
        logger.debug("Opened SQLite database %s", database)

    @property
    def conn(self) -> sqlite3.Connection:
        if self._conn is None:
            raise sqlite3.ProgrammingError("Cannot operate on a closed database.")
        return self._conn

    def unit_exists(self, namespace: str) -> bool:
        with self._lock:
            row = self.conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND name = ? COLLATE NOCASE",
                (namespace,),
            ).fetchone()
        return row is not None

    def ensure_unit(self, namespace: str) -> None:
        with self._lock:
            self.conn.execute(
                f"CREATE TABLE IF NOT EXISTS {_quote(namespace)} (key TEXT NOT NULL PRIMARY KEY, value)"
            )

    def upsert(self, namespace: str, key: str, value: Any) -> int:
        if isinstance(self.serializer, RawSerializer) and isinstance(value, bool):
            # SQLite has no boolean storage class and would hand back 0/1
            raise TypeError("bool values need the json serializer")
        stored = self.serializer.dump(value)
        with self._lock:
            cur = self.conn.execute(
                f"INSERT OR REPLACE INTO {_quote(namespace)} (key, value) VALUES (?, ?)",
                (key, stored),
            )
            return cur.rowcount

    def lookup(self, namespace: str, key: str) -> Any:
        with self._lock:
            if not self.unit_exists(namespace):
                raise KeyError(namespace)
            row = self.conn.execute(
                f"SELECT value FROM {_quote(namespace)} WHERE key = ?", (key,)
            ).fetchone()
        if row is None:
            raise KeyError(key)
        return self.serializer.load(row[0])

    def remove(self, namespace: str, key: str) -> int:
        with self._lock:
            cur = self.conn.execute(f"DELETE FROM {_quote(namespace)} WHERE key = ?", (key,))
            return cur.rowcount

    def drop_unit(self, namespace: str) -> None:
        with self._lock:
            if not self.unit_exists(namespace):
                raise KeyError(namespace)
            self.conn.execute(f"DROP TABLE {_quote(namespace)}")

    def list_units(self) -> Iterable[str]:
        with self._lock:
            rows = self.conn.execute(
                "SELECT name FROM sqlite_master WHERE type='table' AND substr(name, 1, 7) != 'sqlite_' ORDER BY name"
            ).fetchall()
        return [r[0] for r in rows]

    def list_keys(self, namespace: str) -> Iterable[str]:
        with self._lock:
            if not self.unit_exists(namespace):
                raise KeyError(namespace)
            rows = self.conn.execute(f"SELECT key FROM {_quote(namespace)} ORDER BY key").fetchall()
        keys: List[str] = [r[0] for r in rows]
        return keys

    def close(self) -> None:
        with self._lock:
            if self._conn is not None:
                self._conn.close()
                self._conn = None
                logger.debug("Closed SQLite database %s", self.database)
