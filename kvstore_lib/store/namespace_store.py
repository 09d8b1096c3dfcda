"""Namespaced key-value store on top of a StorageBackend.

Every public method is fail-soft: it returns a `StoreResult` and never
raises. Validation failures never reach the backend, missing namespaces or
keys are reported without logging, and anything the backend raises is
logged under the `[KVStore]` tag and reported as `backend_error`.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass
from typing import Any, Callable, Optional

from kvstore_lib.storage.base import StorageBackend

from .errors import BACKEND_ERROR, NOT_FOUND, InvalidKeyError, InvalidNamespaceError
from .validation import validate_key, validate_namespace

logger = logging.getLogger(__name__)

LOG_TAG = "[KVStore]"
DEFAULT_NAMESPACE = "default"


@dataclass(frozen=True)
class EntryRef:
    """Address of one entry. A bare key lives in `DEFAULT_NAMESPACE`."""

    key: str
    namespace: str = DEFAULT_NAMESPACE


@dataclass(frozen=True)
class StoreResult:
    ok: bool
    value: Any = None
    error: Optional[str] = None

    def __bool__(self) -> bool:
        return self.ok


class _NotFound(Exception):
    pass


def _as_ref(ref: EntryRef | str) -> EntryRef:
    return ref if isinstance(ref, EntryRef) else EntryRef(key=ref)


class NamespaceStore:
    def __init__(self, backend: StorageBackend) -> None:
        self._backend = backend

    @property
    def backend(self) -> StorageBackend:
        return self._backend

    def _run(self, op: str, namespace: Any, fn: Callable[[], StoreResult]) -> StoreResult:
        try:
            return fn()
        except (InvalidNamespaceError, InvalidKeyError) as e:
            logger.debug("%s %s rejected: %s", LOG_TAG, op, e)
            return StoreResult(ok=False, error=e.code)
        except (_NotFound, KeyError):
            return StoreResult(ok=False, error=NOT_FOUND)
        except Exception as e:
            logger.exception("%s ERROR: %s on namespace %r failed: %s", LOG_TAG, op, namespace, e)
            return StoreResult(ok=False, error=BACKEND_ERROR)

    def set(self, ref: EntryRef | str, value: Any) -> StoreResult:
        """Insert or replace `value`, creating the namespace's unit on first write."""
        ref = _as_ref(ref)

        def _set() -> StoreResult:
            ns = validate_namespace(ref.namespace)
            key = validate_key(ref.key)
            self._backend.ensure_unit(ns)
            changed = self._backend.upsert(ns, key, value)
            return StoreResult(ok=changed >= 1)

        return self._run("set", ref.namespace, _set)

    def get(self, ref: EntryRef | str) -> StoreResult:
        """Look up one value. Never creates a storage unit."""
        ref = _as_ref(ref)

        def _get() -> StoreResult:
            ns = validate_namespace(ref.namespace)
            key = validate_key(ref.key)
            if not self._backend.unit_exists(ns):
                raise _NotFound(ns)
            return StoreResult(ok=True, value=self._backend.lookup(ns, key))

        return self._run("get", ref.namespace, _get)

    def delete(self, ref: EntryRef | str) -> StoreResult:
        """Remove one entry. Succeeds only if exactly one entry was removed."""
        ref = _as_ref(ref)

        def _delete() -> StoreResult:
            ns = validate_namespace(ref.namespace)
            key = validate_key(ref.key)
            if not self._backend.unit_exists(ns):
                raise _NotFound(ns)
            removed = self._backend.remove(ns, key)
            if removed == 0:
                raise _NotFound(key)
            return StoreResult(ok=removed == 1)

        return self._run("delete", ref.namespace, _delete)

    def destroy(self, namespace: str) -> StoreResult:
        """Drop a namespace and every entry in it. Irreversible."""

        def _destroy() -> StoreResult:
            ns = validate_namespace(namespace)
            if not self._backend.unit_exists(ns):
                raise _NotFound(ns)
            self._backend.drop_unit(ns)
            logger.info("%s destroyed namespace %s", LOG_TAG, ns)
            return StoreResult(ok=True)

        return self._run("destroy", namespace, _destroy)

    def namespaces(self) -> StoreResult:
        return self._run("namespaces", None, lambda: StoreResult(ok=True, value=list(self._backend.list_units())))

    def keys(self, namespace: str) -> StoreResult:
        def _keys() -> StoreResult:
            ns = validate_namespace(namespace)
            if not self._backend.unit_exists(ns):
                raise _NotFound(ns)
            return StoreResult(ok=True, value=list(self._backend.list_keys(ns)))

        return self._run("keys", namespace, _keys)

    def close(self) -> None:
        try:
            self._backend.close()
        except Exception as e:
            logger.exception("%s ERROR: closing backend failed: %s", LOG_TAG, e)
