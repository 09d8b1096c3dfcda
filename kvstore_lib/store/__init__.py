from .errors import InvalidKeyError, InvalidNamespaceError
from .namespace_store import DEFAULT_NAMESPACE, EntryRef, NamespaceStore, StoreResult
from .validation import is_valid_namespace, validate_key, validate_namespace

__all__ = [
    "DEFAULT_NAMESPACE",
    "EntryRef",
    "NamespaceStore",
    "StoreResult",
    "InvalidKeyError",
    "InvalidNamespaceError",
    "is_valid_namespace",
    "validate_key",
    "validate_namespace",
]
