import re
from typing import Any

from .errors import InvalidKeyError, InvalidNamespaceError

# Namespaces are interpolated into table names, so only this exact
# alphabet may ever reach the backend.
NAMESPACE_PATTERN = re.compile(r'[A-Za-z0-9_]+')


def is_valid_namespace(namespace: Any) -> bool:
    return isinstance(namespace, str) and NAMESPACE_PATTERN.fullmatch(namespace) is not None


def validate_namespace(namespace: Any) -> str:
    """Return `namespace` unchanged or raise `InvalidNamespaceError`."""
    if not is_valid_namespace(namespace):
        raise InvalidNamespaceError(f"invalid namespace: {namespace!r}")
    return namespace


def validate_key(key: Any) -> str:
    if not isinstance(key, str) or not key:
        raise InvalidKeyError(f"invalid key: {key!r}")
    return key
