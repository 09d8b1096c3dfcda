"""Error taxonomy for the namespace store.

Validation problems are raised as exceptions inside the store and turned
into failure results at the public boundary. The string codes below are
what callers see on `StoreResult.error`.
"""


INVALID_NAMESPACE = "invalid_namespace"
INVALID_KEY = "invalid_key"
NOT_FOUND = "not_found"
BACKEND_ERROR = "backend_error"


class InvalidNamespaceError(ValueError):
    """Namespace identifier failed the allow-list check."""

    code = INVALID_NAMESPACE


class InvalidKeyError(ValueError):
    """Key is not a non-empty string."""

    code = INVALID_KEY
