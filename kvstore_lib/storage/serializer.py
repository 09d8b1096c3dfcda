from typing import Any, Protocol
import json


class Serializer(Protocol):
    """Translate caller values to what a backend stores, and back.

    Implementations must be symmetric: `load(dump(v)) == v`.
    """

    def dump(self, value: Any) -> Any: ...

    def load(self, data: Any) -> Any: ...


class RawSerializer:
    """Identity serializer. Values are stored and returned verbatim.

    This is the default: the store treats values as opaque payloads. Only
    values the backend can bind natively (str, int, float, bytes) survive a
    SQLite round trip; anything else is rejected by the engine.
    """

    def dump(self, value: Any) -> Any:
        return value

    def load(self, data: Any) -> Any:
        return data


class JSONSerializer:
    """Serializer using JSON text. Caller must ensure values are JSON-serializable."""

    def dump(self, value: Any) -> str:
        return json.dumps(value)

    def load(self, data: Any) -> Any:
        if isinstance(data, bytes):
            data = data.decode("utf-8")
        return json.loads(data)


SERIALIZERS = {
    "raw": RawSerializer,
    "json": JSONSerializer,
}


def get_serializer(name: str) -> Serializer:
    try:
        return SERIALIZERS[name]()
    except KeyError:
        raise ValueError(f"Unknown value serializer '{name}'") from None
