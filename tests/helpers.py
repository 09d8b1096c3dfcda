from typing import Any
from starlette.testclient import TestClient
from kvstore_lib.services.container import ServiceContainer


def register_service_on_client(client: TestClient, name: str, instance: Any) -> None:
    """Register a service instance into the app's DI container for tests.

    Usage in tests:
        from tests.helpers import register_service_on_client
        register_service_on_client(client, 'namespace_store', fake_store)
    """
    container = getattr(client.app.state, 'container', None)
    if container is None:
        container = ServiceContainer()
        client.app.state.container = container

    container.register_singleton(name, instance)


class RecordingBackend:
    """Backend double that records every call and can be told to fail."""

    name = "recording"

    def __init__(self, fail_on: str | None = None, units: dict | None = None):
        self.calls: list[tuple] = []
        self.fail_on = fail_on
        self.units: dict[str, dict] = units if units is not None else {}

    def _record(self, op: str, *args):
        self.calls.append((op,) + args)
        if self.fail_on == op:
            raise RuntimeError(f"simulated {op} failure")

    def unit_exists(self, namespace):
        self._record('unit_exists', namespace)
        return namespace in self.units

    def ensure_unit(self, namespace):
        self._record('ensure_unit', namespace)
        self.units.setdefault(namespace, {})

    def upsert(self, namespace, key, value):
        self._record('upsert', namespace, key, value)
        self.units[namespace][key] = value
        return 1

    def lookup(self, namespace, key):
        self._record('lookup', namespace, key)
        return self.units[namespace][key]

    def remove(self, namespace, key):
        self._record('remove', namespace, key)
        return 1 if self.units[namespace].pop(key, None) is not None else 0

    def drop_unit(self, namespace):
        self._record('drop_unit', namespace)
        del self.units[namespace]

    def list_units(self):
        self._record('list_units')
        return sorted(self.units)

    def list_keys(self, namespace):
        self._record('list_keys', namespace)
        return sorted(self.units[namespace])

    def close(self):
        self._record('close')
