import time

from fastapi.testclient import TestClient

from kvstore_lib.main import Config, create_app
from kvstore_lib.server.health import get_health


def test_get_health_contains_fields():
    h = get_health()
    assert isinstance(h, dict)
    assert h.get("status") == "ok"
    assert "start_time" in h
    assert "uptime_seconds" in h
    assert isinstance(h["uptime_seconds"], int)
    assert isinstance(h["version"], str)


def test_uptime_increases():
    h1 = get_health()
    time.sleep(1)
    h2 = get_health()
    assert h2["uptime_seconds"] >= h1["uptime_seconds"] + 1


def test_health_endpoint_reports_backend():
    client = TestClient(create_app(Config(storage_backend='memory')))
    r = client.get('/health')
    assert r.status_code == 200
    body = r.json()
    assert body["status"] == "ok"
    assert body["storage_backend"] == "memory"
