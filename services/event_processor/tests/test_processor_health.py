from fastapi.testclient import TestClient
from services.event_processor.main import app
from services.event_processor.src.config import settings

client = TestClient(app)

def test_health_ok(monkeypatch):
    async def fake_ping(cfg):
        fake_ping.called_with = cfg

    monkeypatch.setattr("services.event_processor.src.health.ping_database", fake_ping)

    resp = client.get("/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "ok"
    assert body["info"] == {"database": {"status": "up"}}
    assert body["version"] == "1.0.0"
    assert fake_ping.called_with is settings

def test_health_reports_database_down(monkeypatch):
    async def failing_ping(cfg):
        raise ConnectionRefusedError("connection refused")

    monkeypatch.setattr("services.event_processor.src.health.ping_database", failing_ping)

    resp = client.get("/health")

    assert resp.status_code == 200
    body = resp.json()
    assert body["status"] == "error"
    assert body["info"] == {"database": {"status": "down"}}
    assert "timestamp" in body
