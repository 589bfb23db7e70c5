import anyio
import pytest

from fastapi.testclient import TestClient
from services.api_service.main import app
from services.api_service.src import health
from services.api_service.src.config import DatabaseConfig
from services.api_service.src.logging import JsonLogger

client = TestClient(app)

def test_health_ok(monkeypatch):
    async def fake_ping(db, timeout_s=5.0):
        fake_ping.called_with = db

    monkeypatch.setattr("services.api_service.src.health.ping_database", fake_ping)

    resp = client.get("/health")

    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "ok"
    assert data["details"] == {"database": {"status": "up"}}
    assert data["version"] == "1.0.0"
    assert isinstance(fake_ping.called_with, DatabaseConfig)

def test_health_database_down(monkeypatch):
    async def failing_ping(db, timeout_s=5.0):
        raise OSError("connection refused")

    monkeypatch.setattr("services.api_service.src.health.ping_database", failing_ping)

    resp = client.get("/health")

    assert resp.status_code == 200
    data = resp.json()
    assert data["status"] == "error"
    assert data["info"]["database"]["status"] == "down"

def test_ping_times_out(monkeypatch):
    async def slow_connect(**kwargs):
        await anyio.sleep(10)

    monkeypatch.setattr(health.asyncpg, "connect", slow_connect)
    db = DatabaseConfig(host="db", port=5432, username="u", password="p", database="d")

    async def run():
        with pytest.raises(TimeoutError):
            await health.ping_database(db, timeout_s=0.05)

    anyio.run(run)

def test_check_health_reports_timeout_as_down(monkeypatch):
    async def slow_connect(**kwargs):
        await anyio.sleep(10)

    monkeypatch.setattr(health.asyncpg, "connect", slow_connect)
    db = DatabaseConfig(host="db", port=5432, username="u", password="p", database="d")

    result = anyio.run(health.check_health, db, JsonLogger("api-service-test", "test"), 0.05)

    assert result["status"] == "error"
