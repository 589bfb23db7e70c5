from fastapi.testclient import TestClient
from services.api_service.main import app
from services.api_service.src.config import Settings

client = TestClient(app)

def test_root_get():
    resp = client.get("/")
    assert resp.status_code == 200
    data = resp.json()
    assert data["message"] == "Hello from the API!"
    assert "timestamp" in data
    assert "method" not in data

def test_root_post_echoes_body():
    resp = client.post("/", json={"name": "Ada", "tags": [1, 2]})
    assert resp.status_code == 200
    data = resp.json()
    assert data["method"] == "POST"
    assert data["receivedData"] == {"name": "Ada", "tags": [1, 2]}

def test_hello_get():
    resp = client.get("/hello")
    assert resp.status_code == 200
    assert resp.json()["message"] == "Hello World!"

def test_hello_post_accepts_any_json():
    resp = client.post("/hello", json=[1, "two"])
    assert resp.status_code == 200
    data = resp.json()
    assert data["message"] == "Hello World!"
    assert data["receivedData"] == [1, "two"]

def test_hello_post_without_body():
    resp = client.post("/hello")
    assert resp.status_code == 200
    assert resp.json()["receivedData"] is None

def test_greet_reports_environment():
    resp = client.get("/api/greet")
    assert resp.status_code == 200
    data = resp.json()
    assert data["greeting"] == "Hello from the API!"
    assert data["environment"] == Settings().environment

def test_greet_method_not_allowed():
    resp = client.post("/api/greet")
    assert resp.status_code == 405

def test_cors_preflight():
    resp = client.options(
        "/api/greet",
        headers={"Origin": "http://example.com", "Access-Control-Request-Method": "GET"},
    )
    assert resp.status_code == 200
    assert resp.headers["access-control-allow-origin"] in ("*", "http://example.com")

def test_database_config_defaults():
    cfg = Settings(_env_file=None, environment="development").database_config()
    assert cfg.type == "postgres"
    assert cfg.port == 5432
    assert cfg.synchronize is False
    assert cfg.logging is True
    assert cfg.connect_timeout_s == 5.0

def test_database_config_ssl(monkeypatch):
    monkeypatch.setenv("DB_SSL", "true")
    monkeypatch.setenv("DB_POOL_SIZE", "25")
    cfg = Settings(_env_file=None, environment="production").database_config()
    assert cfg.ssl == {"rejectUnauthorized": False}
    assert cfg.pool_size == 25
    assert cfg.logging is False
