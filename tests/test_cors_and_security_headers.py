from fastapi.testclient import TestClient

from apidocs.api.main import create_app
from apidocs.core.settings import Settings


def test_cors_allows_any_origin_by_default(client):
    r = client.get("/api-docs", headers={"Origin": "http://example.com"})
    assert r.status_code == 200
    assert r.headers.get("access-control-allow-origin") in ("*", "http://example.com")


def test_cors_preflight(client):
    r = client.options(
        "/api-docs",
        headers={"Origin": "http://example.com", "Access-Control-Request-Method": "GET"},
    )
    assert r.status_code == 200
    assert "GET" in r.headers["access-control-allow-methods"]


def test_cors_restricted_origins(spec_path):
    c = TestClient(create_app(Settings(spec_file=spec_path, cors_origins=("https://docs.example.com",))))

    ok = c.get("/", headers={"Origin": "https://docs.example.com"})
    assert ok.headers.get("access-control-allow-origin") == "https://docs.example.com"

    other = c.get("/", headers={"Origin": "https://evil.example.com"})
    assert "access-control-allow-origin" not in other.headers


def test_security_headers_off_by_default(client):
    r = client.get("/")
    assert "X-Frame-Options" not in r.headers


def test_security_headers_enabled(spec_path):
    c = TestClient(create_app(Settings(spec_file=spec_path, security_headers=True)))
    r = c.get("/")
    assert r.headers["X-Content-Type-Options"] == "nosniff"
    assert r.headers["X-Frame-Options"] == "DENY"
    assert r.headers["Referrer-Policy"] == "no-referrer"
    assert "Content-Security-Policy" not in r.headers
