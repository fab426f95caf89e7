from fastapi.testclient import TestClient

from apidocs.api.endpoints.docs_page import REDOC_CSS_URL, REDOC_JS_URL
from apidocs.api.main import create_app
from apidocs.core.settings import Settings


def test_docs_page_returns_html(client):
    r = client.get("/")
    assert r.status_code == 200
    assert r.headers["content-type"].startswith("text/html")
    assert 'spec-url="/api-docs"' in r.text


def test_docs_page_references_cdn_viewer_assets(client):
    body = client.get("/").text
    assert f'<link rel="stylesheet" href="{REDOC_CSS_URL}">' in body
    assert f'<script src="{REDOC_JS_URL}"></script>' in body
    assert REDOC_CSS_URL.startswith("https://cdn.jsdelivr.net/")
    assert "<title>API Documentation</title>" in body


def test_docs_page_is_identical_across_calls(client):
    bodies = {client.get("/").content for _ in range(3)}
    assert len(bodies) == 1


def test_docs_page_does_not_depend_on_spec_file(tmp_path, client):
    other = TestClient(create_app(Settings(spec_file=tmp_path / "nowhere.yaml")))
    assert other.get("/").content == client.get("/").content
