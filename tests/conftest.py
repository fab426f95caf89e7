from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from apidocs.api.main import create_app
from apidocs.core.observability.metrics import reset_metrics
from apidocs.core.settings import Settings

SPEC_YAML = """\
openapi: 3.0.3
info:
  title: Items API
  version: "1.0"
paths:
  /items:
    get:
      summary: List items
      responses:
        "200":
          description: OK
"""


@pytest.fixture(autouse=True)
def _reset_named_metrics():
    # Counters are process-wide; start every test from zero.
    reset_metrics()
    yield


@pytest.fixture()
def spec_path(tmp_path: Path) -> Path:
    p = tmp_path / "swagger.yaml"
    p.write_text(SPEC_YAML, encoding="utf-8")
    return p


@pytest.fixture()
def app(spec_path: Path):
    return create_app(Settings(spec_file=spec_path))


@pytest.fixture()
def client(app):
    return TestClient(app)


@pytest.fixture()
def missing_spec_client(tmp_path: Path):
    return TestClient(create_app(Settings(spec_file=tmp_path / "absent.yaml")))
