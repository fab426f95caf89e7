def test_request_id_header_generated(client):
    r = client.get("/")
    assert "X-Request-Id" in r.headers
    assert len(r.headers["X-Request-Id"]) > 10


def test_request_id_passthrough(client):
    rid = "test-rid-123"
    r = client.get("/api-docs", headers={"X-Request-Id": rid})
    assert r.headers.get("X-Request-Id") == rid


def test_request_id_on_404(missing_spec_client):
    r = missing_spec_client.get("/api-docs")
    assert r.status_code == 404
    assert "x-request-id" in {k.lower() for k in r.headers.keys()}


def test_request_ids_differ_between_requests(client):
    a = client.get("/").headers["X-Request-Id"]
    b = client.get("/").headers["X-Request-Id"]
    assert a != b
