def test_banner_lists_endpoints(client):
    resp = client.get("/")
    assert resp.status_code == 200
    body = resp.json()
    assert body["version"] == "1.0.0"
    assert body["status"] == "Active"
    assert "Civic Reports API" in body["message"]
    assert "POST /api/issues - Create new issue" in body["endpoints"]
    assert "GET /api/stats - Get statistics" in body["endpoints"]


def test_health(client):
    assert client.get("/health").json() == {"ok": True}


def test_cors_allows_any_origin(client):
    resp = client.get("/api/issues", headers={"Origin": "http://example.com"})
    assert resp.headers["access-control-allow-origin"] == "*"


def test_body_over_limit_is_rejected(client):
    from civic_reports.core.config import settings

    payload = b'{"photo": "' + b"a" * settings.max_body_bytes + b'"}'
    resp = client.post("/api/issues", content=payload, headers={"Content-Type": "application/json"})
    assert resp.status_code == 413
    assert "error" in resp.json()
    assert client.get("/api/issues").json() == []


def test_unknown_route_uses_error_envelope(client):
    resp = client.get("/api/nope")
    assert resp.status_code == 404
    assert resp.json() == {"error": "Not Found"}


def test_chunked_body_over_limit_is_rejected(client):
    from civic_reports.core.config import settings

    def chunks():
        yield b'{"photo": "'
        remaining = settings.max_body_bytes
        while remaining > 0:
            size = min(remaining, 1024 * 1024)
            yield b"a" * size
            remaining -= size
        yield b'"}'

    resp = client.post("/api/issues", content=chunks(), headers={"Content-Type": "application/json"})
    assert resp.status_code == 413
    assert "error" in resp.json()
    assert client.get("/api/issues").json() == []


def test_chunked_body_under_limit_is_accepted(client):
    def chunks():
        yield b'{"title": "Fallen '
        yield b'sign"}'

    resp = client.post("/api/issues", content=chunks(), headers={"Content-Type": "application/json"})
    assert resp.status_code == 201
    assert resp.json()["title"] == "Fallen sign"
