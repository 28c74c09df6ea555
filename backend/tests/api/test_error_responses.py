"""Error Responses — unmatched paths and methods, HEAD, opaque 500s, health probes.

Invariants:
    - Every unmatched path or method → 404 {"message": "Path not found"}
    - Unhandled exceptions → 500 with a generic message, no internals
    - HEAD is answered wherever GET is, with an empty body
"""

import pytest
from httpx import ASGITransport, AsyncClient


@pytest.mark.parametrize("method,path", [
    ("GET", "/api/invalid-endpoint"),
    ("GET", "/"),
    ("GET", "/api/articles/1/comments/extra"),
    ("POST", "/api/topics"),
    ("PUT", "/api/articles/1"),
    ("DELETE", "/api/articles/1"),
    ("PATCH", "/api/comments/1"),
])
async def test_unmatched_routes_are_path_not_found(client, method, path):
    res = await client.request(method, path)
    assert res.status_code == 404
    assert res.json() == {"message": "Path not found"}


async def test_unhandled_exception_is_opaque_500(app, monkeypatch):
    async def boom(db):
        raise RuntimeError("connection string leaked: postgres://secret")

    monkeypatch.setattr("newsdesk.api.routes.topics.select_topics", boom)

    async with AsyncClient(
        transport=ASGITransport(app=app, raise_app_exceptions=False),
        base_url="http://test",
    ) as c:
        res = await c.get("/api/topics")

    assert res.status_code == 500
    assert res.json() == {"message": "Internal server error"}
    assert "secret" not in res.text


async def test_liveness_probe(client):
    res = await client.get("/api/health")
    assert res.status_code == 200
    assert res.json()["status"] == "healthy"


async def test_readiness_probe_checks_database(client):
    res = await client.get("/api/health/ready")
    assert res.status_code == 200
    assert res.json() == {"status": "ready", "checks": {"database": "healthy"}}


async def test_readiness_probe_without_database(app, client):
    app.state.db_manager = None
    res = await client.get("/api/health/ready")
    assert res.status_code == 503
    assert res.json()["reason"] == "database_unavailable"


async def test_head_answers_like_get(client):
    res = await client.head("/api/topics")
    assert res.status_code == 200
    assert res.content == b""
    assert res.headers["content-type"] == "application/json"


async def test_head_on_unknown_article_keeps_get_status(client):
    res = await client.head("/api/articles/77777")
    assert res.status_code == 404
    assert res.content == b""


@pytest.mark.parametrize("path", ["/api/comments/1", "/api/not-a-route"])
async def test_head_without_get_route_is_not_found(client, path):
    res = await client.head(path)
    assert res.status_code == 404
