"""Tests for GET /api/ai/ping liveness probe."""

from unittest.mock import Mock

from dashboard_ai.ai.client import CompletionClient


def test_ping_returns_ok(client):
    resp = client.get("/api/ai/ping")
    assert resp.status_code == 200
    assert resp.text == "ok"
    assert resp.content == b"ok"
    assert resp.headers["content-type"] == "text/plain;charset=UTF-8"


def test_ping_with_mocked_ai_client_never_touches_it(make_client):
    ai_client = Mock(spec=CompletionClient)
    client = make_client(ai_client)

    resp = client.get("/api/ai/ping")

    assert resp.status_code == 200
    assert resp.text == "ok"
    assert ai_client.mock_calls == []


def test_ping_without_ai_client(make_client):
    client = make_client(None)
    assert client.app.state.ai_client is None

    resp = client.get("/api/ai/ping")
    assert resp.status_code == 200
    assert resp.text == "ok"


def test_ping_ignores_request_input(client):
    resp = client.get(
        "/api/ai/ping",
        params={"verbose": "1"},
        headers={"Accept": "application/json", "Authorization": "Bearer nope"},
    )
    assert resp.status_code == 200
    assert resp.text == "ok"
    assert resp.headers["content-type"] == "text/plain;charset=UTF-8"


def test_ping_is_idempotent(client):
    first = client.get("/api/ai/ping")
    second = client.get("/api/ai/ping")
    assert first.content == second.content
    assert first.headers["content-type"] == second.headers["content-type"]


def test_ping_rejects_other_methods(client):
    resp = client.post("/api/ai/ping")
    assert resp.status_code == 405


def test_ping_needs_no_authorization(make_client, fake_ai_client):
    resp = make_client(fake_ai_client, headers={}).get("/api/ai/ping")
    assert resp.status_code == 200
    assert resp.text == "ok"
