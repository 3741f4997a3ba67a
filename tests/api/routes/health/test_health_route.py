"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
from httpx import ASGITransport, AsyncClient
from starlette.requests import Request

from api.routes.health.router import readiness_check
from app.app import create_app
from app.domain.message import Message
from app.infra.stores.memory_message_store import MemoryMessageStore


def _build_request_with_state(state: SimpleNamespace) -> Request:
    scope = {
        "type": "http",
        "asgi": {"version": "3.0"},
        "http_version": "1.1",
        "method": "GET",
        "path": "/ready",
        "raw_path": b"/ready",
        "query_string": b"",
        "headers": [],
        "app": SimpleNamespace(state=state),
    }

    async def _receive() -> dict[str, object]:
        return {"type": "http.request", "body": b"", "more_body": False}

    return Request(scope, _receive)


@pytest.mark.asyncio
async def test_health_reports_email_count() -> None:
    store = MemoryMessageStore()
    store.add(Message(subject="a"))
    store.add(Message(subject="b"))
    app = create_app(store, enable_smtp=False)

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        response = await client.get("/health")

    assert response.status_code == 200
    payload = response.json()
    assert payload["status"] == "healthy"
    assert payload["service"] == "mailsink"
    assert payload["emails"] == 2


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_smtp_server() -> None:
    request = _build_request_with_state(SimpleNamespace(smtp_server=None))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["smtp"]["error"] == "not_configured"


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_when_listener_is_down() -> None:
    smtp_server = SimpleNamespace(is_serving=False, port=1025, active_connections=0)
    request = _build_request_with_state(SimpleNamespace(smtp_server=smtp_server))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["smtp"]["status"] == "failed"
    assert payload["checks"]["smtp"]["error"] == "not_listening"


@pytest.mark.asyncio
async def test_readiness_returns_ready_when_listener_is_serving() -> None:
    smtp_server = SimpleNamespace(is_serving=True, port=2525, active_connections=3)
    request = _build_request_with_state(SimpleNamespace(smtp_server=smtp_server))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["smtp"]["status"] == "ok"
    assert payload["checks"]["smtp"]["detail"] == {"port": 2525, "active_connections": 3}
