"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from collections.abc import Iterator
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
from fastapi.testclient import TestClient
from starlette.requests import Request

from api.routes.health.router import readiness_check
from config.settings import get_store_settings


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


@pytest.fixture
def firestore_backend(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.setenv("STORE_BACKEND", "firestore")
    get_store_settings.cache_clear()
    yield
    get_store_settings.cache_clear()


def test_health_does_not_require_auth(client: TestClient) -> None:
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_ready_with_memory_backend(client: TestClient) -> None:
    response = client.get("/ready")

    assert response.status_code == 200
    assert response.json()["checks"]["store"]["status"] == "skipped"


@pytest.mark.asyncio
async def test_readiness_not_ready_without_container() -> None:
    request = _build_request_with_state(SimpleNamespace(firestore_client=None))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["container"] == "failed"


@pytest.mark.asyncio
@pytest.mark.usefixtures("firestore_backend")
async def test_readiness_fails_without_firestore_client() -> None:
    request = _build_request_with_state(SimpleNamespace(container=object(), firestore_client=None))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["store"] == {"status": "failed", "latency_ms": None, "error": "not_configured"}


@pytest.mark.asyncio
@pytest.mark.usefixtures("firestore_backend")
async def test_readiness_ok_with_firestore() -> None:
    firestore_client = MagicMock()
    firestore_client.collections.return_value = iter([MagicMock()])
    request = _build_request_with_state(
        SimpleNamespace(container=object(), firestore_client=firestore_client)
    )

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["store"]["status"] == "ok"
