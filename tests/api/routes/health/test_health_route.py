"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest
from starlette.requests import Request

from api.routes.health.router import health_check, readiness_check


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
async def test_health_is_up_without_credential() -> None:
    response = await health_check()

    assert response.status == "healthy"
    assert response.service


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_api_key() -> None:
    request = _build_request_with_state(SimpleNamespace(api_key_getter=lambda: ""))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["gemini_credential"] == {"status": "failed", "error": "not_configured"}


@pytest.mark.asyncio
async def test_readiness_returns_ready_with_api_key() -> None:
    request = _build_request_with_state(SimpleNamespace(api_key_getter=lambda: "AIza-test"))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["gemini_credential"]["status"] == "ok"


@pytest.mark.asyncio
async def test_readiness_reports_getter_failure_type() -> None:
    def _broken_getter() -> str:
        raise PermissionError("denied")

    request = _build_request_with_state(SimpleNamespace(api_key_getter=_broken_getter))

    response = await readiness_check(request)
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["checks"]["gemini_credential"]["error"] == "PermissionError"
