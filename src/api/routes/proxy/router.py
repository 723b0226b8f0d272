"""Endpoint do proxy do assistente.

Endpoints:
- OPTIONS /: preflight CORS (204 sem corpo)
- POST /: {action, payload} -> resultado da ação ou {error}

A API key do Gemini fica só no servidor. Logs registram o nome da ação e
as chaves do payload, nunca os valores.
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

from fastapi import APIRouter, Request, Response, status
from fastapi.responses import JSONResponse

from app.constants.http import CORS_HEADERS, FALLBACK_HEADER
from app.observability import (
    CORRELATION_ID_HEADER,
    correlation_id_from_header,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from utils.errors import AssistantError

if TYPE_CHECKING:
    from ai.services.action_dispatcher import ActionDispatcher

logger = logging.getLogger(__name__)

router = APIRouter()

INTERNAL_ERROR_MESSAGE = "Internal server error"


def _get_dispatcher(request: Request) -> ActionDispatcher:
    """Dispatcher do app.state (criado no lifespan ou sob demanda)."""
    dispatcher = getattr(request.app.state, "action_dispatcher", None)
    if dispatcher is None:
        from app.bootstrap.dependencies import create_action_dispatcher

        dispatcher = create_action_dispatcher(
            http_client=getattr(request.app.state, "http_client", None),
        )
        request.app.state.action_dispatcher = dispatcher
    return dispatcher


def _response_headers(fallback_reason: str | None = None) -> dict[str, str]:
    headers = dict(CORS_HEADERS)
    headers[CORRELATION_ID_HEADER] = get_correlation_id()
    if fallback_reason:
        headers[FALLBACK_HEADER] = fallback_reason
    return headers


def _error_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        content={"error": message},
        status_code=status_code,
        headers=_response_headers(),
    )


def _payload_keys(payload: Any) -> list[str]:
    return sorted(str(key) for key in payload) if isinstance(payload, dict) else []


@router.options("/")
async def proxy_preflight() -> Response:
    """Preflight CORS."""
    return Response(status_code=status.HTTP_204_NO_CONTENT, headers=dict(CORS_HEADERS))


@router.post("/", response_model=None)
async def proxy_action(request: Request) -> Response:
    """Executa uma ação do assistente.

    Corpo esperado: {"action": "<nome>", "payload": {...}}

    Returns:
        200 com o resultado da ação, ou {error} com 400/500.
    """
    token = set_correlation_id(
        correlation_id_from_header(request.headers.get(CORRELATION_ID_HEADER))
    )
    try:
        return await _handle_action(request)
    finally:
        reset_correlation_id(token)


async def _handle_action(request: Request) -> Response:
    raw_body = await request.body()
    try:
        body = json.loads(raw_body or b"null")
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("proxy_body_invalid_json", extra={"payload_size": len(raw_body)})
        return _error_response(status.HTTP_400_BAD_REQUEST, "Invalid JSON body")

    if not isinstance(body, dict):
        logger.warning("proxy_body_not_object", extra={"payload_size": len(raw_body)})
        return _error_response(status.HTTP_400_BAD_REQUEST, "Request body must be a JSON object")

    action = body.get("action")
    payload = body.get("payload")
    logger.info(
        "proxy_action_received",
        extra={
            "action": action if isinstance(action, str) else None,
            "payload_keys": _payload_keys(payload),
        },
    )

    try:
        result = await _get_dispatcher(request).dispatch(action, payload)
    except AssistantError as exc:
        logger.warning(
            "proxy_action_failed",
            extra={
                "action": action if isinstance(action, str) else None,
                "error_type": type(exc).__name__,
                "status_code": exc.status_code,
                "error": exc.public_message,
            },
        )
        return _error_response(exc.status_code, exc.public_message)
    except Exception:
        logger.exception(
            "proxy_unexpected_error",
            extra={"action": action if isinstance(action, str) else None},
        )
        return _error_response(status.HTTP_500_INTERNAL_SERVER_ERROR, INTERNAL_ERROR_MESSAGE)

    return JSONResponse(
        content=result.to_wire(),
        status_code=status.HTTP_200_OK,
        headers=_response_headers(getattr(result, "fallback_reason", None)),
    )
