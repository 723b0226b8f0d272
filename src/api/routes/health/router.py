"""Endpoints de health check para Cloud Run."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime
from typing import Any, Literal

from fastapi import APIRouter, Request
from fastapi.responses import JSONResponse
from pydantic import BaseModel

from config.settings import get_base_settings

logger = logging.getLogger(__name__)

router = APIRouter()


class HealthResponse(BaseModel):
    """Resposta do health check."""

    status: str
    service: str
    timestamp: str
    version: str = "1.0.0"


@dataclass(frozen=True, slots=True)
class DependencyCheck:
    """Resultado de checagem de dependência."""

    status: Literal["ok", "failed"]
    error: str | None = None

    def as_dict(self) -> dict[str, Any]:
        return {"status": self.status, "error": self.error}


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """Liveness: o processo está de pé (mesmo sem credencial)."""
    return HealthResponse(
        status="healthy",
        service=get_base_settings().service_name,
        timestamp=datetime.now(UTC).isoformat(),
    )


@router.get("/ready")
async def readiness_check(request: Request) -> JSONResponse:
    """Readiness: pronto quando a API key do Gemini está configurada."""
    getter = getattr(request.app.state, "api_key_getter", None)
    if getter is None:
        from app.bootstrap.clients import resolve_gemini_api_key

        getter = resolve_gemini_api_key

    credential_check = await _check_credential(getter)
    ready = credential_check.status == "ok"

    payload = {
        "status": "ready" if ready else "not_ready",
        "checks": {"gemini_credential": credential_check.as_dict()},
        "timestamp": datetime.now(UTC).isoformat(),
    }
    return JSONResponse(content=payload, status_code=200 if ready else 503)


async def _check_credential(getter: Callable[[], str]) -> DependencyCheck:
    try:
        api_key = await asyncio.to_thread(getter)
    except Exception as exc:
        logger.warning("readiness_credential_check_failed", extra={"error_type": type(exc).__name__})
        return DependencyCheck(status="failed", error=type(exc).__name__)
    if not api_key:
        return DependencyCheck(status="failed", error="not_configured")
    return DependencyCheck(status="ok")
