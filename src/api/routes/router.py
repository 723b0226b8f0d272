"""Agregador de rotas.

Uso:
    from api.routes import create_api_router

    app = FastAPI()
    app.include_router(create_api_router())
"""

from __future__ import annotations

from fastapi import APIRouter

from api.routes.health.router import router as health_router
from api.routes.proxy.router import router as proxy_router


def create_api_router() -> APIRouter:
    """Cria router principal com health e proxy registrados."""
    api_router = APIRouter()

    # Health checks (/health e /ready na raiz)
    api_router.include_router(health_router, tags=["health"])

    # Proxy do assistente em "/" (contrato consumido pelo app web)
    api_router.include_router(proxy_router, tags=["assistant"])

    return api_router
