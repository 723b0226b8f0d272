"""Entrypoint do NetworkAI proxy.

Inicializa o bootstrap e expõe a aplicação ASGI (FastAPI).

Uso (produção):
    uvicorn app.app:app --host 0.0.0.0 --port 8080

Uso (desenvolvimento):
    uvicorn app.app:app --reload --host 0.0.0.0 --port 8080

Cloud Run:
    O container deve expor a porta 8080 (padrão do Cloud Run).
"""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import TYPE_CHECKING

from fastapi import FastAPI

from api.routes import create_api_router
from app.bootstrap import initialize_app, validate_runtime_settings
from app.bootstrap.clients import create_http_client, resolve_gemini_api_key
from app.bootstrap.dependencies import create_action_dispatcher
from config.logging import get_logger
from config.settings import get_base_settings

if TYPE_CHECKING:
    from collections.abc import AsyncGenerator

# Inicializar logging ANTES de qualquer import que use logger
initialize_app()

logger = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Gerencia ciclo de vida da aplicação.

    Startup:
    - Valida configurações
    - Cria o httpx.AsyncClient compartilhado e o dispatcher

    Shutdown:
    - Fecha o pool HTTP
    """
    service = get_base_settings().service_name
    logger.info("app_starting", extra={"service": service})
    validate_runtime_settings()

    http_client = create_http_client()
    app.state.http_client = http_client
    app.state.api_key_getter = resolve_gemini_api_key
    app.state.action_dispatcher = create_action_dispatcher(http_client=http_client)

    # Processo continua servindo; cada request do proxy responde 500
    try:
        configured = bool(resolve_gemini_api_key())
    except Exception as exc:
        logger.error(
            "gemini_credential_unavailable",
            extra={"service": service, "error_type": type(exc).__name__},
        )
    else:
        if not configured:
            logger.error("gemini_api_key_missing", extra={"service": service})

    yield

    logger.info("app_shutting_down", extra={"service": service})
    await http_client.aclose()


def create_app() -> FastAPI:
    """Cria e configura a aplicação FastAPI.

    CORS é tratado pelo próprio endpoint do proxy (OPTIONS / e headers
    em toda resposta do POST).
    """
    fastapi_app = FastAPI(
        title="NetworkAI Proxy",
        description="Proxy do assistente NetworkAI (Gemini) para o app de contatos",
        version="1.0.0",
        lifespan=lifespan,
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    fastapi_app.include_router(create_api_router())

    logger.info("app_configured", extra={"service": get_base_settings().service_name})

    return fastapi_app


# Aplicação ASGI exposta para uvicorn
app = create_app()


def main() -> None:
    """Entrypoint para execução direta (desenvolvimento)."""
    import uvicorn

    logger.info("networkai_proxy_dev_start")
    uvicorn.run(
        "app.app:app",
        host="0.0.0.0",
        port=8080,
        reload=True,
    )


if __name__ == "__main__":
    main()
