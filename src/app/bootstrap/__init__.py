"""Bootstrap da aplicação: composition root.

Configura logging, valida settings e conecta implementações concretas
(Gemini, transportes, stores) aos protocolos.

Uso:
    from app.bootstrap import initialize_app, validate_runtime_settings

    initialize_app()
    validate_runtime_settings()
"""

from __future__ import annotations

import logging
import os

from app.observability import get_correlation_id
from config.logging import configure_logging
from config.settings import (
    get_assistant_transport_settings,
    get_base_settings,
    get_firestore_settings,
    get_gemini_settings,
)

# Nome do serviço para logs e métricas
SERVICE_NAME = "networkai_proxy"

DEFAULT_LOG_LEVEL = "INFO"
STRICT_VALIDATION_ENVS = {"staging", "production"}

logger = logging.getLogger(__name__)


def initialize_app() -> None:
    """Configura logging JSON com correlation_id (uma vez no startup)."""
    log_level = os.getenv("LOG_LEVEL", DEFAULT_LOG_LEVEL).upper()

    configure_logging(
        level=log_level,
        service_name=os.getenv("SERVICE_NAME", SERVICE_NAME),
        correlation_id_getter=get_correlation_id,
    )


def validate_runtime_settings() -> list[str]:
    """Valida settings obrigatórias no startup.

    Em `staging`/`production` falha rápido para impedir boot inválido.
    Em `development` só registra o alerta. API key ausente não impede o
    boot: o proxy responde 500 por request até a credencial existir.

    Returns:
        Lista de erros encontrados (vazia = OK).
    """
    base = get_base_settings()
    strict_mode = base.environment in STRICT_VALIDATION_ENVS
    errors: list[str] = []

    errors.extend(f"base: {error}" for error in base.validate())
    errors.extend(f"gemini: {error}" for error in get_gemini_settings().validate())
    errors.extend(
        f"assistant: {error}" for error in get_assistant_transport_settings().validate()
    )
    errors.extend(
        f"firestore: {error}" for error in get_firestore_settings().validate(base.gcp_project)
    )

    if not errors:
        logger.info(
            "settings_validated",
            extra={"component": "bootstrap", "result": "ok", "environment": base.environment},
        )
        return errors

    logger.warning(
        "settings_validation_failed",
        extra={
            "component": "bootstrap",
            "result": "failed",
            "environment": base.environment,
            "error_count": len(errors),
            "errors": errors,
        },
    )
    if strict_mode:
        details = "\n".join(f"- {error}" for error in errors)
        raise RuntimeError(f"Configuração inválida para {base.environment}:\n{details}")
    return errors
