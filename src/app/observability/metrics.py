"""Métricas do proxy via structured logging.

As métricas saem como logs JSON e são agregadas depois (Cloud Logging,
BigQuery). Não há cliente de métricas dedicado.

Métricas suportadas:
- action_latency: histogram por ação e desfecho (ok, fallback, error)
- fallback: counter de respostas padrão aplicadas, com motivo
- provider_error: counter de erros do provedor por status

Uso:
    from app.observability import record_action_latency, record_fallback

    start = time.perf_counter()
    ...
    record_action_latency("getNetworkingAdvice", elapsed_ms, outcome="ok")
"""

from __future__ import annotations

import logging

from app.observability.correlation import get_correlation_id

logger = logging.getLogger(__name__)

OUTCOME_OK = "ok"
OUTCOME_FALLBACK = "fallback"
OUTCOME_ERROR = "error"


def record_action_latency(
    action: str,
    latency_ms: float,
    *,
    outcome: str = OUTCOME_OK,
    model: str | None = None,
) -> None:
    """Registra latência de uma ação do assistente.

    Args:
        action: Nome da ação no wire (ex: "getNetworkingAdvice")
        latency_ms: Latência total (provedor + normalização) em ms
        outcome: ok | fallback | error
        model: Modelo usado, quando conhecido
    """
    logger.info(
        "metric_action_latency",
        extra={
            "metric_type": "latency",
            "action": action,
            "outcome": outcome,
            "model": model,
            "latency_ms": round(latency_ms, 2),
            "correlation_id": get_correlation_id() or None,
        },
    )


def record_fallback(action: str, reason: str) -> None:
    """Conta uma resposta padrão aplicada no lugar do modelo."""
    logger.info(
        "metric_fallback",
        extra={
            "metric_type": "fallback",
            "action": action,
            "reason": reason,
            "correlation_id": get_correlation_id() or None,
        },
    )


def record_provider_error(action: str, provider_status: int | None) -> None:
    """Conta erro do provedor (status None = falha de rede/timeout)."""
    logger.info(
        "metric_provider_error",
        extra={
            "metric_type": "provider_error",
            "action": action,
            "provider_status": provider_status,
            "correlation_id": get_correlation_id() or None,
        },
    )
