"""Observabilidade: correlation_id e métricas via logs estruturados."""

from app.observability.correlation import (
    CORRELATION_ID_HEADER,
    correlation_id_from_header,
    generate_correlation_id,
    get_correlation_id,
    reset_correlation_id,
    set_correlation_id,
)
from app.observability.metrics import (
    OUTCOME_ERROR,
    OUTCOME_FALLBACK,
    OUTCOME_OK,
    record_action_latency,
    record_fallback,
    record_provider_error,
)

__all__ = [
    "CORRELATION_ID_HEADER",
    "OUTCOME_ERROR",
    "OUTCOME_FALLBACK",
    "OUTCOME_OK",
    "correlation_id_from_header",
    "generate_correlation_id",
    "get_correlation_id",
    "record_action_latency",
    "record_fallback",
    "record_provider_error",
    "reset_correlation_id",
    "set_correlation_id",
]
