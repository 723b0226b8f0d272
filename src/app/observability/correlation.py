"""correlation_id por request do proxy.

Vem do header X-Correlation-ID (quando o cliente manda um valor aceitável)
ou é gerado. Fica num ContextVar para entrar em todos os logs do request
e volta no header da resposta.

Uso:
    token = set_correlation_id(correlation_id_from_header(request.headers.get(...)))
    try:
        ...
    finally:
        reset_correlation_id(token)
"""

from __future__ import annotations

import re
import uuid
from contextvars import ContextVar, Token

CORRELATION_ID_HEADER = "X-Correlation-ID"

# Aceita ids simples de até 64 caracteres; o resto é descartado
_VALID_ID = re.compile(r"^[A-Za-z0-9._:-]{1,64}$")

_correlation_id: ContextVar[str] = ContextVar("correlation_id", default="")


def get_correlation_id() -> str:
    """correlation_id do contexto atual ("" fora de request)."""
    return _correlation_id.get()


def set_correlation_id(correlation_id: str | None = None) -> Token[str]:
    """Define o correlation_id (gera um novo se None/vazio)."""
    return _correlation_id.set(correlation_id or generate_correlation_id())


def reset_correlation_id(token: Token[str]) -> None:
    _correlation_id.reset(token)


def generate_correlation_id() -> str:
    return uuid.uuid4().hex


def correlation_id_from_header(value: str | None) -> str:
    """Valor do header se for um id aceitável; senão, um id novo."""
    if value:
        candidate = value.strip()
        if _VALID_ID.match(candidate):
            return candidate
    return generate_correlation_id()
