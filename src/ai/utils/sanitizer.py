"""Sanitização de conteúdo com PII para logs de diagnóstico.

Responsabilidade:
- Mascarar e-mails, telefones e URLs de perfis
- Truncar texto bruto do modelo antes de logar
- Garantir determinismo (mesma entrada = mesma saída)
"""

from __future__ import annotations

import re
from re import Pattern
from typing import Final

_PATTERNS: Final[dict[str, Pattern[str]]] = {
    "email": re.compile(r"\b[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}\b"),
    "url": re.compile(r"https?://[^\s\"'<>]+"),
    # Internacional (+886 912 345 678) e local TW (0912-345-678, 02-2345-6789)
    "phone": re.compile(r"(?<!\w)(?:\+\d{1,3}[\s-]?)?\(?0?\d{1,4}\)?[\s-]?\d{3,4}[\s-]?\d{3,4}(?!\w)"),
}

_MASKS: Final[dict[str, str]] = {
    "email": "[EMAIL]",
    "url": "[URL]",
    "phone": "[PHONE]",
}


def sanitize_pii(text: str) -> str:
    """Mascara PII em texto.

    Exemplos:
        >>> sanitize_pii("寄信到 amy@example.com")
        '寄信到 [EMAIL]'

        >>> sanitize_pii("手機 0912-345-678")
        '手機 [PHONE]'
    """
    if not text:
        return text

    result = text
    # Ordem: email → url → phone (evita mascarar dígitos de URLs como telefone)
    for pii_type, pattern in _PATTERNS.items():
        result = pattern.sub(_MASKS[pii_type], result)

    return result


def truncate_for_log(text: str | None, max_chars: int = 500) -> str:
    """Mascara PII e trunca para caber no log."""
    if not text:
        return ""
    sanitized = sanitize_pii(text)
    if len(sanitized) <= max_chars:
        return sanitized
    return sanitized[:max_chars] + "..."
