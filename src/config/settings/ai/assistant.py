"""Settings do cliente do assistente.

Seleciona o transporte usado pelo NetworkingAssistant:
- direct: dispatcher em processo com cliente Gemini próprio
- proxy: POST para o endpoint do proxy (a API key fica no servidor)
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

TransportMode = Literal["direct", "proxy"]


@dataclass(frozen=True)
class AssistantTransportSettings:
    """Configurações de transporte do assistente.

    Attributes:
        mode: direct | proxy
        proxy_url: URL do endpoint do proxy (obrigatória em modo proxy)
        timeout_seconds: Timeout da chamada ao proxy
    """

    mode: TransportMode = "direct"
    proxy_url: str = ""
    timeout_seconds: float = 90.0

    def validate(self) -> list[str]:
        errors: list[str] = []

        if self.mode == "proxy" and not self.proxy_url:
            errors.append("ASSISTANT_PROXY_URL não configurado mas ASSISTANT_TRANSPORT=proxy")

        if self.timeout_seconds <= 0:
            errors.append("ASSISTANT_PROXY_TIMEOUT_SECONDS deve ser > 0")

        return errors


def _parse_mode(value: str) -> TransportMode:
    return "proxy" if value.strip().lower() == "proxy" else "direct"


def _load_assistant_from_env() -> AssistantTransportSettings:
    """Carrega AssistantTransportSettings de variáveis de ambiente."""
    return AssistantTransportSettings(
        mode=_parse_mode(os.getenv("ASSISTANT_TRANSPORT", "direct")),
        proxy_url=os.getenv("ASSISTANT_PROXY_URL", ""),
        timeout_seconds=float(os.getenv("ASSISTANT_PROXY_TIMEOUT_SECONDS", "90")),
    )


@lru_cache(maxsize=1)
def get_assistant_transport_settings() -> AssistantTransportSettings:
    """Retorna instância cacheada de AssistantTransportSettings."""
    return _load_assistant_from_env()
