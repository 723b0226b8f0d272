"""Settings do Gemini.

Configurações para a API REST generativelanguage (generateContent).
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache

GEMINI_API_BASE_URL = "https://generativelanguage.googleapis.com/v1beta"
DEFAULT_GEMINI_MODEL = "gemini-2.0-flash"


@dataclass(frozen=True)
class GeminiSettings:
    """Configurações do Gemini.

    Attributes:
        api_key: Chave da API (vazia quando vem do Secret Manager)
        model: Modelo padrão para as quatro ações
        base_url: URL base da API REST
        timeout_seconds: Timeout por chamada (o resumo com busca é lento)
    """

    api_key: str = ""
    model: str = DEFAULT_GEMINI_MODEL
    base_url: str = GEMINI_API_BASE_URL
    timeout_seconds: float = 60.0

    @property
    def has_api_key(self) -> bool:
        return bool(self.api_key.strip())

    def validate(self) -> list[str]:
        """Valida configurações do Gemini.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []

        if not self.model:
            errors.append("GEMINI_MODEL não pode ser vazio")

        if self.timeout_seconds <= 0:
            errors.append("GEMINI_TIMEOUT_SECONDS deve ser > 0")

        if not self.base_url.startswith(("http://", "https://")):
            errors.append("GEMINI_API_BASE_URL deve ser http(s)")

        return errors


def _load_gemini_from_env() -> GeminiSettings:
    """Carrega GeminiSettings de variáveis de ambiente."""
    return GeminiSettings(
        api_key=os.getenv("GEMINI_API_KEY", os.getenv("API_KEY", "")),
        model=os.getenv("GEMINI_MODEL", DEFAULT_GEMINI_MODEL),
        base_url=os.getenv("GEMINI_API_BASE_URL", GEMINI_API_BASE_URL).rstrip("/"),
        timeout_seconds=float(os.getenv("GEMINI_TIMEOUT_SECONDS", "60")),
    )


@lru_cache(maxsize=1)
def get_gemini_settings() -> GeminiSettings:
    """Retorna instância cacheada de GeminiSettings."""
    return _load_gemini_from_env()
