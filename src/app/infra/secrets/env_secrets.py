"""Secrets via variáveis de ambiente (desenvolvimento local).

Em staging/production a API key vem do Secret Manager (GCPSecretProvider).
"""

from __future__ import annotations

import logging
import os

logger = logging.getLogger(__name__)

GEMINI_API_KEY_SECRET = "gemini-api-key"

# Nome legado usado pelo app web (process.env.API_KEY)
_LEGACY_ENV_ALIASES = {GEMINI_API_KEY_SECRET: "API_KEY"}


class EnvSecretProvider:
    """Lê secrets do ambiente: `gemini-api-key` -> GEMINI_API_KEY.

    Args:
        prefix: Prefixo opcional das variáveis (ex.: "NETWORKAI")
    """

    def __init__(self, prefix: str = "") -> None:
        self._prefix = prefix.upper().rstrip("_") + "_" if prefix else ""

    def _env_key(self, key: str) -> str:
        return f"{self._prefix}{key.upper().replace('-', '_')}"

    def get(self, key: str, default: str | None = None) -> str | None:
        env_key = self._env_key(key)
        value = os.getenv(env_key)
        if not value and key in _LEGACY_ENV_ALIASES:
            value = os.getenv(_LEGACY_ENV_ALIASES[key])
        if not value:
            logger.debug("env_secret_not_found", extra={"key": key, "env_key": env_key})
            return default
        return value

    def require(self, key: str) -> str:
        """Secret obrigatório.

        Raises:
            ValueError: variável não definida.
        """
        value = self.get(key)
        if value is None:
            msg = f"Variável de ambiente obrigatória não definida: {self._env_key(key)}"
            raise ValueError(msg)
        return value

    @property
    def gemini_api_key(self) -> str | None:
        """API key do Gemini (None quando ausente)."""
        return self.get(GEMINI_API_KEY_SECRET)
