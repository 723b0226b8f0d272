"""Google Cloud Secret Manager (staging/production).

Secrets têm sufixo do ambiente: gemini-api-key-staging,
gemini-api-key-production. Só leituras bem-sucedidas ficam em cache em
memória; falhas são tentadas de novo na próxima chamada.
"""

from __future__ import annotations

import logging
import os
from functools import lru_cache
from typing import TYPE_CHECKING

from app.infra.secrets.env_secrets import GEMINI_API_KEY_SECRET

if TYPE_CHECKING:
    from google.cloud.secretmanager import SecretManagerServiceClient

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _get_client() -> SecretManagerServiceClient:
    """Cliente do Secret Manager (singleton)."""
    from google.cloud import secretmanager

    return secretmanager.SecretManagerServiceClient()


@lru_cache(maxsize=16)
def get_secret(
    secret_id: str,
    project_id: str | None = None,
    version: str = "latest",
) -> str:
    """Lê o valor de um secret.

    Args:
        secret_id: ID do secret (ex.: gemini-api-key-staging)
        project_id: Projeto GCP (padrão: env GCP_PROJECT)
        version: Versão (padrão: latest)

    Raises:
        ValueError: sem project_id e sem GCP_PROJECT.
        google.api_core.exceptions.GoogleAPIError: falha do Secret Manager.
    """
    if project_id is None:
        project_id = os.getenv("GCP_PROJECT")
        if not project_id:
            msg = "GCP_PROJECT não definido e project_id não fornecido"
            raise ValueError(msg)

    name = f"projects/{project_id}/secrets/{secret_id}/versions/{version}"
    try:
        response = _get_client().access_secret_version(request={"name": name})
    except Exception as exc:
        logger.error(
            "secret_load_error",
            extra={"secret_id": secret_id, "error_type": type(exc).__name__},
        )
        raise
    logger.debug("secret_loaded", extra={"secret_id": secret_id})
    return response.payload.data.decode("UTF-8").strip()


class GCPSecretProvider:
    """Provedor de secrets do Secret Manager.

    Args:
        project_id: Projeto GCP
        environment: Sufixo do secret (staging|production; vazio = sem sufixo)
    """

    def __init__(
        self,
        project_id: str | None = None,
        environment: str = "staging",
    ) -> None:
        self._project_id = project_id or os.getenv("GCP_PROJECT", "")
        self._suffix = f"-{environment}" if environment else ""

    def get(self, key: str, default: str | None = None) -> str | None:
        """Lê `<key>-<ambiente>`; retorna default se o secret não puder ser lido."""
        secret_id = f"{key}{self._suffix}"
        try:
            return get_secret(secret_id, self._project_id or None)
        except Exception as exc:
            logger.warning(
                "secret_fallback_to_default",
                extra={"key": key, "secret_id": secret_id, "error_type": type(exc).__name__},
            )
            return default

    def require(self, key: str) -> str:
        """Lê `<key>-<ambiente>` propagando falhas do Secret Manager.

        Raises:
            ValueError: secret vazio.
            google.api_core.exceptions.GoogleAPIError: falha de leitura.
        """
        value = get_secret(f"{key}{self._suffix}", self._project_id or None)
        if not value:
            msg = f"Secret obrigatório não encontrado: {key}{self._suffix}"
            raise ValueError(msg)
        return value

    @property
    def gemini_api_key(self) -> str | None:
        """API key do Gemini (None quando ausente)."""
        return self.get(GEMINI_API_KEY_SECRET)
