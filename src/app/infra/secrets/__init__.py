"""Secrets: origem da API key do Gemini.

- env_secrets: variáveis de ambiente (desenvolvimento)
- gcp_secrets: Google Cloud Secret Manager (staging/production)
"""

from __future__ import annotations

from app.infra.secrets.env_secrets import GEMINI_API_KEY_SECRET, EnvSecretProvider
from app.infra.secrets.gcp_secrets import GCPSecretProvider, get_secret

__all__ = [
    "GEMINI_API_KEY_SECRET",
    "EnvSecretProvider",
    "GCPSecretProvider",
    "get_secret",
]
