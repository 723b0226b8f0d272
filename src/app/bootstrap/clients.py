"""Factories de clientes externos: HTTP, Firestore e credencial do Gemini."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import TYPE_CHECKING

import httpx

from app.infra.secrets import GEMINI_API_KEY_SECRET, EnvSecretProvider, GCPSecretProvider
from config.settings import get_base_settings, get_firestore_settings, get_gemini_settings

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)

HTTP_POOL_LIMITS = httpx.Limits(max_connections=100, max_keepalive_connections=20)


def create_http_client(timeout_seconds: float | None = None) -> httpx.AsyncClient:
    """Cria o httpx.AsyncClient compartilhado do processo.

    O dono (lifespan do app) é responsável por fechar com `aclose()`.
    """
    timeout = timeout_seconds or get_gemini_settings().timeout_seconds
    return httpx.AsyncClient(timeout=timeout, limits=HTTP_POOL_LIMITS)


@lru_cache(maxsize=1)
def create_firestore_client() -> FirestoreClient:
    """Cria cliente Firestore (singleton)."""
    from google.cloud import firestore

    settings = get_firestore_settings()
    project_id = settings.project_id or get_base_settings().gcp_project or None
    client = firestore.Client(project=project_id)
    logger.info("firestore_client_created", extra={"project": project_id})
    return client


@lru_cache(maxsize=1)
def resolve_gemini_api_key() -> str:
    """Resolve a API key uma vez por processo ("" quando ausente).

    SECRETS_BACKEND=env: GEMINI_API_KEY (ou API_KEY).
    SECRETS_BACKEND=gcp: secret gemini-api-key-<ambiente> no Secret Manager.

    Falha de leitura do Secret Manager propaga e não entra no cache,
    então a próxima chamada tenta de novo.
    """
    base = get_base_settings()
    if base.secrets_backend == "gcp":
        provider = GCPSecretProvider(
            project_id=base.gcp_project,
            environment="" if base.is_development else base.environment,
        )
        api_key = provider.require(GEMINI_API_KEY_SECRET)
    else:
        api_key = get_gemini_settings().api_key or EnvSecretProvider().gemini_api_key or ""

    logger.info(
        "gemini_credential_resolved",
        extra={"backend": base.secrets_backend, "configured": bool(api_key.strip())},
    )
    return api_key.strip()
