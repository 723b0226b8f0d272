"""Factories do assistente e do store: conecta implementações aos protocolos."""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING

from ai.config.settings import AssistantSettings, get_assistant_settings
from ai.services.action_dispatcher import ActionDispatcher, ProviderFactory
from ai.services.networking_assistant import NetworkingAssistant
from app.bootstrap.clients import create_firestore_client, resolve_gemini_api_key
from app.infra.ai import DirectTransport, GeminiClient, ProxyTransport
from app.infra.stores import FirestoreContactStore, MemoryContactStore
from app.use_cases.assistant import ContactAssistantUseCase
from config.settings import (
    AssistantTransportSettings,
    FirestoreSettings,
    GeminiSettings,
    get_assistant_transport_settings,
    get_base_settings,
    get_firestore_settings,
    get_gemini_settings,
)
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    import httpx

    from ai.core.transport import AssistantTransportProtocol
    from app.protocols.contact_store import ContactStoreProtocol

logger = logging.getLogger(__name__)


def build_provider_factory(
    *,
    api_key_getter: Callable[[], str] = resolve_gemini_api_key,
    http_client: httpx.AsyncClient | None = None,
    settings: GeminiSettings | None = None,
) -> ProviderFactory:
    """Factory que cria um GeminiClient novo por request.

    Sem credencial (ou com falha ao lê-la), cada chamada levanta
    ConfigurationError; o processo continua servindo (o proxy responde 500
    naquele request) e a leitura é tentada de novo no próximo.
    """
    gemini_settings = settings or get_gemini_settings()

    def _factory() -> GeminiClient:
        try:
            api_key = api_key_getter()
        except Exception as exc:
            logger.error(
                "gemini_credential_unavailable",
                extra={"error_type": type(exc).__name__},
            )
            raise ConfigurationError() from exc
        return GeminiClient(
            api_key,
            settings=gemini_settings,
            http_client=http_client,
        )

    return _factory


def create_action_dispatcher(
    *,
    http_client: httpx.AsyncClient | None = None,
    provider_factory: ProviderFactory | None = None,
    settings: AssistantSettings | None = None,
) -> ActionDispatcher:
    """Cria o dispatcher do proxy."""
    return ActionDispatcher(
        provider_factory or build_provider_factory(http_client=http_client),
        settings or get_assistant_settings(),
    )


def create_assistant_transport(
    *,
    settings: AssistantTransportSettings | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> AssistantTransportProtocol:
    """Seleciona o transporte por ASSISTANT_TRANSPORT (direct|proxy)."""
    transport_settings = settings or get_assistant_transport_settings()

    if transport_settings.mode == "proxy":
        if not transport_settings.proxy_url:
            msg = "ASSISTANT_PROXY_URL não configurado mas ASSISTANT_TRANSPORT=proxy"
            raise ValueError(msg)
        logger.info("assistant_transport_created", extra={"mode": "proxy"})
        return ProxyTransport(
            transport_settings.proxy_url,
            http_client=http_client,
            timeout_seconds=transport_settings.timeout_seconds,
        )

    logger.info("assistant_transport_created", extra={"mode": "direct"})
    return DirectTransport(create_action_dispatcher(http_client=http_client))


def create_networking_assistant(
    *,
    transport: AssistantTransportProtocol | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> NetworkingAssistant:
    return NetworkingAssistant(transport or create_assistant_transport(http_client=http_client))


def create_contact_store(settings: FirestoreSettings | None = None) -> ContactStoreProtocol:
    """Cria store de contatos por CONTACT_STORE_BACKEND (memory|firestore)."""
    store_settings = settings or get_firestore_settings()

    if store_settings.backend == "firestore":
        logger.info("contact_store_created", extra={"backend": "firestore"})
        return FirestoreContactStore(create_firestore_client(), store_settings)

    if not get_base_settings().is_development:
        logger.warning(
            "memory_store_in_non_dev",
            extra={"backend": "memory", "environment": get_base_settings().environment},
        )
    logger.info("contact_store_created", extra={"backend": "memory"})
    return MemoryContactStore()


def create_contact_assistant_use_case(
    *,
    store: ContactStoreProtocol | None = None,
    assistant: NetworkingAssistant | None = None,
    http_client: httpx.AsyncClient | None = None,
) -> ContactAssistantUseCase:
    return ContactAssistantUseCase(
        store or create_contact_store(),
        assistant or create_networking_assistant(http_client=http_client),
    )
