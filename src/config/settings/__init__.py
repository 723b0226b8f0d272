"""Agregador de settings do NetworkAI proxy.

Re-exporta todas as settings e funções de cada módulo.
"""

from __future__ import annotations

from config.settings.ai import (
    DEFAULT_GEMINI_MODEL,
    GEMINI_API_BASE_URL,
    AssistantTransportSettings,
    GeminiSettings,
    TransportMode,
    get_assistant_transport_settings,
    get_gemini_settings,
)
from config.settings.base import (
    BaseSettings,
    Environment,
    SecretsBackend,
    get_base_settings,
)
from config.settings.infra import (
    FirestoreSettings,
    get_firestore_settings,
)

__all__ = [
    "DEFAULT_GEMINI_MODEL",
    "GEMINI_API_BASE_URL",
    "AssistantTransportSettings",
    "BaseSettings",
    "Environment",
    "FirestoreSettings",
    "GeminiSettings",
    "SecretsBackend",
    "TransportMode",
    "get_assistant_transport_settings",
    "get_base_settings",
    "get_firestore_settings",
    "get_gemini_settings",
]
