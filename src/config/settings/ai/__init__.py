"""Agregador de settings de AI/LLM."""

from __future__ import annotations

from config.settings.ai.assistant import (
    AssistantTransportSettings,
    TransportMode,
    get_assistant_transport_settings,
)
from config.settings.ai.gemini import (
    DEFAULT_GEMINI_MODEL,
    GEMINI_API_BASE_URL,
    GeminiSettings,
    get_gemini_settings,
)

__all__ = [
    "DEFAULT_GEMINI_MODEL",
    "GEMINI_API_BASE_URL",
    "AssistantTransportSettings",
    "GeminiSettings",
    "TransportMode",
    "get_assistant_transport_settings",
    "get_gemini_settings",
]
