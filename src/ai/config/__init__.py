"""Configuração de IA."""

from ai.config.settings import (
    RAW_RESPONSE_LOG_CHARS,
    ActionModelSettings,
    AssistantSettings,
    build_assistant_settings,
    get_assistant_settings,
)

__all__ = [
    "RAW_RESPONSE_LOG_CHARS",
    "ActionModelSettings",
    "AssistantSettings",
    "build_assistant_settings",
    "get_assistant_settings",
]
