"""Agregador de settings base."""

from __future__ import annotations

from config.settings.base.core import (
    BaseSettings,
    Environment,
    SecretsBackend,
    get_base_settings,
)

__all__ = [
    "BaseSettings",
    "Environment",
    "SecretsBackend",
    "get_base_settings",
]
