"""Agregador de settings de infraestrutura."""

from __future__ import annotations

from config.settings.infra.firestore import (
    FirestoreSettings,
    get_firestore_settings,
)

__all__ = [
    "FirestoreSettings",
    "get_firestore_settings",
]
