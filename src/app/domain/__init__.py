"""Entidades de domínio persistidas pelo app (coleções por usuário)."""

from app.domain.contact import Contact, Interaction, LogEntry, Tag

__all__ = [
    "Contact",
    "Interaction",
    "LogEntry",
    "Tag",
]
