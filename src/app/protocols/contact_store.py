"""Protocolo para persistência dos contatos do usuário."""

from __future__ import annotations

from typing import Any, Protocol

from app.domain.contact import Contact, LogEntry


class ContactStoreProtocol(Protocol):
    """Contrato para store de contatos (users/{uid}/contacts + logs)."""

    async def list_contacts(self, user_id: str) -> list[Contact]:
        """Lista os contatos do usuário ordenados por nome."""
        ...

    async def get_contact(self, user_id: str, contact_id: str) -> Contact | None:
        """Busca um contato (None se não existir)."""
        ...

    async def update_contact(self, user_id: str, contact_id: str, updates: dict[str, Any]) -> None:
        """Atualiza campos do contato (nomes camelCase do documento)."""
        ...

    async def add_log(self, user_id: str, entry: LogEntry) -> str:
        """Registra entrada no histórico de ações e retorna o id gerado."""
        ...
