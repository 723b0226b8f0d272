"""Store de contatos em memória (desenvolvimento e testes)."""

from __future__ import annotations

import threading
import uuid
from typing import Any

from app.domain.contact import Contact, LogEntry
from app.protocols.contact_store import ContactStoreProtocol


class MemoryContactStore(ContactStoreProtocol):
    """Contatos e logs por usuário, com lock simples."""

    def __init__(self, contacts: dict[str, list[Contact]] | None = None) -> None:
        self._contacts: dict[str, dict[str, Contact]] = {
            user_id: {contact.id: contact for contact in items}
            for user_id, items in (contacts or {}).items()
        }
        self._logs: dict[str, list[LogEntry]] = {}
        self._lock = threading.Lock()

    async def list_contacts(self, user_id: str) -> list[Contact]:
        with self._lock:
            contacts = list(self._contacts.get(user_id, {}).values())
        return sorted(contacts, key=lambda contact: contact.name)

    async def get_contact(self, user_id: str, contact_id: str) -> Contact | None:
        with self._lock:
            return self._contacts.get(user_id, {}).get(contact_id)

    async def update_contact(self, user_id: str, contact_id: str, updates: dict[str, Any]) -> None:
        with self._lock:
            existing = self._contacts.get(user_id, {}).get(contact_id)
            if existing is None:
                raise KeyError(f"contato não encontrado: {contact_id}")
            data = existing.model_dump(by_alias=True)
            data.update(updates)
            self._contacts[user_id][contact_id] = Contact.model_validate(data)

    async def add_log(self, user_id: str, entry: LogEntry) -> str:
        log_id = entry.id or uuid.uuid4().hex
        with self._lock:
            self._logs.setdefault(user_id, []).append(entry.model_copy(update={"id": log_id}))
        return log_id

    def get_logs(self, user_id: str) -> list[LogEntry]:
        """Logs registrados (para inspeção em testes)."""
        with self._lock:
            return list(self._logs.get(user_id, []))
