"""Firestore Contact Store (users/{uid}/contacts e users/{uid}/logs)."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING, Any

from app.domain.contact import Contact, LogEntry
from app.protocols.contact_store import ContactStoreProtocol
from config.settings.infra.firestore import FirestoreSettings

if TYPE_CHECKING:
    from google.cloud.firestore import Client as FirestoreClient

logger = logging.getLogger(__name__)


class FirestoreContactStore(ContactStoreProtocol):
    """Store de contatos usando o client síncrono do Firestore em thread."""

    def __init__(
        self,
        firestore_client: FirestoreClient,
        settings: FirestoreSettings | None = None,
    ) -> None:
        self._db = firestore_client
        self._settings = settings or FirestoreSettings()

    def _user_doc(self, user_id: str) -> Any:
        return self._db.collection(self._settings.collection_users).document(user_id)

    def _contacts(self, user_id: str) -> Any:
        return self._user_doc(user_id).collection(self._settings.collection_contacts)

    def _logs(self, user_id: str) -> Any:
        return self._user_doc(user_id).collection(self._settings.collection_logs)

    async def list_contacts(self, user_id: str) -> list[Contact]:
        return await asyncio.to_thread(self._list_sync, user_id)

    def _list_sync(self, user_id: str) -> list[Contact]:
        try:
            docs = self._contacts(user_id).order_by("name").stream()
            return [Contact.from_firestore_dict(doc.id, doc.to_dict() or {}) for doc in docs]
        except Exception as exc:
            logger.error(
                "contact_list_failed",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            raise

    async def get_contact(self, user_id: str, contact_id: str) -> Contact | None:
        return await asyncio.to_thread(self._get_sync, user_id, contact_id)

    def _get_sync(self, user_id: str, contact_id: str) -> Contact | None:
        try:
            doc = self._contacts(user_id).document(contact_id).get()
        except Exception as exc:
            logger.error(
                "contact_get_failed",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            raise
        if not doc.exists:
            return None
        return Contact.from_firestore_dict(doc.id, doc.to_dict() or {})

    async def update_contact(self, user_id: str, contact_id: str, updates: dict[str, Any]) -> None:
        await asyncio.to_thread(self._update_sync, user_id, contact_id, updates)

    def _update_sync(self, user_id: str, contact_id: str, updates: dict[str, Any]) -> None:
        try:
            self._contacts(user_id).document(contact_id).update(updates)
            logger.debug("contact_updated", extra={"fields": sorted(updates)})
        except Exception as exc:
            logger.error(
                "contact_update_failed",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            raise

    async def add_log(self, user_id: str, entry: LogEntry) -> str:
        return await asyncio.to_thread(self._add_log_sync, user_id, entry)

    def _add_log_sync(self, user_id: str, entry: LogEntry) -> str:
        try:
            _, doc_ref = self._logs(user_id).add(entry.to_firestore_dict())
            return doc_ref.id
        except Exception as exc:
            logger.error(
                "contact_log_add_failed",
                extra={"error": str(exc), "error_type": type(exc).__name__},
            )
            raise
