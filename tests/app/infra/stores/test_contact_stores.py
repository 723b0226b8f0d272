"""Testes dos stores de contatos (memória e Firestore com mock)."""

from __future__ import annotations

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from app.domain.contact import Contact, LogEntry
from app.infra.stores import FirestoreContactStore, MemoryContactStore


def _doc(doc_id: str, data: dict[str, object], exists: bool = True) -> SimpleNamespace:
    return SimpleNamespace(id=doc_id, exists=exists, to_dict=lambda: data)


class TestMemoryContactStore:
    @pytest.mark.asyncio
    async def test_list_sorted_by_name_and_isolated_per_user(self) -> None:
        store = MemoryContactStore(
            {
                "u1": [Contact(id="b", name="Bruno"), Contact(id="a", name="Ana")],
                "u2": [Contact(id="c", name="Carla")],
            }
        )

        contacts = await store.list_contacts("u1")

        assert [contact.id for contact in contacts] == ["a", "b"]
        assert await store.list_contacts("nobody") == []

    @pytest.mark.asyncio
    async def test_update_contact(self) -> None:
        store = MemoryContactStore({"u1": [Contact(id="a", name="Ana", notes="old")]})

        await store.update_contact("u1", "a", {"notes": "new"})

        contact = await store.get_contact("u1", "a")
        assert contact is not None
        assert contact.notes == "new"
        assert contact.name == "Ana"

    @pytest.mark.asyncio
    async def test_update_unknown_contact_raises(self) -> None:
        store = MemoryContactStore()

        with pytest.raises(KeyError):
            await store.update_contact("u1", "missing", {"notes": "x"})

    @pytest.mark.asyncio
    async def test_add_log_assigns_id(self) -> None:
        store = MemoryContactStore()

        log_id = await store.add_log("u1", LogEntry(action="AI 話題生成", contact_name="Ana"))

        logs = store.get_logs("u1")
        assert log_id
        assert [log.id for log in logs] == [log_id]
        assert logs[0].contact_name == "Ana"


class TestFirestoreContactStore:
    @pytest.mark.asyncio
    async def test_list_contacts_reads_user_subcollection(self) -> None:
        db = MagicMock()
        contacts_ref = db.collection.return_value.document.return_value.collection.return_value
        contacts_ref.order_by.return_value.stream.return_value = [
            _doc("c1", {"name": "王小明", "tags": ["VIP"], "lastInteraction": "2024-05-01"}),
        ]
        store = FirestoreContactStore(db)

        contacts = await store.list_contacts("u1")

        db.collection.assert_called_with("users")
        db.collection.return_value.document.assert_called_with("u1")
        db.collection.return_value.document.return_value.collection.assert_called_with("contacts")
        contacts_ref.order_by.assert_called_with("name")
        assert contacts[0].id == "c1"
        assert contacts[0].last_interaction == "2024-05-01"

    @pytest.mark.asyncio
    async def test_get_missing_contact_returns_none(self) -> None:
        db = MagicMock()
        contacts_ref = db.collection.return_value.document.return_value.collection.return_value
        contacts_ref.document.return_value.get.return_value = _doc("x", {}, exists=False)
        store = FirestoreContactStore(db)

        assert await store.get_contact("u1", "x") is None

    @pytest.mark.asyncio
    async def test_update_contact_passes_updates(self) -> None:
        db = MagicMock()
        contacts_ref = db.collection.return_value.document.return_value.collection.return_value
        store = FirestoreContactStore(db)

        await store.update_contact("u1", "c1", {"notes": "resumo"})

        contacts_ref.document.assert_called_with("c1")
        contacts_ref.document.return_value.update.assert_called_once_with({"notes": "resumo"})

    @pytest.mark.asyncio
    async def test_add_log_returns_document_id(self) -> None:
        db = MagicMock()
        logs_ref = db.collection.return_value.document.return_value.collection.return_value
        logs_ref.add.return_value = (None, SimpleNamespace(id="log-1"))
        store = FirestoreContactStore(db)

        log_id = await store.add_log("u1", LogEntry(action="AI 話題生成", contact_name="王小明"))

        assert log_id == "log-1"
        written = logs_ref.add.call_args.args[0]
        assert written["contactName"] == "王小明"
        assert "id" not in written

    @pytest.mark.asyncio
    async def test_errors_are_propagated(self) -> None:
        db = MagicMock()
        contacts_ref = db.collection.return_value.document.return_value.collection.return_value
        contacts_ref.order_by.side_effect = RuntimeError("firestore down")
        store = FirestoreContactStore(db)

        with pytest.raises(RuntimeError):
            await store.list_contacts("u1")
