"""Stores de contatos: Firestore (produção) e memória (dev/testes)."""

from app.infra.stores.firestore_contact_store import FirestoreContactStore
from app.infra.stores.memory_contact_store import MemoryContactStore

__all__ = [
    "FirestoreContactStore",
    "MemoryContactStore",
]
