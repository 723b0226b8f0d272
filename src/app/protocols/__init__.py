"""Protocolos e contratos do core da aplicação."""

from .contact_store import ContactStoreProtocol

__all__ = [
    "ContactStoreProtocol",
]
