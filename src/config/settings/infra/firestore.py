"""Settings do Firestore.

Layout por usuário: users/{uid}/contacts, users/{uid}/logs, users/{uid}/tags.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from functools import lru_cache
from typing import Literal

ContactStoreBackend = Literal["memory", "firestore"]


@dataclass(frozen=True)
class FirestoreSettings:
    """Configurações do Firestore.

    Attributes:
        backend: memory (dev/testes) | firestore
        project_id: ID do projeto GCP (usa GCP_PROJECT se não definido)
        collection_users: Collection raiz por usuário
        collection_contacts: Subcollection de contatos
        collection_logs: Subcollection do histórico de ações
    """

    backend: ContactStoreBackend = "memory"
    project_id: str = ""
    collection_users: str = "users"
    collection_contacts: str = "contacts"
    collection_logs: str = "logs"

    def validate(self, gcp_project: str) -> list[str]:
        """Valida configurações do Firestore.

        Args:
            gcp_project: Projeto GCP padrão para fallback.

        Returns:
            Lista de erros de validação.
        """
        errors: list[str] = []
        if self.backend != "firestore":
            return errors

        effective_project = self.project_id or gcp_project
        if not effective_project:
            errors.append(
                "FIRESTORE_PROJECT_ID ou GCP_PROJECT deve estar configurado"
            )

        return errors


def _load_firestore_from_env() -> FirestoreSettings:
    """Carrega FirestoreSettings de variáveis de ambiente."""
    backend = os.getenv("CONTACT_STORE_BACKEND", "memory").strip().lower()
    return FirestoreSettings(
        backend="firestore" if backend == "firestore" else "memory",
        project_id=os.getenv("FIRESTORE_PROJECT_ID", ""),
        collection_users=os.getenv("FIRESTORE_COLLECTION_USERS", "users"),
        collection_contacts=os.getenv("FIRESTORE_COLLECTION_CONTACTS", "contacts"),
        collection_logs=os.getenv("FIRESTORE_COLLECTION_LOGS", "logs"),
    )


@lru_cache(maxsize=1)
def get_firestore_settings() -> FirestoreSettings:
    """Retorna instância cacheada de FirestoreSettings."""
    return _load_firestore_from_env()
