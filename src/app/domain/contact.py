"""Contact, Interaction, Tag e LogEntry: documentos por usuário no Firestore.

Nomes no wire/Firestore em camelCase (contrato do app web); atributos
Python em snake_case via alias. PII (telefone, email) fica apenas no
modelo persistido, nunca em logs nem no snapshot enviado ao modelo.
"""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field

LogEntryType = Literal["create", "update", "photo", "interaction", "delete"]

_WIRE_CONFIG = ConfigDict(extra="ignore", populate_by_name=True)


class Interaction(BaseModel):
    """Registro de um encontro, ligação ou email com o contato."""

    model_config = _WIRE_CONFIG

    id: str = ""
    type: str = "meeting"
    title: str = ""
    description: str = ""
    date: str = ""
    time_label: str = Field(default="", alias="timeLabel")

    def as_history_line(self) -> str:
        """Formato usado nos prompts: `- date [type] title: description`."""
        return f"- {self.date} [{self.type}] {self.title}: {self.description}"


class Contact(BaseModel):
    """Contato do usuário (users/{uid}/contacts/{id})."""

    model_config = _WIRE_CONFIG

    id: str
    name: str = ""
    role: str = ""
    company: str | None = None
    avatar: str | None = None
    initials: str | None = None
    tags: list[str] = Field(default_factory=list)
    last_interaction: str | None = Field(default=None, alias="lastInteraction")
    phone: str | None = None
    email: str | None = None
    notes: str | None = None
    linkedin: str | None = None
    facebook: str | None = None
    birthday: str | None = None
    twitter: str | None = None
    interactions: list[Interaction] = Field(default_factory=list)
    photos: list[str] = Field(default_factory=list)
    action_icon: str | None = Field(default=None, alias="actionIcon")

    @property
    def most_recent_interaction(self) -> Interaction | None:
        # O app mantém interações da mais nova para a mais antiga
        return self.interactions[0] if self.interactions else None

    def to_firestore_dict(self) -> dict[str, Any]:
        """Serializa para o documento Firestore (sem o id, que é a chave)."""
        return self.model_dump(by_alias=True, exclude={"id"}, exclude_none=True)

    @classmethod
    def from_firestore_dict(cls, contact_id: str, data: dict[str, Any]) -> Contact:
        """Reconstrói Contact a partir de doc.id + doc.to_dict()."""
        return cls.model_validate({**data, "id": contact_id})


class Tag(BaseModel):
    """Tag definida pelo usuário (users/{uid}/tags/{id})."""

    model_config = _WIRE_CONFIG

    id: str
    name: str
    icon: str | None = None
    created_at: datetime | None = Field(default=None, alias="createdAt")


class LogEntry(BaseModel):
    """Entrada do histórico de ações (users/{uid}/logs/{id})."""

    model_config = _WIRE_CONFIG

    id: str = ""
    action: str
    contact_name: str = Field(alias="contactName")
    timestamp: str = Field(default_factory=lambda: datetime.now(UTC).isoformat())
    details: str = ""
    type: LogEntryType = "interaction"

    def to_firestore_dict(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude={"id"})
