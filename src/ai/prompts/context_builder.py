"""Construção do snapshot de contatos enviado ao modelo.

Somente id, nome, cargo, empresa, tags, notas e o resumo da interação mais
recente. Telefone, email, fotos e redes sociais nunca saem daqui.
"""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

from ai.models.contact_snapshot import NO_INTERACTION, ContactSnapshot

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.contact import Contact


def summarize_last_interaction(contact: Contact) -> str:
    """`"<date> (<title>)"` da interação mais recente ou "None"."""
    latest = contact.most_recent_interaction
    if latest is None:
        return NO_INTERACTION
    return f"{latest.date} ({latest.title})"


def build_contact_snapshot(contact: Contact) -> ContactSnapshot:
    return ContactSnapshot(
        id=contact.id,
        name=contact.name,
        role=contact.role,
        company=contact.company,
        tags=list(contact.tags),
        notes=contact.notes,
        last_interaction=summarize_last_interaction(contact),
    )


def build_contact_snapshots(contacts: Iterable[Contact]) -> list[ContactSnapshot]:
    """Projeta a coleção do chamador em snapshots (mesma ordem, sem ids repetidos)."""
    snapshots: list[ContactSnapshot] = []
    seen: set[str] = set()
    for contact in contacts:
        if not contact.id or contact.id in seen:
            continue
        seen.add(contact.id)
        snapshots.append(build_contact_snapshot(contact))
    return snapshots


def serialize_knowledge_base(snapshots: Iterable[ContactSnapshot]) -> str:
    """JSON compacto (UTF-8 preservado) usado dentro do system prompt."""
    return json.dumps(
        [snapshot.to_prompt_dict() for snapshot in snapshots],
        ensure_ascii=False,
        separators=(",", ":"),
    )
