"""Merge determinístico do OCR de cartão de visita num rascunho de contato."""

from __future__ import annotations

from typing import TYPE_CHECKING

from app.domain.contact import Contact

if TYPE_CHECKING:
    from ai.models.card_extraction import CardExtractionResult


def merge_card_into_contact(
    card: CardExtractionResult,
    contact: Contact | None = None,
) -> tuple[Contact, list[str]]:
    """Aplica os campos extraídos no contato.

    Regras:
    - Só campos que o modelo devolveu não vazios são aplicados.
    - Campo vazio no resultado mantém o valor atual do contato.
    - Sem contato, cria um rascunho (id vazio, a ser definido ao salvar).

    Returns:
        (contato atualizado, nomes dos campos alterados)
    """
    draft = contact if contact is not None else Contact(id="")
    updates = {
        field: value
        for field, value in card.filled_fields().items()
        if getattr(draft, field, None) != value
    }
    if not updates:
        return draft, []
    return draft.model_copy(update=updates), sorted(updates)
