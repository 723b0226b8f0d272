"""Testes do merge do OCR de cartão no contato."""

from __future__ import annotations

from ai.models import CardExtractionResult
from app.domain.contact import Contact
from app.services import merge_card_into_contact


def test_creates_draft_without_contact() -> None:
    card = CardExtractionResult(name="Ana", company="Acme", email="ana@acme.com")

    contact, changed = merge_card_into_contact(card)

    assert contact.id == ""
    assert contact.name == "Ana"
    assert contact.company == "Acme"
    assert changed == ["company", "email", "name"]


def test_empty_fields_keep_current_values() -> None:
    existing = Contact(id="c1", name="Ana", phone="111")
    card = CardExtractionResult(name="", phone="222")

    contact, changed = merge_card_into_contact(card, existing)

    assert contact.name == "Ana"
    assert contact.phone == "222"
    assert changed == ["phone"]
    assert existing.phone == "111"


def test_same_values_change_nothing() -> None:
    existing = Contact(id="c1", name="Ana")

    contact, changed = merge_card_into_contact(CardExtractionResult(name="Ana"), existing)

    assert contact is existing
    assert changed == []
