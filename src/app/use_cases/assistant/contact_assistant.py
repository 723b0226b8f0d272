"""Use case dos fluxos do app que usam o assistente.

Compõe o store de contatos com o NetworkingAssistant:
- ask: chat grounded nos contatos do usuário
- suggest_topics: tópicos para o próximo encontro + entrada no histórico
- scan_business_card: OCR mesclado num rascunho de contato
- append_profile_summary: resumo de perfil anexado às notas

A persistência acontece depois do retorno do assistente e nunca para
resultados degradados (fallback).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from app.domain.contact import Contact, LogEntry
from app.services.card_merge import merge_card_into_contact

if TYPE_CHECKING:
    from collections.abc import Sequence

    from ai.models import CardExtractionResult, ChatTurn, ProfileSummaryResult, SuggestedTopicsResult
    from ai.services.networking_assistant import AssistantReply, NetworkingAssistant
    from app.protocols.contact_store import ContactStoreProtocol

logger = logging.getLogger(__name__)

TOPICS_LOG_ACTION = "AI 話題生成"
TOPICS_LOG_DETAILS = "為下次見面生成了 AI 破冰建議。"
SUMMARY_SEPARATOR = "\n\n"


class ContactNotFoundError(LookupError):
    """Contato inexistente para o usuário."""

    def __init__(self, contact_id: str) -> None:
        super().__init__(f"Contact not found: {contact_id}")
        self.contact_id = contact_id


@dataclass(frozen=True, slots=True)
class CardScanResult:
    """Resultado do OCR já aplicado no rascunho."""

    extraction: CardExtractionResult
    contact: Contact
    updated_fields: list[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class ProfileSummaryOutcome:
    """Resumo gerado e se as notas do contato foram atualizadas."""

    summary: ProfileSummaryResult
    saved: bool


class ContactAssistantUseCase:
    """Orquestra store de contatos e assistente."""

    def __init__(
        self,
        store: ContactStoreProtocol,
        assistant: NetworkingAssistant,
    ) -> None:
        self._store = store
        self._assistant = assistant

    async def ask(
        self,
        user_id: str,
        history: Sequence[ChatTurn],
        question: str,
    ) -> AssistantReply:
        """Pergunta sobre os contatos do usuário (fluxo do chat)."""
        contacts = await self._store.list_contacts(user_id)
        reply = await self._assistant.get_networking_advice(history, question, contacts)
        logger.info(
            "assistant_question_answered",
            extra={
                "contacts_count": len(contacts),
                "related_count": len(reply.contacts),
                "fallback_used": reply.is_fallback,
            },
        )
        return reply

    async def suggest_topics(self, user_id: str, contact_id: str) -> SuggestedTopicsResult:
        """Tópicos para o próximo encontro com o contato.

        Registra "AI 話題生成" no histórico quando o modelo respondeu.

        Raises:
            ContactNotFoundError: contato inexistente.
        """
        contact = await self._require_contact(user_id, contact_id)
        result = await self._assistant.get_suggested_topics(contact)
        if not result.is_fallback:
            await self._store.add_log(
                user_id,
                LogEntry(
                    action=TOPICS_LOG_ACTION,
                    contact_name=contact.name,
                    details=TOPICS_LOG_DETAILS,
                    type="interaction",
                ),
            )
        return result

    async def scan_business_card(
        self,
        image: str,
        mime_type: str | None = None,
        contact: Contact | None = None,
    ) -> CardScanResult:
        """OCR do cartão aplicado no contato (ou num rascunho novo).

        Raises:
            AssistantError: falha do OCR (a tela mostra o erro).
        """
        extraction = await self._assistant.extract_contact_from_card(image, mime_type)
        merged, updated_fields = merge_card_into_contact(extraction, contact)
        return CardScanResult(extraction=extraction, contact=merged, updated_fields=updated_fields)

    async def append_profile_summary(
        self,
        user_id: str,
        contact_id: str,
        profile_url: str,
    ) -> ProfileSummaryOutcome:
        """Gera resumo do perfil e anexa às notas do contato.

        Fallback ou resumo vazio não alteram as notas (saved=False).

        Raises:
            ContactNotFoundError: contato inexistente.
        """
        contact = await self._require_contact(user_id, contact_id)
        summary = await self._assistant.get_profile_summary(profile_url)
        if summary.is_fallback or summary.is_empty:
            return ProfileSummaryOutcome(summary=summary, saved=False)

        notes = append_to_notes(contact.notes, summary.text)
        await self._store.update_contact(user_id, contact_id, {"notes": notes})
        logger.info("profile_summary_saved", extra={"summary_chars": len(summary.text)})
        return ProfileSummaryOutcome(summary=summary, saved=True)

    async def _require_contact(self, user_id: str, contact_id: str) -> Contact:
        contact = await self._store.get_contact(user_id, contact_id)
        if contact is None:
            raise ContactNotFoundError(contact_id)
        return contact


def append_to_notes(notes: str | None, text: str) -> str:
    """Anexa texto às notas existentes (linha em branco como separador)."""
    current = (notes or "").rstrip()
    if not current:
        return text
    return f"{current}{SUMMARY_SEPARATOR}{text}"
