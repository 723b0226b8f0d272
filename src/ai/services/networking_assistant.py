"""NetworkingAssistant: fachada do lado cliente.

Uma interface para as quatro ações, independente do transporte (direto ou
proxy). Monta os prompts a partir dos contatos em memória, aplica a
política de erro por ação e resolve os ids devolvidos pelo modelo para os
contatos completos.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import date
from typing import TYPE_CHECKING, Any, TypeVar

from pydantic import ValidationError

from ai.models import (
    AssistantAction,
    CardExtractionRequest,
    CardExtractionResult,
    ChatTurn,
    NetworkingAdviceRequest,
    NetworkingAdviceResult,
    ProfileSummaryRequest,
    ProfileSummaryResult,
    SuggestedTopicsRequest,
    SuggestedTopicsResult,
)
from ai.prompts import (
    PROFILE_SUMMARY_SYSTEM,
    SUGGESTED_TOPICS_SYSTEM,
    format_networking_system_prompt,
    format_profile_summary_prompt,
    format_suggested_topics_prompt,
    split_data_url,
)
from ai.rules.fallbacks import ErrorPolicy, fallback_for_action, policy_for
from ai.services.response_normalizer import cross_reference_contact_ids
from config.logging import log_fallback
from utils.errors import AssistantError, InvalidPayloadError

if TYPE_CHECKING:
    from collections.abc import Callable, Sequence

    from ai.core.transport import AssistantTransportProtocol
    from app.domain.contact import Contact, Interaction

logger = logging.getLogger(__name__)

DEFAULT_CARD_MIME_TYPE = "image/jpeg"

_ResultT = TypeVar("_ResultT")


@dataclass(frozen=True, slots=True)
class AssistantReply:
    """Resposta do chat com os contatos relacionados já resolvidos."""

    advice: NetworkingAdviceResult
    contacts: tuple[Contact, ...] = field(default_factory=tuple)

    @property
    def answer(self) -> str:
        return self.advice.answer

    @property
    def suggested_questions(self) -> list[str]:
        return self.advice.suggested_questions

    @property
    def is_fallback(self) -> bool:
        return self.advice.is_fallback


def _build_request(model: type[_ResultT], data: dict[str, Any]) -> _ResultT:
    try:
        return model.model_validate(data)  # type: ignore[attr-defined]
    except ValidationError as exc:
        fields = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
        raise InvalidPayloadError(f"Invalid input: {', '.join(fields)}", fields=fields) from exc


class NetworkingAssistant:
    """Assistente de networking grounded nos contatos do usuário."""

    def __init__(
        self,
        transport: AssistantTransportProtocol,
        *,
        today: Callable[[], date] | None = None,
    ) -> None:
        self._transport = transport
        self._today = today or date.today

    async def get_networking_advice(
        self,
        history: Sequence[ChatTurn],
        user_input: str,
        contacts: Sequence[Contact],
    ) -> AssistantReply:
        """Pergunta livre sobre os contatos.

        Args:
            history: Turnos anteriores (sem a pergunta atual)
            user_input: Pergunta atual
            contacts: Coleção autoritativa do usuário

        Returns:
            AssistantReply; em falha, a resposta padrão sem contatos.

        Raises:
            InvalidPayloadError: pergunta vazia (erro do chamador).
        """
        request = _build_request(
            NetworkingAdviceRequest,
            {
                "chat_history": [turn.model_dump() for turn in history],
                "user_input": user_input,
                "system_prompt": format_networking_system_prompt(contacts, today=self._today()),
            },
        )
        advice = await self._invoke(
            AssistantAction.NETWORKING_ADVICE,
            request.to_payload(),
            NetworkingAdviceResult,
        )
        return AssistantReply(advice=advice, contacts=resolve_contacts(advice, contacts))

    async def extract_contact_from_card(
        self,
        image: str,
        mime_type: str | None = None,
    ) -> CardExtractionResult:
        """OCR do cartão de visita.

        Args:
            image: Data URL (`data:image/...;base64,...`) ou base64 puro
            mime_type: Força o mime; padrão = do data URL ou image/jpeg

        Raises:
            AssistantError: qualquer falha (política RAISE).
        """
        base64_data, url_mime = split_data_url(image)
        request = _build_request(
            CardExtractionRequest,
            {
                "base64_data": base64_data,
                "mime_type": mime_type or url_mime or DEFAULT_CARD_MIME_TYPE,
            },
        )
        return await self._invoke(
            AssistantAction.CARD_EXTRACTION,
            request.to_payload(),
            CardExtractionResult,
        )

    async def get_suggested_topics(
        self,
        contact: Contact,
        interactions: Sequence[Interaction] | None = None,
    ) -> SuggestedTopicsResult:
        """Tópicos para o próximo encontro (histórico padrão = do contato)."""
        prompt = format_suggested_topics_prompt(
            name=contact.name,
            role=contact.role,
            company=contact.company,
            notes=contact.notes,
            interactions=contact.interactions if interactions is None else interactions,
        )
        request = _build_request(
            SuggestedTopicsRequest,
            {"prompt": prompt, "system_instruction": SUGGESTED_TOPICS_SYSTEM},
        )
        return await self._invoke(
            AssistantAction.SUGGESTED_TOPICS,
            request.to_payload(),
            SuggestedTopicsResult,
        )

    async def get_profile_summary(self, profile_url: str) -> ProfileSummaryResult:
        """Resumo de perfil público (LinkedIn/Facebook) com busca na web."""
        if not profile_url or not profile_url.strip():
            raise InvalidPayloadError("Invalid input: profile_url", fields=["profile_url"])
        request = _build_request(
            ProfileSummaryRequest,
            {
                "prompt": format_profile_summary_prompt(profile_url),
                "system_instruction": PROFILE_SUMMARY_SYSTEM,
            },
        )
        return await self._invoke(
            AssistantAction.PROFILE_SUMMARY,
            request.to_payload(),
            ProfileSummaryResult,
        )

    async def _invoke(
        self,
        action: AssistantAction,
        payload: dict[str, Any],
        result_type: type[_ResultT],
    ) -> _ResultT:
        try:
            result = await self._transport.invoke(action, payload)
        except AssistantError as exc:
            if policy_for(action) is ErrorPolicy.RAISE:
                logger.warning(
                    "assistant_action_failed",
                    extra={"action": action.value, "error_type": type(exc).__name__},
                )
                raise
            reason = type(exc).__name__
            log_fallback(logger, action.value, reason=reason)
            return fallback_for_action(action, reason)  # type: ignore[return-value]

        if not isinstance(result, result_type):
            raise TypeError(
                f"transporte retornou {type(result).__name__} para {action.value}"
            )
        return result


def resolve_contacts(
    advice: NetworkingAdviceResult,
    contacts: Sequence[Contact],
) -> tuple[Contact, ...]:
    """Mapeia relevantContactIds para os contatos completos (ordem do modelo)."""
    by_id = {contact.id: contact for contact in contacts}
    ids = cross_reference_contact_ids(advice.relevant_contact_ids, by_id)
    return tuple(by_id[contact_id] for contact_id in ids)
