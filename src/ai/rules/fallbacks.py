"""Respostas padrão determinísticas para quando o modelo falha.

Política por ação:
- getNetworkingAdvice, getSuggestedTopics, getProfileSummary: FALLBACK
  (a UI sempre recebe algo renderizável)
- extractContactFromCard: RAISE (o usuário precisa saber que o OCR falhou,
  um contato vazio seria pior)
"""

from __future__ import annotations

from enum import StrEnum

from ai.models.actions import AssistantAction
from ai.models.networking_advice import NetworkingAdviceResult
from ai.models.profile_summary import PROFILE_SUMMARY_EMPTY_TEXT, ProfileSummaryResult
from ai.models.suggested_topics import SuggestedTopicsResult

ADVICE_FALLBACK_ANSWER = "發生錯誤，無法取得建議。"
PROFILE_SUMMARY_ERROR_TEXT = "發生錯誤：無法生成摘要，請稍後再試。"


class ErrorPolicy(StrEnum):
    """O que fazer quando a ação falha."""

    FALLBACK = "fallback"
    RAISE = "raise"


ACTION_ERROR_POLICIES: dict[AssistantAction, ErrorPolicy] = {
    AssistantAction.NETWORKING_ADVICE: ErrorPolicy.FALLBACK,
    AssistantAction.CARD_EXTRACTION: ErrorPolicy.RAISE,
    AssistantAction.SUGGESTED_TOPICS: ErrorPolicy.FALLBACK,
    AssistantAction.PROFILE_SUMMARY: ErrorPolicy.FALLBACK,
}


def policy_for(action: AssistantAction) -> ErrorPolicy:
    return ACTION_ERROR_POLICIES.get(action, ErrorPolicy.RAISE)


def _reason(reason: str | None) -> str:
    return reason or "modelo indisponível"


def fallback_networking_advice(reason: str | None = None) -> NetworkingAdviceResult:
    """Resposta de erro do chat: sem sugestões e sem contatos relacionados.

    Args:
        reason: Motivo do fallback (não exibido ao usuário)
    """
    return NetworkingAdviceResult(
        answer=ADVICE_FALLBACK_ANSWER,
        suggested_questions=[],
        relevant_contact_ids=[],
        fallback_reason=_reason(reason),
    )


def fallback_suggested_topics(reason: str | None = None) -> SuggestedTopicsResult:
    """Lista vazia de tópicos."""
    return SuggestedTopicsResult(topics=[], fallback_reason=_reason(reason))


def fallback_profile_summary(reason: str | None = None) -> ProfileSummaryResult:
    """Texto de erro localizado do resumo de perfil."""
    return ProfileSummaryResult(
        text=PROFILE_SUMMARY_ERROR_TEXT,
        fallback_reason=_reason(reason),
    )


def empty_profile_summary() -> ProfileSummaryResult:
    """Modelo respondeu sem texto: não é erro, só não há o que mostrar."""
    return ProfileSummaryResult(text=PROFILE_SUMMARY_EMPTY_TEXT)


def fallback_for_action(
    action: AssistantAction,
    reason: str | None = None,
) -> NetworkingAdviceResult | SuggestedTopicsResult | ProfileSummaryResult:
    """Resposta padrão da ação; ValueError para ações com política RAISE."""
    if action is AssistantAction.NETWORKING_ADVICE:
        return fallback_networking_advice(reason)
    if action is AssistantAction.SUGGESTED_TOPICS:
        return fallback_suggested_topics(reason)
    if action is AssistantAction.PROFILE_SUMMARY:
        return fallback_profile_summary(reason)
    raise ValueError(f"{action.value} não possui resposta padrão")
