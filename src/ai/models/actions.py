"""Ações conhecidas pelo proxy.

O nome da ação é a única chave de roteamento; nomes fora do enum são
rejeitados antes de qualquer chamada ao provedor.
"""

from __future__ import annotations

from enum import StrEnum

from utils.errors import UnknownActionError


class AssistantAction(StrEnum):
    """As quatro ações do assistente (valores = nomes no wire)."""

    NETWORKING_ADVICE = "getNetworkingAdvice"
    CARD_EXTRACTION = "extractContactFromCard"
    SUGGESTED_TOPICS = "getSuggestedTopics"
    PROFILE_SUMMARY = "getProfileSummary"


KNOWN_ACTIONS = frozenset(action.value for action in AssistantAction)


def parse_action(name: object) -> AssistantAction:
    """Converte o campo `action` do request em AssistantAction.

    Raises:
        UnknownActionError: se o nome não for uma das quatro ações.
    """
    if isinstance(name, AssistantAction):
        return name
    if not isinstance(name, str) or name not in KNOWN_ACTIONS:
        raise UnknownActionError(name)
    return AssistantAction(name)
