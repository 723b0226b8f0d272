"""Modelos/DTOs do assistente.

Contratos de entrada (payload) e saída (resultado) das quatro ações.
"""

from typing import Union

from ai.models.actions import KNOWN_ACTIONS, AssistantAction, parse_action
from ai.models.card_extraction import (
    CARD_FIELDS,
    DEFAULT_CARD_PROMPT,
    CardExtractionRequest,
    CardExtractionResult,
)
from ai.models.chat import ChatTurn
from ai.models.contact_snapshot import ContactSnapshot
from ai.models.networking_advice import (
    MAX_SUGGESTED_QUESTIONS,
    NetworkingAdviceRequest,
    NetworkingAdviceResult,
)
from ai.models.profile_summary import ProfileSummaryRequest, ProfileSummaryResult
from ai.models.suggested_topics import (
    SuggestedTopic,
    SuggestedTopicsRequest,
    SuggestedTopicsResult,
)

ActionRequest = Union[
    NetworkingAdviceRequest,
    CardExtractionRequest,
    SuggestedTopicsRequest,
    ProfileSummaryRequest,
]
ActionResult = Union[
    NetworkingAdviceResult,
    CardExtractionResult,
    SuggestedTopicsResult,
    ProfileSummaryResult,
]

REQUEST_MODELS: dict[AssistantAction, type] = {
    AssistantAction.NETWORKING_ADVICE: NetworkingAdviceRequest,
    AssistantAction.CARD_EXTRACTION: CardExtractionRequest,
    AssistantAction.SUGGESTED_TOPICS: SuggestedTopicsRequest,
    AssistantAction.PROFILE_SUMMARY: ProfileSummaryRequest,
}

__all__ = [
    "CARD_FIELDS",
    "DEFAULT_CARD_PROMPT",
    "KNOWN_ACTIONS",
    "MAX_SUGGESTED_QUESTIONS",
    "REQUEST_MODELS",
    "ActionRequest",
    "ActionResult",
    "AssistantAction",
    "CardExtractionRequest",
    "CardExtractionResult",
    "ChatTurn",
    "ContactSnapshot",
    "NetworkingAdviceRequest",
    "NetworkingAdviceResult",
    "ProfileSummaryRequest",
    "ProfileSummaryResult",
    "SuggestedTopic",
    "SuggestedTopicsRequest",
    "SuggestedTopicsResult",
    "parse_action",
]
