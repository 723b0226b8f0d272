"""Serviços do módulo AI.

- ActionDispatcher: roteador do proxy (valida, chama o provedor, normaliza)
- NetworkingAssistant: fachada do cliente com transporte plugável
- response_normalizer: parse/validação das respostas por ação
"""

from ai.services.action_dispatcher import (
    ActionDispatcher,
    ProviderFactory,
    build_contents,
    build_generation_config,
    validate_payload,
)
from ai.services.networking_assistant import (
    AssistantReply,
    NetworkingAssistant,
    resolve_contacts,
)
from ai.services.response_normalizer import (
    cross_reference_contact_ids,
    normalize_card_extraction,
    normalize_networking_advice,
    normalize_profile_summary,
    normalize_suggested_topics,
)

__all__ = [
    "ActionDispatcher",
    "AssistantReply",
    "NetworkingAssistant",
    "ProviderFactory",
    "build_contents",
    "build_generation_config",
    "cross_reference_contact_ids",
    "normalize_card_extraction",
    "normalize_networking_advice",
    "normalize_profile_summary",
    "normalize_suggested_topics",
    "resolve_contacts",
    "validate_payload",
]
