"""Prompts do assistente NetworkAI.

Arquivos:
- context_builder.py: snapshot reduzido dos contatos (grounding)
- networking_advice_prompt.py: system prompt do chat
- card_extraction_prompt.py: data URL da imagem do cartão
- suggested_topics_prompt.py: tópicos para o próximo encontro
- profile_summary_prompt.py: resumo de perfil com busca
- response_schemas.py: schemas JSON exigidos do provedor

Construtores são funções puras: mesma entrada, mesmo prompt (exceto a data).
"""

from ai.prompts.card_extraction_prompt import split_data_url
from ai.prompts.context_builder import (
    build_contact_snapshot,
    build_contact_snapshots,
    serialize_knowledge_base,
    summarize_last_interaction,
)
from ai.prompts.networking_advice_prompt import (
    NETWORKING_ADVICE_SYSTEM_TEMPLATE,
    format_networking_system_prompt,
)
from ai.prompts.profile_summary_prompt import (
    PROFILE_SUMMARY_SYSTEM,
    format_profile_summary_prompt,
)
from ai.prompts.response_schemas import (
    CARD_EXTRACTION_SCHEMA,
    NETWORKING_ADVICE_SCHEMA,
    SUGGESTED_TOPICS_SCHEMA,
)
from ai.prompts.suggested_topics_prompt import (
    SUGGESTED_TOPICS_SYSTEM,
    format_interaction_history,
    format_suggested_topics_prompt,
)

__all__ = [
    "CARD_EXTRACTION_SCHEMA",
    "NETWORKING_ADVICE_SCHEMA",
    "NETWORKING_ADVICE_SYSTEM_TEMPLATE",
    "PROFILE_SUMMARY_SYSTEM",
    "SUGGESTED_TOPICS_SCHEMA",
    "SUGGESTED_TOPICS_SYSTEM",
    "build_contact_snapshot",
    "build_contact_snapshots",
    "format_interaction_history",
    "format_networking_system_prompt",
    "format_profile_summary_prompt",
    "format_suggested_topics_prompt",
    "serialize_knowledge_base",
    "split_data_url",
    "summarize_last_interaction",
]
