"""Regras determinísticas para IA.

Re-exporta a política de erro por ação e as respostas padrão.
"""

from ai.rules.fallbacks import (
    ACTION_ERROR_POLICIES,
    ADVICE_FALLBACK_ANSWER,
    PROFILE_SUMMARY_EMPTY_TEXT,
    PROFILE_SUMMARY_ERROR_TEXT,
    ErrorPolicy,
    empty_profile_summary,
    fallback_for_action,
    fallback_networking_advice,
    fallback_profile_summary,
    fallback_suggested_topics,
    policy_for,
)

__all__ = [
    "ACTION_ERROR_POLICIES",
    "ADVICE_FALLBACK_ANSWER",
    "PROFILE_SUMMARY_EMPTY_TEXT",
    "PROFILE_SUMMARY_ERROR_TEXT",
    "ErrorPolicy",
    "empty_profile_summary",
    "fallback_for_action",
    "fallback_networking_advice",
    "fallback_profile_summary",
    "fallback_suggested_topics",
    "policy_for",
]
