"""Configurações do assistente por ação.

Cada ação tem seu próprio modelo/temperatura/ferramentas:
- getNetworkingAdvice: tom conversacional (0.7), saída JSON
- extractContactFromCard: padrão do provedor, saída JSON estrita
- getSuggestedTopics: padrão do provedor, array JSON
- getProfileSummary: 0.5 + Google Search, texto livre
"""

from __future__ import annotations

from dataclasses import dataclass, field
from functools import lru_cache

from ai.models.actions import AssistantAction
from config.settings.ai.gemini import DEFAULT_GEMINI_MODEL, get_gemini_settings

# Quanto do texto bruto do modelo entra no log de diagnóstico
RAW_RESPONSE_LOG_CHARS = 500


@dataclass(frozen=True, slots=True)
class ActionModelSettings:
    """Configuração de modelo de uma ação.

    Atributos:
        model: Nome do modelo Gemini
        temperature: None = padrão do provedor
        enable_search: Habilita a ferramenta googleSearch
    """

    model: str = DEFAULT_GEMINI_MODEL
    temperature: float | None = None
    enable_search: bool = False


def _default_action_models(model: str) -> dict[AssistantAction, ActionModelSettings]:
    return {
        AssistantAction.NETWORKING_ADVICE: ActionModelSettings(model=model, temperature=0.7),
        AssistantAction.CARD_EXTRACTION: ActionModelSettings(model=model),
        AssistantAction.SUGGESTED_TOPICS: ActionModelSettings(model=model),
        AssistantAction.PROFILE_SUMMARY: ActionModelSettings(
            model=model,
            temperature=0.5,
            enable_search=True,
        ),
    }


@dataclass(frozen=True, slots=True)
class AssistantSettings:
    """Configurações consolidadas do assistente."""

    actions: dict[AssistantAction, ActionModelSettings] = field(
        default_factory=lambda: _default_action_models(DEFAULT_GEMINI_MODEL)
    )
    raw_response_log_chars: int = RAW_RESPONSE_LOG_CHARS

    def for_action(self, action: AssistantAction) -> ActionModelSettings:
        """Retorna a configuração da ação (padrão se ausente)."""
        return self.actions.get(action, ActionModelSettings())


def build_assistant_settings(model: str | None = None) -> AssistantSettings:
    """Cria settings com o mesmo modelo para as quatro ações."""
    return AssistantSettings(actions=_default_action_models(model or DEFAULT_GEMINI_MODEL))


@lru_cache(maxsize=1)
def get_assistant_settings() -> AssistantSettings:
    """Retorna settings cacheadas (modelo de GEMINI_MODEL)."""
    return build_assistant_settings(get_gemini_settings().model)
