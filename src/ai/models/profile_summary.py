"""Models para ProfileSummary (texto livre, sem JSON)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

# Texto exibido quando o modelo responde sem conteúdo.
PROFILE_SUMMARY_EMPTY_TEXT = "無法生成摘要。"


class ProfileSummaryRequest(BaseModel):
    """Payload de getProfileSummary."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    prompt: str = Field(min_length=1)
    system_instruction: str | None = Field(default=None, alias="systemInstruction")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class ProfileSummaryResult(BaseModel):
    """Resumo em tópicos, já com o texto padrão quando vazio."""

    model_config = ConfigDict(extra="ignore")

    text: str
    fallback_reason: str | None = Field(default=None, exclude=True)

    @property
    def is_fallback(self) -> bool:
        return self.fallback_reason is not None

    @property
    def is_empty(self) -> bool:
        """Placeholder de resposta vazia; não deve ir para as notas."""
        return self.text.strip() in ("", PROFILE_SUMMARY_EMPTY_TEXT)

    def to_wire(self) -> str:
        return self.text
