"""Models para SuggestedTopics (quebra-gelo para o próximo encontro)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

class SuggestedTopicsRequest(BaseModel):
    """Payload de getSuggestedTopics."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    prompt: str = Field(min_length=1)
    system_instruction: str | None = Field(default=None, alias="systemInstruction")

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, exclude_none=True)


class SuggestedTopic(BaseModel):
    """Um tópico e o motivo da sugestão."""

    model_config = ConfigDict(extra="ignore")

    topic: str = Field(min_length=1)
    reason: str = ""


class SuggestedTopicsResult(BaseModel):
    """Lista de tópicos (alvo 3, mas 0..N é aceito)."""

    model_config = ConfigDict(extra="ignore")

    topics: list[SuggestedTopic] = Field(default_factory=list)
    fallback_reason: str | None = Field(default=None, exclude=True)

    @property
    def is_fallback(self) -> bool:
        return self.fallback_reason is not None

    def to_wire(self) -> list[dict[str, Any]]:
        return [topic.model_dump() for topic in self.topics]
