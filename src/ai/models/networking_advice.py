"""Models para NetworkingAdvice (chat do assistente)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ai.models.chat import ChatTurn

MAX_SUGGESTED_QUESTIONS = 3


class NetworkingAdviceRequest(BaseModel):
    """Payload de getNetworkingAdvice."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    chat_history: list[ChatTurn] = Field(default_factory=list, alias="chatHistory")
    user_input: str = Field(alias="userInput", min_length=1)
    system_prompt: str = Field(alias="systemPrompt", min_length=1)

    @field_validator("chat_history", mode="before")
    @classmethod
    def _none_history_is_empty(cls, value: Any) -> Any:
        return [] if value is None else value

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True, mode="json")


class NetworkingAdviceResult(BaseModel):
    """Resposta estruturada: answer, suggestedQuestions, relevantContactIds."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    answer: str
    suggested_questions: list[str] = Field(default_factory=list, alias="suggestedQuestions")
    relevant_contact_ids: list[str] = Field(default_factory=list, alias="relevantContactIds")
    fallback_reason: str | None = Field(default=None, exclude=True)

    @field_validator("suggested_questions", mode="before")
    @classmethod
    def _clean_questions(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if not isinstance(value, list):
            raise ValueError("suggestedQuestions deve ser lista")
        questions = [item.strip() for item in value if isinstance(item, str) and item.strip()]
        return questions[:MAX_SUGGESTED_QUESTIONS]

    @field_validator("relevant_contact_ids", mode="before")
    @classmethod
    def _clean_ids(cls, value: Any) -> list[str]:
        if value is None:
            return []
        if not isinstance(value, list):
            raise ValueError("relevantContactIds deve ser lista")
        ids: list[str] = []
        for item in value:
            if isinstance(item, (str, int)) and not isinstance(item, bool):
                contact_id = str(item).strip()
                if contact_id and contact_id not in ids:
                    ids.append(contact_id)
        return ids

    @property
    def is_fallback(self) -> bool:
        return self.fallback_reason is not None

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)
