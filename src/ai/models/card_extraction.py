"""Models para CardExtraction (OCR de cartão de visita)."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

CARD_FIELDS = ("name", "role", "company", "phone", "email")

DEFAULT_CARD_PROMPT = (
    "Extract contact information from this business card. Return a JSON object with: "
    "name, role/title, company name, phone number, and email address."
)


class CardExtractionRequest(BaseModel):
    """Payload de extractContactFromCard (imagem base64 sem prefixo data:)."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    base64_data: str = Field(alias="base64Data", min_length=1)
    mime_type: str = Field(alias="mimeType", pattern=r"^image/[\w.+-]+$")
    prompt: str = DEFAULT_CARD_PROMPT

    @field_validator("prompt", mode="before")
    @classmethod
    def _default_prompt(cls, value: Any) -> Any:
        if value is None or (isinstance(value, str) and not value.strip()):
            return DEFAULT_CARD_PROMPT
        return value

    def to_payload(self) -> dict[str, Any]:
        return self.model_dump(by_alias=True)


class CardExtractionResult(BaseModel):
    """Campos extraídos; string vazia = campo não legível no cartão."""

    model_config = ConfigDict(extra="ignore")

    name: str = ""
    role: str = ""
    company: str = ""
    phone: str = ""
    email: str = ""

    @field_validator(*CARD_FIELDS, mode="before")
    @classmethod
    def _coerce_text(cls, value: Any) -> str:
        if value is None:
            return ""
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        if not isinstance(value, str):
            raise ValueError("campo do cartão deve ser string")
        return value.strip()

    @property
    def is_empty(self) -> bool:
        """True quando o modelo não conseguiu ler nenhum campo."""
        return not any(getattr(self, field) for field in CARD_FIELDS)

    def filled_fields(self) -> dict[str, str]:
        return {field: getattr(self, field) for field in CARD_FIELDS if getattr(self, field)}

    def to_wire(self) -> dict[str, Any]:
        return self.model_dump()
