"""ContactSnapshot: projeção reduzida do contato usada como base de conhecimento."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

NO_INTERACTION = "None"


class ContactSnapshot(BaseModel):
    """Somente os campos necessários para grounding (sem telefone/email)."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True, frozen=True)

    id: str
    name: str = ""
    role: str = ""
    company: str | None = None
    tags: list[str] = Field(default_factory=list)
    notes: str | None = None
    last_interaction: str = Field(default=NO_INTERACTION, alias="lastInteraction")

    def to_prompt_dict(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)
