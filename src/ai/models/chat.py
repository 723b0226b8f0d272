"""ChatTurn: turno da conversa enviado a cada request (sem memória no servidor)."""

from __future__ import annotations

from pydantic import AliasChoices, BaseModel, ConfigDict, Field

USER_ROLE = "user"
MODEL_ROLE = "model"


class ChatTurn(BaseModel):
    """Turno do histórico: role user|assistant|model, texto e horário."""

    model_config = ConfigDict(extra="ignore", populate_by_name=True)

    role: str = USER_ROLE
    text: str = ""
    timestamp: str | None = Field(
        default=None,
        validation_alias=AliasChoices("timestamp", "time"),
    )

    @property
    def provider_role(self) -> str:
        """Papel no provedor: "user" continua user, o resto vira model."""
        return USER_ROLE if self.role == USER_ROLE else MODEL_ROLE
