"""Protocolo do provedor generativo e tipos do request.

O contrato espelha generateContent: modelo, contents ordenados
({role, parts}) e config opcional (systemInstruction, responseMimeType,
responseSchema, temperature, tools). Retorna apenas o texto gerado.
A implementação concreta (HTTP) está em app/infra/ai/.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Protocol


@dataclass(frozen=True, slots=True)
class Part:
    """Parte de um conteúdo: texto ou imagem inline (base64)."""

    text: str | None = None
    inline_data: str | None = None
    mime_type: str | None = None

    @classmethod
    def from_text(cls, text: str) -> Part:
        return cls(text=text)

    @classmethod
    def from_inline_image(cls, base64_data: str, mime_type: str) -> Part:
        return cls(inline_data=base64_data, mime_type=mime_type)

    def to_wire(self) -> dict[str, Any]:
        if self.inline_data is not None:
            return {"inlineData": {"mimeType": self.mime_type, "data": self.inline_data}}
        return {"text": self.text or ""}


@dataclass(frozen=True, slots=True)
class Content:
    """Turno enviado ao modelo."""

    role: str
    parts: tuple[Part, ...]

    @classmethod
    def user_text(cls, text: str) -> Content:
        return cls(role="user", parts=(Part.from_text(text),))

    def to_wire(self) -> dict[str, Any]:
        return {"role": self.role, "parts": [part.to_wire() for part in self.parts]}


@dataclass(frozen=True, slots=True)
class GenerationConfig:
    """Configuração por ação.

    Attributes:
        system_instruction: Instrução de sistema (regras de grounding)
        response_mime_type: "application/json" para saída estruturada
        response_schema: Schema OpenAPI exigido do modelo
        temperature: None = padrão do provedor
        tools: Ferramentas do provedor (ex: [{"googleSearch": {}}])
    """

    system_instruction: str | None = None
    response_mime_type: str | None = None
    response_schema: dict[str, Any] | None = None
    temperature: float | None = None
    tools: tuple[dict[str, Any], ...] = field(default_factory=tuple)


class GenerativeProviderProtocol(Protocol):
    """Contrato para clientes do modelo generativo."""

    async def generate_content(
        self,
        *,
        model: str,
        contents: list[Content],
        config: GenerationConfig,
        action: str = "",
    ) -> str:
        """Executa a geração e retorna o texto bruto.

        Raises:
            ProviderError: status de erro/resposta bloqueada do provedor.
            TransportError: falha de rede ou timeout.
        """
        ...
