"""Exceções tipadas do assistente e do proxy.

Cada exceção carrega o status HTTP que o proxy devolve ao cliente e uma
mensagem pública (segura para expor: sem stack trace, sem payload).
"""

from __future__ import annotations


class AssistantError(RuntimeError):
    """Base para falhas do assistente/proxy."""

    status_code: int = 500
    default_message: str = "Gemini API call failed"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.default_message)

    @property
    def public_message(self) -> str:
        """Mensagem exposta no corpo `{error}`."""
        return str(self)


class ConfigurationError(AssistantError):
    """Credencial do provedor ausente ou inválida."""

    status_code = 500
    default_message = "The Gemini API Key is not configured."


class TransportError(AssistantError):
    """Falha de rede ao alcançar o proxy ou o provedor."""

    status_code = 500
    default_message = "Network error while contacting the AI service"
    timeout_message = "Timed out waiting for the AI service"


class UnknownActionError(AssistantError):
    """Ação fora do conjunto conhecido (bug do chamador)."""

    status_code = 400
    default_message = "Unknown action"

    def __init__(self, action: object = None) -> None:
        super().__init__(self.default_message)
        self.action = action


class InvalidPayloadError(AssistantError):
    """Corpo ou payload sem campos obrigatórios para a ação."""

    status_code = 400
    default_message = "Invalid payload"

    def __init__(self, message: str | None = None, *, fields: list[str] | None = None) -> None:
        super().__init__(message)
        self.fields = fields or []


class ProviderError(AssistantError):
    """Chamada ao modelo falhou ou retornou status de erro."""

    status_code = 500

    def __init__(self, message: str | None = None, *, provider_status: int | None = None) -> None:
        super().__init__(message)
        self.provider_status = provider_status


class ParseError(AssistantError):
    """Texto do modelo não é JSON válido (ou não tem o formato esperado)."""

    status_code = 500
    default_message = "Invalid JSON response from AI model"

    def __init__(self, message: str | None = None, *, raw_text: str = "") -> None:
        super().__init__(message)
        self.raw_text = raw_text
