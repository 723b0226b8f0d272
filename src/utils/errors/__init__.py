"""Exceções utilitárias compartilhadas."""

from .exceptions import (
    AssistantError,
    ConfigurationError,
    InvalidPayloadError,
    ParseError,
    ProviderError,
    TransportError,
    UnknownActionError,
)

__all__ = [
    "AssistantError",
    "ConfigurationError",
    "InvalidPayloadError",
    "ParseError",
    "ProviderError",
    "TransportError",
    "UnknownActionError",
]
