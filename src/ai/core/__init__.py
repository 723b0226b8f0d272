"""Core do módulo AI.

Exporta protocolos e tipos do provedor/transporte.
As implementações com IO estão em app/infra/ai/.
"""

from ai.core.provider import Content, GenerationConfig, GenerativeProviderProtocol, Part
from ai.core.transport import AssistantTransportProtocol

__all__ = [
    "AssistantTransportProtocol",
    "Content",
    "GenerationConfig",
    "GenerativeProviderProtocol",
    "Part",
]
