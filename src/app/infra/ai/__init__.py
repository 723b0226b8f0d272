"""Implementações concretas de IO para IA.

- GeminiClient: provedor generateContent via httpx
- DirectTransport / ProxyTransport: transportes do NetworkingAssistant

ai/ não faz IO direto; tudo que fala com a rede está aqui.
"""

from app.infra.ai.direct_transport import DirectTransport
from app.infra.ai.gemini_client import GeminiClient
from app.infra.ai.proxy_transport import ProxyTransport

__all__ = [
    "DirectTransport",
    "GeminiClient",
    "ProxyTransport",
]
