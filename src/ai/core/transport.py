"""Protocolo de transporte do assistente (lado cliente).

Uma interface única para as quatro ações, com duas
implementações selecionadas por configuração:
- DirectTransport: dispatcher em processo (cliente Gemini direto)
- ProxyTransport: POST {action, payload} para o proxy HTTP
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from ai.models import ActionResult, AssistantAction


class AssistantTransportProtocol(Protocol):
    """Contrato de transporte de uma ação até o dispatcher."""

    async def invoke(
        self,
        action: AssistantAction,
        payload: dict[str, Any],
    ) -> ActionResult:
        """Executa a ação e retorna o resultado já validado.

        Raises:
            AssistantError: qualquer falha tipada (config, rede, provedor, parse).
        """
        ...
