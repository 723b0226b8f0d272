"""Transporte direto: dispatcher em processo, sem hop HTTP.

Usado em desenvolvimento e pelo próprio proxy nos testes ponta a ponta.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from ai.models import ActionResult, AssistantAction
    from ai.services.action_dispatcher import ActionDispatcher


class DirectTransport:
    """Implementa AssistantTransportProtocol chamando o ActionDispatcher."""

    __slots__ = ("_dispatcher",)

    def __init__(self, dispatcher: ActionDispatcher) -> None:
        self._dispatcher = dispatcher

    async def invoke(self, action: AssistantAction, payload: dict[str, Any]) -> ActionResult:
        return await self._dispatcher.dispatch(action, payload)
