"""Transporte via proxy HTTP: POST {action, payload} para o endpoint.

A API key nunca sai do servidor. Status de erro do proxy voltam a ser
exceções tipadas e o JSON de sucesso é revalidado (o corpo é tratado
como não confiável, igual à resposta do modelo).
"""

from __future__ import annotations

import json
import logging
from typing import TYPE_CHECKING, Any

import httpx

from ai.models import AssistantAction
from ai.services.response_normalizer import (
    normalize_card_extraction,
    normalize_networking_advice,
    normalize_profile_summary,
    normalize_suggested_topics,
)
from app.constants.http import FALLBACK_HEADER
from app.observability.correlation import CORRELATION_ID_HEADER, get_correlation_id
from utils.errors import (
    AssistantError,
    ConfigurationError,
    InvalidPayloadError,
    ParseError,
    ProviderError,
    TransportError,
    UnknownActionError,
)

if TYPE_CHECKING:
    from ai.models import ActionResult

logger = logging.getLogger(__name__)

# Mensagens que o proxy devolve para falhas de rede do lado do provedor.
TRANSPORT_ERROR_MESSAGES = frozenset(
    {TransportError.default_message, TransportError.timeout_message}
)


def error_from_response(status_code: int, message: str) -> AssistantError:
    """Reconstrói a exceção tipada a partir de `{error}` + status."""
    if status_code == UnknownActionError.status_code and message == UnknownActionError.default_message:
        return UnknownActionError()
    if status_code == InvalidPayloadError.status_code:
        return InvalidPayloadError(message)
    if message in TRANSPORT_ERROR_MESSAGES:
        return TransportError(message)
    if message == ConfigurationError.default_message:
        return ConfigurationError()
    if message == ParseError.default_message:
        return ParseError(message)
    return ProviderError(message, provider_status=status_code)


def parse_wire_result(action: AssistantAction, response_text: str) -> ActionResult:
    """Revalida o corpo de sucesso do proxy com o normalizador da ação."""
    if action is AssistantAction.NETWORKING_ADVICE:
        return normalize_networking_advice(response_text)
    if action is AssistantAction.CARD_EXTRACTION:
        return normalize_card_extraction(response_text)
    if action is AssistantAction.SUGGESTED_TOPICS:
        return normalize_suggested_topics(response_text)

    # Resumo chega como string JSON
    try:
        text = json.loads(response_text)
    except ValueError as exc:
        raise ParseError(raw_text=response_text) from exc
    if not isinstance(text, str):
        raise ParseError("profile summary: expected a JSON string", raw_text=response_text)
    return normalize_profile_summary(text)


class ProxyTransport:
    """Implementa AssistantTransportProtocol via HTTP."""

    __slots__ = ("_http_client", "_proxy_url", "_timeout_seconds")

    def __init__(
        self,
        proxy_url: str,
        *,
        http_client: httpx.AsyncClient | None = None,
        timeout_seconds: float = 90.0,
    ) -> None:
        self._proxy_url = proxy_url
        self._http_client = http_client
        self._timeout_seconds = timeout_seconds

    async def invoke(self, action: AssistantAction, payload: dict[str, Any]) -> ActionResult:
        """POST no proxy e revalida o resultado.

        Raises:
            TransportError: rede/timeout.
            AssistantError: status de erro do proxy (tipo reconstruído).
            ParseError: corpo de sucesso fora do formato da ação.
        """
        body = {"action": action.value, "payload": payload}
        headers = {}
        correlation_id = get_correlation_id()
        if correlation_id:
            headers[CORRELATION_ID_HEADER] = correlation_id

        if self._http_client is not None:
            response = await self._post(self._http_client, body, headers, action)
        else:
            async with httpx.AsyncClient() as http_client:
                response = await self._post(http_client, body, headers, action)

        if response.is_error:
            raise error_from_response(response.status_code, _error_message(response))

        result = parse_wire_result(action, response.text)
        fallback_reason = response.headers.get(FALLBACK_HEADER)
        if fallback_reason and hasattr(result, "fallback_reason"):
            result = result.model_copy(update={"fallback_reason": fallback_reason})
        return result

    async def _post(
        self,
        http_client: httpx.AsyncClient,
        body: dict[str, Any],
        headers: dict[str, str],
        action: AssistantAction,
    ) -> httpx.Response:
        try:
            return await http_client.post(
                self._proxy_url,
                json=body,
                headers=headers,
                timeout=self._timeout_seconds,
            )
        except httpx.TimeoutException as exc:
            logger.warning(
                "assistant_proxy_timeout",
                extra={"action": action.value, "timeout": self._timeout_seconds},
            )
            raise TransportError("Timed out waiting for the assistant proxy") from exc
        except httpx.RequestError as exc:
            logger.warning(
                "assistant_proxy_request_error",
                extra={"action": action.value, "error_type": type(exc).__name__},
            )
            raise TransportError() from exc


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.reason_phrase or f"HTTP {response.status_code}"
    if isinstance(body, dict) and isinstance(body.get("error"), str):
        return body["error"]
    return response.reason_phrase or f"HTTP {response.status_code}"
