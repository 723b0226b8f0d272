"""Helper para chamadas HTTP à API REST do Gemini (generateContent).

Implementação concreta de IO, por isso fica em app/infra.
Erros viram exceções tipadas: rede/timeout -> TransportError,
status de erro ou resposta bloqueada -> ProviderError.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

import httpx

from ai.utils.sanitizer import truncate_for_log
from config.logging import redact_secrets
from utils.errors import ProviderError, TransportError

if TYPE_CHECKING:
    from ai.core.provider import Content, GenerationConfig

logger = logging.getLogger(__name__)

API_KEY_HEADER = "x-goog-api-key"


def build_generate_content_url(base_url: str, model: str) -> str:
    return f"{base_url.rstrip('/')}/models/{model}:generateContent"


def build_generate_content_body(
    contents: list[Content],
    config: GenerationConfig,
) -> dict[str, Any]:
    """Monta o corpo JSON do generateContent.

    Campos opcionais só entram quando definidos (temperatura None =
    padrão do provedor).
    """
    body: dict[str, Any] = {"contents": [content.to_wire() for content in contents]}

    if config.system_instruction:
        body["systemInstruction"] = {"parts": [{"text": config.system_instruction}]}

    generation_config: dict[str, Any] = {}
    if config.response_mime_type:
        generation_config["responseMimeType"] = config.response_mime_type
    if config.response_schema is not None:
        generation_config["responseSchema"] = config.response_schema
    if config.temperature is not None:
        generation_config["temperature"] = config.temperature
    if generation_config:
        body["generationConfig"] = generation_config

    if config.tools:
        body["tools"] = [dict(tool) for tool in config.tools]

    return body


def extract_candidate_text(data: dict[str, Any]) -> str:
    """Concatena o texto das parts do primeiro candidato.

    Raises:
        ProviderError: prompt bloqueado pelo provedor.
    """
    block_reason = (data.get("promptFeedback") or {}).get("blockReason")
    if block_reason:
        raise ProviderError(f"Gemini blocked the prompt: {block_reason}")

    candidates = data.get("candidates") or []
    if not candidates:
        return ""

    content = candidates[0].get("content") or {}
    parts = content.get("parts") or []
    return "".join(part.get("text", "") for part in parts if isinstance(part, dict))


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return truncate_for_log(response.text, 200) or response.reason_phrase
    error = body.get("error") if isinstance(body, dict) else None
    if isinstance(error, dict) and error.get("message"):
        return str(error["message"])
    return response.reason_phrase or f"HTTP {response.status_code}"


async def call_gemini_api(
    *,
    http_client: httpx.AsyncClient,
    api_key: str,
    url: str,
    body: dict[str, Any],
    action: str,
    timeout_seconds: float,
) -> str:
    """Executa chamada ao generateContent e retorna o texto gerado.

    Args:
        http_client: Cliente HTTP async
        api_key: API key do Gemini (vai no header, nunca na URL)
        url: Endpoint completo do modelo
        body: Corpo montado por build_generate_content_body
        action: Nome da ação (para logs)
        timeout_seconds: Timeout da chamada

    Raises:
        TransportError: timeout ou falha de conexão.
        ProviderError: status não-2xx, corpo inválido ou prompt bloqueado.
    """
    headers = {API_KEY_HEADER: api_key, "Content-Type": "application/json"}

    try:
        response = await http_client.post(url, headers=headers, json=body, timeout=timeout_seconds)
    except httpx.TimeoutException as exc:
        logger.warning(
            "gemini_timeout",
            extra={"action": action, "timeout": timeout_seconds},
        )
        raise TransportError(TransportError.timeout_message) from exc
    except httpx.RequestError as exc:
        logger.warning(
            "gemini_request_error",
            extra={"action": action, "error": redact_secrets(str(exc))},
        )
        raise TransportError() from exc

    if response.is_error:
        message = _error_message(response)
        logger.warning(
            "gemini_http_error",
            extra={
                "action": action,
                "status_code": response.status_code,
                "error": redact_secrets(message),
            },
        )
        raise ProviderError(redact_secrets(message), provider_status=response.status_code)

    try:
        data = response.json()
    except ValueError as exc:
        logger.warning("gemini_invalid_body", extra={"action": action})
        raise ProviderError("Invalid response body from Gemini API") from exc
    if not isinstance(data, dict):
        raise ProviderError("Invalid response body from Gemini API")

    text = extract_candidate_text(data)
    logger.debug(
        "gemini_call_success",
        extra={
            "action": action,
            "response_chars": len(text),
            "tokens_used": (data.get("usageMetadata") or {}).get("totalTokenCount"),
        },
    )
    return text
