"""ActionDispatcher: roteador one-shot do proxy (lado servidor).

Fluxo por request:
1. Valida o nome da ação (UnknownActionError, sem chamar o provedor)
2. Obtém um provedor novo da factory (ConfigurationError sem credencial,
   mesmo que o payload também seja inválido)
3. Valida o payload com o modelo da ação (InvalidPayloadError)
4. Monta contents + config da ação e chama generate_content
5. Normaliza o texto; ParseError segue a política da ação

Sem estado mutável compartilhado: requests concorrentes são independentes.
"""

from __future__ import annotations

import logging
import time
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ai.config.settings import ActionModelSettings, AssistantSettings, get_assistant_settings
from ai.core.provider import Content, GenerationConfig, Part
from ai.models import (
    REQUEST_MODELS,
    ActionRequest,
    ActionResult,
    AssistantAction,
    CardExtractionRequest,
    NetworkingAdviceRequest,
    ProfileSummaryRequest,
    SuggestedTopicsRequest,
    parse_action,
)
from ai.prompts.response_schemas import (
    CARD_EXTRACTION_SCHEMA,
    NETWORKING_ADVICE_SCHEMA,
    SUGGESTED_TOPICS_SCHEMA,
)
from ai.rules.fallbacks import ErrorPolicy, fallback_for_action, policy_for
from ai.services.response_normalizer import (
    normalize_card_extraction,
    normalize_networking_advice,
    normalize_profile_summary,
    normalize_suggested_topics,
)
from ai.utils.sanitizer import truncate_for_log
from app.observability.metrics import (
    OUTCOME_ERROR,
    OUTCOME_FALLBACK,
    OUTCOME_OK,
    record_action_latency,
    record_fallback,
    record_provider_error,
)
from config.logging import log_fallback
from utils.errors import AssistantError, InvalidPayloadError, ParseError, ProviderError

if TYPE_CHECKING:
    from ai.core.provider import GenerativeProviderProtocol

logger = logging.getLogger(__name__)

JSON_MIME_TYPE = "application/json"
GOOGLE_SEARCH_TOOL: dict[str, Any] = {"googleSearch": {}}

ProviderFactory = Callable[[], "GenerativeProviderProtocol"]

_NORMALIZERS: dict[AssistantAction, Callable[[str], ActionResult]] = {
    AssistantAction.NETWORKING_ADVICE: normalize_networking_advice,
    AssistantAction.CARD_EXTRACTION: normalize_card_extraction,
    AssistantAction.SUGGESTED_TOPICS: normalize_suggested_topics,
    AssistantAction.PROFILE_SUMMARY: normalize_profile_summary,
}


def validate_payload(action: AssistantAction, payload: Any) -> ActionRequest:
    """Valida o payload contra o modelo da ação.

    Raises:
        InvalidPayloadError: payload não-objeto ou sem campos obrigatórios.
    """
    if not isinstance(payload, dict):
        raise InvalidPayloadError("Payload must be a JSON object")
    model = REQUEST_MODELS[action]
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        fields = sorted({str(error["loc"][0]) for error in exc.errors() if error["loc"]})
        message = "Invalid payload"
        if fields:
            message = f"Invalid payload: {', '.join(fields)}"
        raise InvalidPayloadError(message, fields=fields) from exc


def build_contents(action: AssistantAction, request: ActionRequest) -> list[Content]:
    """Monta os turnos enviados ao modelo (histórico sem texto é descartado)."""
    if isinstance(request, NetworkingAdviceRequest):
        contents = [
            Content(role=turn.provider_role, parts=(Part.from_text(turn.text),))
            for turn in request.chat_history
            if turn.text.strip()
        ]
        contents.append(Content.user_text(request.user_input))
        return contents
    if isinstance(request, CardExtractionRequest):
        return [
            Content(
                role="user",
                parts=(
                    Part.from_inline_image(request.base64_data, request.mime_type),
                    Part.from_text(request.prompt),
                ),
            )
        ]
    if isinstance(request, (SuggestedTopicsRequest, ProfileSummaryRequest)):
        return [Content.user_text(request.prompt)]
    raise TypeError(f"request inesperado para {action.value}: {type(request).__name__}")


def build_generation_config(
    action: AssistantAction,
    request: ActionRequest,
    model_settings: ActionModelSettings,
) -> GenerationConfig:
    """Config por ação (schema, instrução, temperatura, ferramentas)."""
    tools = (GOOGLE_SEARCH_TOOL,) if model_settings.enable_search else ()
    if isinstance(request, NetworkingAdviceRequest):
        return GenerationConfig(
            system_instruction=request.system_prompt,
            response_mime_type=JSON_MIME_TYPE,
            response_schema=NETWORKING_ADVICE_SCHEMA,
            temperature=model_settings.temperature,
            tools=tools,
        )
    if isinstance(request, CardExtractionRequest):
        return GenerationConfig(
            response_mime_type=JSON_MIME_TYPE,
            response_schema=CARD_EXTRACTION_SCHEMA,
            temperature=model_settings.temperature,
            tools=tools,
        )
    if isinstance(request, SuggestedTopicsRequest):
        return GenerationConfig(
            system_instruction=request.system_instruction,
            response_mime_type=JSON_MIME_TYPE,
            response_schema=SUGGESTED_TOPICS_SCHEMA,
            temperature=model_settings.temperature,
            tools=tools,
        )
    if isinstance(request, ProfileSummaryRequest):
        # Texto livre: sem responseMimeType/schema
        return GenerationConfig(
            system_instruction=request.system_instruction,
            temperature=model_settings.temperature,
            tools=tools,
        )
    raise TypeError(f"request inesperado para {action.value}: {type(request).__name__}")


class ActionDispatcher:
    """Despacha {action, payload} para o provedor e normaliza o resultado."""

    def __init__(
        self,
        provider_factory: ProviderFactory,
        settings: AssistantSettings | None = None,
    ) -> None:
        self._provider_factory = provider_factory
        self._settings = settings or get_assistant_settings()

    async def dispatch(self, action_name: object, payload: Any) -> ActionResult:
        """Executa uma ação.

        Args:
            action_name: Nome da ação no wire
            payload: Objeto JSON específico da ação

        Returns:
            Resultado validado (ou resposta padrão para ParseError em ações
            com política FALLBACK; ver `fallback_reason`).

        Raises:
            UnknownActionError, InvalidPayloadError, ConfigurationError,
            TransportError, ProviderError, ParseError (só ações RAISE).
        """
        action = parse_action(action_name)
        provider = self._provider_factory()
        request = validate_payload(action, payload)

        model_settings = self._settings.for_action(action)
        contents = build_contents(action, request)
        config = build_generation_config(action, request, model_settings)

        start = time.perf_counter()
        try:
            raw_text = await provider.generate_content(
                model=model_settings.model,
                contents=contents,
                config=config,
                action=action.value,
            )
        except AssistantError as exc:
            elapsed_ms = (time.perf_counter() - start) * 1000
            if isinstance(exc, ProviderError):
                record_provider_error(action.value, exc.provider_status)
            record_action_latency(
                action.value, elapsed_ms, outcome=OUTCOME_ERROR, model=model_settings.model
            )
            raise

        try:
            result = _NORMALIZERS[action](raw_text)
        except ParseError as exc:
            elapsed_ms = (time.perf_counter() - start) * 1000
            return self._handle_parse_error(action, exc, elapsed_ms, model_settings.model)

        elapsed_ms = (time.perf_counter() - start) * 1000
        record_action_latency(action.value, elapsed_ms, outcome=OUTCOME_OK, model=model_settings.model)
        logger.info(
            "assistant_action_completed",
            extra={"action": action.value, "elapsed_ms": round(elapsed_ms, 2)},
        )
        return result

    def _handle_parse_error(
        self,
        action: AssistantAction,
        exc: ParseError,
        elapsed_ms: float,
        model: str,
    ) -> ActionResult:
        logger.warning(
            "assistant_response_parse_failed",
            extra={
                "action": action.value,
                "error": str(exc),
                "response_text": truncate_for_log(
                    exc.raw_text, self._settings.raw_response_log_chars
                ),
            },
        )
        if policy_for(action) is ErrorPolicy.RAISE:
            record_action_latency(action.value, elapsed_ms, outcome=OUTCOME_ERROR, model=model)
            raise exc

        log_fallback(logger, action.value, reason="parse_error", elapsed_ms=elapsed_ms)
        record_fallback(action.value, "parse_error")
        record_action_latency(action.value, elapsed_ms, outcome=OUTCOME_FALLBACK, model=model)
        return fallback_for_action(action, "parse_error")
