"""Cliente Gemini real (implementa GenerativeProviderProtocol).

Um cliente por request: a factory do proxy cria um novo a cada chamada,
reutilizando apenas o httpx.AsyncClient do processo.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import httpx

from app.infra.ai._gemini_http import (
    build_generate_content_body,
    build_generate_content_url,
    call_gemini_api,
)
from config.settings.ai.gemini import GeminiSettings, get_gemini_settings
from utils.errors import ConfigurationError

if TYPE_CHECKING:
    from ai.core.provider import Content, GenerationConfig


class GeminiClient:
    """Cliente da API REST generateContent.

    Raises (no construtor):
        ConfigurationError: api_key vazia.
    """

    __slots__ = ("_api_key", "_http_client", "_settings")

    def __init__(
        self,
        api_key: str,
        *,
        settings: GeminiSettings | None = None,
        http_client: httpx.AsyncClient | None = None,
    ) -> None:
        if not api_key or not api_key.strip():
            raise ConfigurationError()
        self._api_key = api_key.strip()
        self._settings = settings or get_gemini_settings()
        self._http_client = http_client

    async def generate_content(
        self,
        *,
        model: str,
        contents: list[Content],
        config: GenerationConfig,
        action: str = "",
    ) -> str:
        """Chama generateContent e retorna o texto concatenado."""
        url = build_generate_content_url(self._settings.base_url, model or self._settings.model)
        body = build_generate_content_body(contents, config)

        if self._http_client is not None:
            return await call_gemini_api(
                http_client=self._http_client,
                api_key=self._api_key,
                url=url,
                body=body,
                action=action,
                timeout_seconds=self._settings.timeout_seconds,
            )

        async with httpx.AsyncClient() as http_client:
            return await call_gemini_api(
                http_client=http_client,
                api_key=self._api_key,
                url=url,
                body=body,
                action=action,
                timeout_seconds=self._settings.timeout_seconds,
            )
