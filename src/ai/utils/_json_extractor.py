"""Extrator de JSON de respostas de LLM.

Remove cercas markdown (```json ... ```) e parseia. Falha de parse vira
ParseError, distinta de um resultado vazio legítimo ([] ou {}).
"""

from __future__ import annotations

import json
import re
from typing import Any

from utils.errors import ParseError

_OPENING_FENCE = re.compile(r"^```[a-zA-Z]*[ \t]*\n?")
_CLOSING_FENCE = re.compile(r"\n?[ \t]*```$")

_decoder = json.JSONDecoder()


def strip_code_fences(text: str) -> str:
    """Remove a cerca markdown ao redor do texto, se houver."""
    cleaned = text.strip()
    if cleaned.startswith("```"):
        cleaned = _OPENING_FENCE.sub("", cleaned, count=1)
        cleaned = _CLOSING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def parse_json_response(response: str | None) -> Any:
    """Parseia a resposta do modelo como JSON.

    Trata casos comuns:
    - Resposta envolvida em markdown code blocks
    - Whitespace extra
    - JSON precedido de texto (usa o primeiro objeto/array completo)

    Args:
        response: Texto bruto retornado pelo provedor

    Returns:
        Valor JSON decodificado (dict, list, ...)

    Raises:
        ParseError: se não houver JSON válido no texto.
    """
    if not isinstance(response, str) or not response.strip():
        raise ParseError("Empty response from AI model", raw_text=response or "")

    text = strip_code_fences(response)

    try:
        return json.loads(text)
    except json.JSONDecodeError:
        pass

    for index, char in enumerate(text):
        if char not in "{[":
            continue
        try:
            value, _ = _decoder.raw_decode(text, index)
        except json.JSONDecodeError:
            continue
        return value

    raise ParseError(raw_text=response)
