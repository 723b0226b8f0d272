"""Schemas de resposta exigidos do provedor (subconjunto OpenAPI do Gemini).

O provedor pode não honrar o schema; o normalizador revalida tudo.
"""

from __future__ import annotations

from typing import Any

from ai.models.card_extraction import CARD_FIELDS

_STRING: dict[str, Any] = {"type": "STRING"}

NETWORKING_ADVICE_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {
        "answer": _STRING,
        "suggestedQuestions": {"type": "ARRAY", "items": _STRING},
        "relevantContactIds": {"type": "ARRAY", "items": _STRING},
    },
    "required": ["answer", "suggestedQuestions", "relevantContactIds"],
}

CARD_EXTRACTION_SCHEMA: dict[str, Any] = {
    "type": "OBJECT",
    "properties": {field: _STRING for field in CARD_FIELDS},
    "required": list(CARD_FIELDS),
}

SUGGESTED_TOPICS_SCHEMA: dict[str, Any] = {
    "type": "ARRAY",
    "items": {
        "type": "OBJECT",
        "properties": {"topic": _STRING, "reason": _STRING},
        "required": ["topic", "reason"],
    },
}
