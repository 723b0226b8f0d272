"""Normalização das respostas do modelo por ação.

O JSON do provedor não é confiável mesmo com responseSchema: tudo passa
por parse + validação pydantic. Falha de parse/forma vira ParseError;
resultado vazio válido ([] ou campos "") não é erro.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ai.models.card_extraction import CardExtractionResult
from ai.models.networking_advice import NetworkingAdviceResult
from ai.models.profile_summary import ProfileSummaryResult
from ai.models.suggested_topics import SuggestedTopic, SuggestedTopicsResult
from ai.rules.fallbacks import empty_profile_summary
from ai.utils._json_extractor import parse_json_response
from utils.errors import ParseError

if TYPE_CHECKING:
    from collections.abc import Iterable


def _parse_object(raw_text: str | None, label: str) -> dict[str, Any]:
    data = parse_json_response(raw_text)
    if not isinstance(data, dict):
        raise ParseError(f"{label}: expected a JSON object", raw_text=raw_text or "")
    return data


def normalize_networking_advice(raw_text: str | None) -> NetworkingAdviceResult:
    """Texto bruto -> NetworkingAdviceResult.

    Raises:
        ParseError: JSON inválido, não-objeto ou sem `answer` string.
    """
    data = _parse_object(raw_text, "networking advice")
    try:
        return NetworkingAdviceResult.model_validate(data)
    except ValidationError as exc:
        raise ParseError(
            f"networking advice: invalid shape ({exc.error_count()} errors)",
            raw_text=raw_text or "",
        ) from exc


def normalize_card_extraction(raw_text: str | None) -> CardExtractionResult:
    """Texto bruto -> CardExtractionResult (campos ausentes viram "")."""
    data = _parse_object(raw_text, "card extraction")
    try:
        return CardExtractionResult.model_validate(data)
    except ValidationError as exc:
        raise ParseError(
            f"card extraction: invalid shape ({exc.error_count()} errors)",
            raw_text=raw_text or "",
        ) from exc


def normalize_suggested_topics(raw_text: str | None) -> SuggestedTopicsResult:
    """Texto bruto -> SuggestedTopicsResult.

    Aceita o array esperado ou um objeto `{"topics": [...]}`. Itens sem
    `topic` textual são descartados.
    """
    data = parse_json_response(raw_text)
    if isinstance(data, dict) and isinstance(data.get("topics"), list):
        data = data["topics"]
    if not isinstance(data, list):
        raise ParseError("suggested topics: expected a JSON array", raw_text=raw_text or "")

    topics: list[SuggestedTopic] = []
    for item in data:
        if not isinstance(item, dict):
            continue
        topic = item.get("topic")
        if not isinstance(topic, str) or not topic.strip():
            continue
        reason = item.get("reason")
        topics.append(
            SuggestedTopic(
                topic=topic.strip(),
                reason=reason.strip() if isinstance(reason, str) else "",
            )
        )
    return SuggestedTopicsResult(topics=topics)


def normalize_profile_summary(raw_text: str | None) -> ProfileSummaryResult:
    """Texto livre; vazio vira o texto padrão "無法生成摘要。"."""
    text = (raw_text or "").strip()
    if not text:
        return empty_profile_summary()
    return ProfileSummaryResult(text=text)


def cross_reference_contact_ids(
    relevant_ids: Iterable[str],
    known_ids: Iterable[str],
) -> list[str]:
    """Interseção ordenada: mantém a ordem do modelo, sem duplicatas.

    Ids que o modelo inventou (fora da coleção do chamador) são descartados.
    """
    known = set(known_ids)
    result: list[str] = []
    for contact_id in relevant_ids:
        if contact_id in known and contact_id not in result:
            result.append(contact_id)
    return result
