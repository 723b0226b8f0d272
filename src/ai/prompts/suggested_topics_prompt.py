"""Prompt de sugestão de tópicos para o próximo encontro."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.contact import Interaction

SUGGESTED_TOPICS_SYSTEM = (
    "你是一位精通社交心理學的 AI 助手。請以繁體中文回答，並以 JSON 陣列格式回傳，"
    "每個元素包含 'topic' (話題內容) 與 'reason' (建議理由)。"
)

SUGGESTED_TOPICS_USER_TEMPLATE = """請根據以下聯絡人資訊與過去的互動紀錄，建議 3 個在下次見面時可以聊的話題。

聯絡人資訊：
姓名：{name}
職稱：{role}
公司：{company}
筆記：{notes}

過去互動紀錄：
{history}

請提供具體、有溫度且能展現「我有記住上次談話內容」的話題建議。"""


def format_interaction_history(interactions: Iterable[Interaction]) -> str:
    """Uma linha por interação, na ordem recebida."""
    return "\n".join(interaction.as_history_line() for interaction in interactions)


def format_suggested_topics_prompt(
    *,
    name: str,
    role: str | None = None,
    company: str | None = None,
    notes: str | None = None,
    interactions: Iterable[Interaction] = (),
) -> str:
    """Formata prompt com perfil do contato e histórico de interações."""
    return SUGGESTED_TOPICS_USER_TEMPLATE.format(
        name=name or "",
        role=role or "",
        company=company or "",
        notes=notes or "",
        history=format_interaction_history(interactions),
    )
