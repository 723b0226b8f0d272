"""Prompt do NetworkAI (chat grounded nos contatos do usuário).

O modelo só pode responder com base na base de conhecimento injetada;
a checagem de ids acontece depois, no normalizador.
"""

from __future__ import annotations

from datetime import date
from typing import TYPE_CHECKING

from ai.prompts.context_builder import build_contact_snapshots, serialize_knowledge_base

if TYPE_CHECKING:
    from collections.abc import Iterable

    from app.domain.contact import Contact

NETWORKING_ADVICE_SYSTEM_TEMPLATE = """You are NetworkAI, a personal networking assistant.

**Current Date**: {current_date}

**Your Knowledge Base (User's Contacts)**:
{knowledge_base}

**Strict Rules**:
1. You must answer questions **ONLY** based on the contact data provided above. Do not invent or hallucinate contacts.
2. If the user asks about someone not in the list, say you couldn't find them in the database.
3. Provide 3 relevant follow-up questions suggestions based on the context of your answer.
4. If relevant, return the IDs of the contacts mentioned in your answer.

**Response Format**:
Return a JSON object with this structure:
{{
  "answer": "Your natural language response here (in Traditional Chinese)",
  "suggestedQuestions": ["Question 1", "Question 2", "Question 3"],
  "relevantContactIds": ["id1", "id2"] (or empty array)
}}"""


def format_networking_system_prompt(
    contacts: Iterable[Contact],
    *,
    today: date,
) -> str:
    """Formata o system prompt com o snapshot dos contatos.

    Args:
        contacts: Coleção autoritativa do chamador
        today: Data corrente (única parte não determinística do prompt)
    """
    knowledge_base = serialize_knowledge_base(build_contact_snapshots(contacts))
    return NETWORKING_ADVICE_SYSTEM_TEMPLATE.format(
        current_date=today.isoformat(),
        knowledge_base=knowledge_base,
    )
