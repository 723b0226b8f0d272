"""Serviços de aplicação.

Unidades reutilizáveis sem IO direto; IO concreto fica em app/infra/.
"""

from app.services.card_merge import merge_card_into_contact

__all__ = [
    "merge_card_into_contact",
]
