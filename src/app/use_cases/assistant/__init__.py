"""Use cases dos fluxos do app que usam o assistente."""

from .contact_assistant import (
    CardScanResult,
    ContactAssistantUseCase,
    ContactNotFoundError,
    ProfileSummaryOutcome,
    append_to_notes,
)

__all__ = [
    "CardScanResult",
    "ContactAssistantUseCase",
    "ContactNotFoundError",
    "ProfileSummaryOutcome",
    "append_to_notes",
]
