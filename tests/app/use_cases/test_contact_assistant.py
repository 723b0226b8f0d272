"""Testes do ContactAssistantUseCase (store em memória + transporte falso)."""

from __future__ import annotations

from datetime import date

import pytest

from ai.config.settings import build_assistant_settings
from ai.models import (
    CardExtractionResult,
    NetworkingAdviceResult,
    ProfileSummaryResult,
    SuggestedTopic,
    SuggestedTopicsResult,
)
from ai.services import ActionDispatcher, NetworkingAssistant
from app.domain.contact import Contact
from app.infra.ai import DirectTransport
from app.infra.stores import MemoryContactStore
from app.use_cases.assistant import ContactAssistantUseCase, ContactNotFoundError
from app.use_cases.assistant.contact_assistant import append_to_notes
from tests.fakes.fake_provider import CountingFactory, FakeProvider, FakeTransport
from utils.errors import ParseError, TransportError

USER = "u1"


def _use_case(handler, contacts: list[Contact] | None = None):
    store = MemoryContactStore({USER: contacts or [Contact(id="c1", name="王小明", notes="同事")]})
    assistant = NetworkingAssistant(FakeTransport(handler=handler), today=lambda: date(2024, 5, 20))
    return ContactAssistantUseCase(store, assistant), store


def _raise(error: Exception):
    def handler(action, payload):
        raise error

    return handler


@pytest.mark.asyncio
async def test_ask_grounds_on_user_contacts() -> None:
    use_case, _ = _use_case(
        lambda action, payload: NetworkingAdviceResult(answer="ok", relevant_contact_ids=["c1"])
    )

    reply = await use_case.ask(USER, [], "誰是同事？")

    assert [contact.name for contact in reply.contacts] == ["王小明"]


@pytest.mark.asyncio
async def test_suggest_topics_logs_history_entry() -> None:
    use_case, store = _use_case(
        lambda action, payload: SuggestedTopicsResult(topics=[SuggestedTopic(topic="登山")])
    )

    result = await use_case.suggest_topics(USER, "c1")

    assert len(result.topics) == 1
    logs = store.get_logs(USER)
    assert len(logs) == 1
    assert logs[0].action == "AI 話題生成"
    assert logs[0].contact_name == "王小明"
    assert logs[0].type == "interaction"


@pytest.mark.asyncio
async def test_suggest_topics_fallback_is_not_logged() -> None:
    use_case, store = _use_case(_raise(TransportError()))

    result = await use_case.suggest_topics(USER, "c1")

    assert result.is_fallback
    assert store.get_logs(USER) == []


@pytest.mark.asyncio
async def test_unknown_contact_raises() -> None:
    use_case, _ = _use_case(lambda action, payload: None)

    with pytest.raises(ContactNotFoundError):
        await use_case.suggest_topics(USER, "missing")


@pytest.mark.asyncio
async def test_profile_summary_appended_to_notes() -> None:
    use_case, store = _use_case(lambda action, payload: ProfileSummaryResult(text="- CTO"))

    outcome = await use_case.append_profile_summary(USER, "c1", "https://linkedin.com/in/ming")

    assert outcome.saved
    contact = await store.get_contact(USER, "c1")
    assert contact is not None
    assert contact.notes == "同事\n\n- CTO"


@pytest.mark.asyncio
async def test_profile_summary_fallback_keeps_notes() -> None:
    use_case, store = _use_case(_raise(TransportError()))

    outcome = await use_case.append_profile_summary(USER, "c1", "https://linkedin.com/in/ming")

    assert not outcome.saved
    contact = await store.get_contact(USER, "c1")
    assert contact is not None
    assert contact.notes == "同事"


@pytest.mark.asyncio
async def test_empty_profile_summary_keeps_notes() -> None:
    dispatcher = ActionDispatcher(
        CountingFactory(provider=FakeProvider("   ")),
        build_assistant_settings("gemini-test"),
    )
    store = MemoryContactStore({USER: [Contact(id="c1", name="王小明", notes="同事")]})
    assistant = NetworkingAssistant(DirectTransport(dispatcher), today=lambda: date(2024, 5, 20))
    use_case = ContactAssistantUseCase(store, assistant)

    outcome = await use_case.append_profile_summary(USER, "c1", "https://linkedin.com/in/ming")

    assert not outcome.saved
    assert outcome.summary.text == "無法生成摘要。"
    contact = await store.get_contact(USER, "c1")
    assert contact is not None
    assert contact.notes == "同事"


@pytest.mark.asyncio
async def test_scan_business_card_merges_into_draft() -> None:
    use_case, _ = _use_case(
        lambda action, payload: CardExtractionResult(name="Ana", email="ana@acme.com")
    )

    scan = await use_case.scan_business_card("data:image/png;base64,QUJD")

    assert scan.contact.name == "Ana"
    assert scan.updated_fields == ["email", "name"]


@pytest.mark.asyncio
async def test_scan_business_card_failure_propagates() -> None:
    use_case, _ = _use_case(_raise(ParseError()))

    with pytest.raises(ParseError):
        await use_case.scan_business_card("QUJD")


def test_append_to_notes_without_previous_notes() -> None:
    assert append_to_notes(None, "resumo") == "resumo"
    assert append_to_notes("  ", "resumo") == "resumo"
