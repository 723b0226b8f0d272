"""Testes da fachada NetworkingAssistant (transporte falso)."""

from __future__ import annotations

from datetime import date

import pytest

from ai.models import (
    AssistantAction,
    CardExtractionResult,
    ChatTurn,
    NetworkingAdviceResult,
    ProfileSummaryResult,
    SuggestedTopic,
    SuggestedTopicsResult,
)
from ai.services import NetworkingAssistant, resolve_contacts
from app.domain.contact import Contact, Interaction
from tests.fakes.fake_provider import FakeTransport
from utils.errors import InvalidPayloadError, ParseError, ProviderError, TransportError

CONTACTS = [
    Contact(id="c1", name="王小明", role="CTO", tags=["VIP"]),
    Contact(id="c2", name="李美玲", role="PM"),
]


def _raise(error: Exception):
    def handler(action, payload):
        raise error

    return handler


def _assistant(handler) -> tuple[NetworkingAssistant, FakeTransport]:
    transport = FakeTransport(handler=handler)
    return NetworkingAssistant(transport, today=lambda: date(2024, 5, 20)), transport


class TestNetworkingAdvice:
    @pytest.mark.asyncio
    async def test_resolves_ids_to_contacts_and_drops_unknown(self) -> None:
        assistant, transport = _assistant(
            lambda action, payload: NetworkingAdviceResult(
                answer="王小明是 VIP。",
                suggested_questions=["q"],
                relevant_contact_ids=["c1", "ghost"],
            )
        )

        reply = await assistant.get_networking_advice([], "誰是 VIP？", CONTACTS)

        assert reply.answer == "王小明是 VIP。"
        assert [contact.id for contact in reply.contacts] == ["c1"]
        assert not reply.is_fallback

    @pytest.mark.asyncio
    async def test_payload_carries_history_and_grounded_prompt(self) -> None:
        assistant, transport = _assistant(
            lambda action, payload: NetworkingAdviceResult(answer="ok")
        )
        history = [ChatTurn(role="user", text="你好"), ChatTurn(role="assistant", text="嗨")]

        await assistant.get_networking_advice(history, "誰是 VIP？", CONTACTS)

        action, payload = transport.calls[0]
        assert action is AssistantAction.NETWORKING_ADVICE
        assert payload["userInput"] == "誰是 VIP？"
        assert [turn["text"] for turn in payload["chatHistory"]] == ["你好", "嗨"]
        assert "王小明" in payload["systemPrompt"]
        assert "2024-05-20" in payload["systemPrompt"]

    @pytest.mark.asyncio
    async def test_transport_failure_becomes_default_answer(self) -> None:
        assistant, _ = _assistant(_raise(TransportError()))

        reply = await assistant.get_networking_advice([], "誰是 VIP？", CONTACTS)

        assert reply.answer == "發生錯誤，無法取得建議。"
        assert reply.suggested_questions == []
        assert reply.contacts == ()
        assert reply.is_fallback

    @pytest.mark.asyncio
    async def test_empty_question_is_caller_error(self) -> None:
        assistant, transport = _assistant(lambda action, payload: None)

        with pytest.raises(InvalidPayloadError):
            await assistant.get_networking_advice([], "", CONTACTS)

        assert transport.calls == []


class TestCardExtraction:
    @pytest.mark.asyncio
    async def test_data_url_is_split(self) -> None:
        assistant, transport = _assistant(
            lambda action, payload: CardExtractionResult(name="Ana")
        )

        result = await assistant.extract_contact_from_card("data:image/png;base64,QUJD")

        assert result.name == "Ana"
        _, payload = transport.calls[0]
        assert payload["base64Data"] == "QUJD"
        assert payload["mimeType"] == "image/png"

    @pytest.mark.asyncio
    async def test_raw_base64_defaults_to_jpeg(self) -> None:
        assistant, transport = _assistant(lambda action, payload: CardExtractionResult())

        await assistant.extract_contact_from_card("QUJD")

        assert transport.calls[0][1]["mimeType"] == "image/jpeg"

    @pytest.mark.asyncio
    async def test_failure_is_raised(self) -> None:
        assistant, _ = _assistant(_raise(ParseError()))

        with pytest.raises(ParseError):
            await assistant.extract_contact_from_card("QUJD")


class TestSuggestedTopics:
    @pytest.mark.asyncio
    async def test_uses_contact_interactions(self) -> None:
        contact = Contact(
            id="c1",
            name="王小明",
            interactions=[Interaction(date="2024-05-01", type="meeting", title="年會")],
        )
        assistant, transport = _assistant(
            lambda action, payload: SuggestedTopicsResult(
                topics=[SuggestedTopic(topic="登山", reason="興趣")]
            )
        )

        result = await assistant.get_suggested_topics(contact)

        assert [topic.topic for topic in result.topics] == ["登山"]
        _, payload = transport.calls[0]
        assert "年會" in payload["prompt"]
        assert payload["systemInstruction"]

    @pytest.mark.asyncio
    async def test_provider_error_becomes_empty_list(self) -> None:
        assistant, _ = _assistant(_raise(ProviderError("boom", provider_status=503)))

        result = await assistant.get_suggested_topics(CONTACTS[0])

        assert result.topics == []
        assert result.fallback_reason == "ProviderError"


class TestProfileSummary:
    @pytest.mark.asyncio
    async def test_url_goes_into_prompt(self) -> None:
        assistant, transport = _assistant(
            lambda action, payload: ProfileSummaryResult(text="- CTO")
        )

        result = await assistant.get_profile_summary(" https://linkedin.com/in/ming ")

        assert result.text == "- CTO"
        assert "https://linkedin.com/in/ming" in transport.calls[0][1]["prompt"]

    @pytest.mark.asyncio
    async def test_blank_url_rejected(self) -> None:
        assistant, transport = _assistant(lambda action, payload: None)

        with pytest.raises(InvalidPayloadError):
            await assistant.get_profile_summary("   ")

        assert transport.calls == []

    @pytest.mark.asyncio
    async def test_failure_returns_error_text(self) -> None:
        assistant, _ = _assistant(_raise(TransportError()))

        result = await assistant.get_profile_summary("https://linkedin.com/in/ming")

        assert result.is_fallback
        assert result.text


def test_resolve_contacts_keeps_model_order() -> None:
    advice = NetworkingAdviceResult(answer="x", relevant_contact_ids=["c2", "c1"])

    assert [contact.id for contact in resolve_contacts(advice, CONTACTS)] == ["c2", "c1"]
