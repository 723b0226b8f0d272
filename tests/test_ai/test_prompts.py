"""Testes dos construtores de prompt e do snapshot de contatos."""

from __future__ import annotations

import json
from datetime import date

from ai.prompts import (
    CARD_EXTRACTION_SCHEMA,
    PROFILE_SUMMARY_SYSTEM,
    SUGGESTED_TOPICS_SYSTEM,
    build_contact_snapshots,
    format_networking_system_prompt,
    format_profile_summary_prompt,
    format_suggested_topics_prompt,
    serialize_knowledge_base,
    split_data_url,
)
from app.domain.contact import Contact, Interaction

TODAY = date(2024, 5, 20)


def _contacts() -> list[Contact]:
    return [
        Contact(
            id="c1",
            name="王小明",
            role="CTO",
            company="Acme",
            tags=["VIP"],
            notes="喜歡登山",
            phone="0912-345-678",
            email="ming@example.com",
            interactions=[
                Interaction(id="i2", type="meeting", title="年會", date="2024-05-01"),
                Interaction(id="i1", type="call", title="初次通話", date="2024-01-10"),
            ],
        ),
        Contact(id="c2", name="李美玲", role="PM", company="Beta"),
    ]


class TestContactSnapshots:
    def test_only_grounding_fields(self) -> None:
        snapshots = build_contact_snapshots(_contacts())
        data = snapshots[0].to_prompt_dict()

        assert set(data) == {"id", "name", "role", "company", "tags", "notes", "lastInteraction"}
        assert "phone" not in json.dumps(data)

    def test_last_interaction_uses_first_element(self) -> None:
        snapshots = build_contact_snapshots(_contacts())
        assert snapshots[0].last_interaction == "2024-05-01 (年會)"

    def test_no_interactions_is_literal_none(self) -> None:
        snapshots = build_contact_snapshots(_contacts())
        assert snapshots[1].last_interaction == "None"

    def test_every_snapshot_id_is_a_caller_contact(self) -> None:
        contacts = _contacts()
        snapshot_ids = {snapshot.id for snapshot in build_contact_snapshots(contacts)}
        assert snapshot_ids <= {contact.id for contact in contacts}

    def test_knowledge_base_keeps_unicode(self) -> None:
        kb = serialize_knowledge_base(build_contact_snapshots(_contacts()))
        assert "王小明" in kb
        assert json.loads(kb)[1]["name"] == "李美玲"


class TestNetworkingSystemPrompt:
    def test_contains_date_rules_and_contacts(self) -> None:
        prompt = format_networking_system_prompt(_contacts(), today=TODAY)

        assert "NetworkAI" in prompt
        assert "2024-05-20" in prompt
        assert "王小明" in prompt
        assert "ONLY" in prompt
        assert '"relevantContactIds"' in prompt
        assert "ming@example.com" not in prompt

    def test_deterministic_for_same_input(self) -> None:
        first = format_networking_system_prompt(_contacts(), today=TODAY)
        second = format_networking_system_prompt(_contacts(), today=TODAY)
        assert first == second


class TestSuggestedTopicsPrompt:
    def test_history_lines_format(self) -> None:
        contact = _contacts()[0]
        prompt = format_suggested_topics_prompt(
            name=contact.name,
            role=contact.role,
            company=contact.company,
            notes=contact.notes,
            interactions=contact.interactions,
        )

        assert "- 2024-05-01 [meeting] 年會: " in prompt
        assert "- 2024-01-10 [call] 初次通話: " in prompt
        assert "姓名：王小明" in prompt

    def test_system_instruction_requests_json_array(self) -> None:
        assert "JSON 陣列" in SUGGESTED_TOPICS_SYSTEM
        assert "'topic'" in SUGGESTED_TOPICS_SYSTEM


class TestProfileSummaryPrompt:
    def test_contains_url_and_outline(self) -> None:
        prompt = format_profile_summary_prompt(" https://www.linkedin.com/in/ming ")

        assert "https://www.linkedin.com/in/ming" in prompt
        for section in ("工作經歷", "學校經歷", "專長", "工作過的公司", "Facebook"):
            assert section in prompt

    def test_system_forbids_preamble(self) -> None:
        assert "資料提取機器人" in PROFILE_SUMMARY_SYSTEM


class TestCardExtractionPrompt:
    def test_split_data_url(self) -> None:
        assert split_data_url("data:image/png;base64,AAAA") == ("AAAA", "image/png")

    def test_plain_base64_passthrough(self) -> None:
        assert split_data_url("AAAA") == ("AAAA", None)

    def test_schema_requires_all_fields(self) -> None:
        assert CARD_EXTRACTION_SCHEMA["required"] == ["name", "role", "company", "phone", "email"]
