"""Testes para config.logging.

Cobre: configure_logging, log_fallback, CorrelationIdFilter,
SecretRedactionFilter e create_json_formatter.
"""

from __future__ import annotations

import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    SecretRedactionFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
    redact_secrets,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS

FAKE_KEY = "AIzaSyD-fake-key-0123456789abcdef"


def _record(msg: str = "msg", **extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="test",
        level=logging.INFO,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_default_level(self) -> None:
        configure_logging()
        assert logging.getLogger().level == logging.INFO

    def test_level_is_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_replaces_handlers_and_installs_filters(self) -> None:
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]

        configure_logging(correlation_id_getter=lambda: "corr-1")

        assert len(root.handlers) == 1
        filters = root.handlers[0].filters
        assert any(isinstance(f, CorrelationIdFilter) for f in filters)
        assert any(isinstance(f, SecretRedactionFilter) for f in filters)

    def test_httpx_logger_is_quiet(self) -> None:
        """httpx loga URLs em INFO; fica em WARNING no mínimo."""
        configure_logging(level="DEBUG")
        assert logging.getLogger("httpx").level == logging.WARNING

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "networkai_proxy"

    def test_get_logger_same_instance(self) -> None:
        assert get_logger("same.module") is get_logger("same.module")


class TestLogFallback:
    """Testes para log_fallback."""

    def test_basic(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "getSuggestedTopics")
        call_args = logger.info.call_args
        assert call_args[0] == ("Fallback applied for %s", "getSuggestedTopics")
        extra = call_args[1]["extra"]
        assert extra == {"fallback_used": True, "action": "getSuggestedTopics"}

    def test_with_reason_and_elapsed(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "getNetworkingAdvice", reason="parse_error", elapsed_ms=12.345)
        extra = logger.info.call_args[1]["extra"]
        assert extra["reason"] == "parse_error"
        assert extra["elapsed_ms"] == 12.35


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_adds_correlation_id_from_getter(self) -> None:
        record = _record()
        assert CorrelationIdFilter("svc", lambda: "corr-123").filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "svc"

    def test_preserves_explicit_correlation_id(self) -> None:
        record = _record(correlation_id="explicit-id")
        CorrelationIdFilter("svc", lambda: "from-getter").filter(record)
        assert record.correlation_id == "explicit-id"

    def test_empty_without_getter(self) -> None:
        record = _record()
        CorrelationIdFilter("svc").filter(record)
        assert record.correlation_id == ""


class TestSecretRedaction:
    """API key nunca chega ao output."""

    def test_redact_google_key(self) -> None:
        assert FAKE_KEY not in redact_secrets(f"bad key {FAKE_KEY}")

    def test_redact_key_query_param(self) -> None:
        redacted = redact_secrets("https://x.test/models/m:generateContent?key=secret123&alt=json")
        assert "secret123" not in redacted
        assert "alt=json" in redacted

    def test_empty_text(self) -> None:
        assert redact_secrets("") == ""

    def test_filter_redacts_message_and_error_field(self) -> None:
        record = _record(f"calling with {FAKE_KEY}", error=f"401 for {FAKE_KEY}")
        assert SecretRedactionFilter().filter(record) is True
        assert FAKE_KEY not in record.msg
        assert FAKE_KEY not in record.error


class TestCreateJsonFormatter:
    """Testes para create_json_formatter."""

    def test_constants(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime", "levelname", "name", "message", "correlation_id", "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_formats_record_as_json(self) -> None:
        formatter = create_json_formatter()
        record = _record(
            "proxy_action_received",
            correlation_id="abc-123",
            service="networkai_proxy",
            payload_keys=["prompt"],
        )
        output = json.loads(formatter.format(record))
        assert output["message"] == "proxy_action_received"
        assert output["level"] == "INFO"
        assert output["logger"] == "test"
        assert output["correlation_id"] == "abc-123"
        assert output["payload_keys"] == ["prompt"]
