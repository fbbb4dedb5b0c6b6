"""Testes para config.logging.

Cobre: configure_logging, get_logger, log_fallback,
CorrelationIdFilter, create_json_formatter.
"""

from __future__ import annotations

import io
import json
import logging
from unittest.mock import MagicMock

import pytest

from config.logging import (
    FIELD_RENAME_MAP,
    REQUIRED_LOG_FIELDS,
    CorrelationIdFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
    log_fallback,
)
from config.logging.config import DEFAULT_SERVICE_NAME, VALID_LOG_LEVELS


def _record(msg: str = "msg", level: int = logging.INFO) -> logging.LogRecord:
    return logging.LogRecord(
        name="test",
        level=level,
        pathname="",
        lineno=0,
        msg=msg,
        args=(),
        exc_info=None,
    )


class TestConfigureLogging:
    """Testes para configure_logging."""

    def test_default_level_is_warning(self) -> None:
        """Por padrão só avisos e erros chegam ao stderr."""
        configure_logging()
        assert logging.getLogger().level == logging.WARNING

    def test_level_is_case_insensitive(self) -> None:
        configure_logging(level="debug")
        assert logging.getLogger().level == logging.DEBUG

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Nível de log inválido"):
            configure_logging(level="INVALID")

    def test_replaces_handlers(self) -> None:
        """Chamadas repetidas deixam um único handler."""
        root = logging.getLogger()
        root.handlers = [logging.NullHandler(), logging.NullHandler()]
        configure_logging()
        configure_logging()
        assert len(root.handlers) == 1
        assert any(isinstance(f, CorrelationIdFilter) for f in root.handlers[0].filters)

    def test_writes_json_to_stream(self) -> None:
        stream = io.StringIO()
        configure_logging(
            level="INFO",
            service_name="events_card_test",
            correlation_id_getter=lambda: "run-001",
            stream=stream,
        )

        get_logger("app.test").info("feed_fetched", extra={"bytes": 2048})

        payload = json.loads(stream.getvalue().strip())
        assert payload["message"] == "feed_fetched"
        assert payload["level"] == "INFO"
        assert payload["logger"] == "app.test"
        assert payload["correlation_id"] == "run-001"
        assert payload["service"] == "events_card_test"
        assert payload["bytes"] == 2048

    def test_level_filters_records(self) -> None:
        stream = io.StringIO()
        configure_logging(level="WARNING", stream=stream)

        get_logger("app.test").info("hidden")

        assert stream.getvalue() == ""

    def test_constants(self) -> None:
        assert {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"} == VALID_LOG_LEVELS
        assert DEFAULT_SERVICE_NAME == "events_card"


class TestGetLogger:
    """Testes para get_logger."""

    def test_same_name_returns_same_instance(self) -> None:
        logger = get_logger("same.module")
        assert logger is get_logger("same.module")
        assert logger.name == "same.module"


class TestLogFallback:
    """Testes para log_fallback."""

    def test_logs_warning_with_component(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(logger, "description_decoder")

        logger.warning.assert_called_once()
        call_args = logger.warning.call_args
        assert call_args[0][0] == "Fallback applied for %s"
        assert call_args[0][1] == "description_decoder"
        extra = call_args[1]["extra"]
        assert extra["fallback_used"] is True
        assert extra["component"] == "description_decoder"
        assert "reason" not in extra

    def test_extra_fields_and_reason(self) -> None:
        logger = MagicMock(spec=logging.Logger)
        log_fallback(
            logger,
            "description_decoder",
            reason="malformed_json",
            summary="PyCon UK",
            start="20250301",
        )

        extra = logger.warning.call_args[1]["extra"]
        assert extra["reason"] == "malformed_json"
        assert extra["summary"] == "PyCon UK"
        assert extra["start"] == "20250301"


class TestCorrelationIdFilter:
    """Testes para CorrelationIdFilter."""

    def test_adds_correlation_id_from_getter(self) -> None:
        filter_ = CorrelationIdFilter("events_card", lambda: "corr-123")
        record = _record()

        assert filter_.filter(record) is True
        assert record.correlation_id == "corr-123"
        assert record.service == "events_card"

    def test_preserves_explicit_correlation_id(self) -> None:
        filter_ = CorrelationIdFilter("svc", lambda: "from-getter")
        record = _record()
        record.correlation_id = "explicit-id"

        filter_.filter(record)

        assert record.correlation_id == "explicit-id"

    def test_empty_string_without_getter(self) -> None:
        filter_ = CorrelationIdFilter("svc")
        record = _record(level=logging.ERROR)

        filter_.filter(record)

        assert record.correlation_id == ""


class TestCreateJsonFormatter:
    """Testes para create_json_formatter e constantes."""

    def test_required_fields(self) -> None:
        assert set(REQUIRED_LOG_FIELDS) == {
            "asctime",
            "levelname",
            "name",
            "message",
            "correlation_id",
            "service",
        }
        assert FIELD_RENAME_MAP == {"levelname": "level", "name": "logger"}

    def test_formats_record_as_json(self) -> None:
        record = _record("Test message")
        record.correlation_id = "abc-123"
        record.service = "events_card"

        payload = json.loads(create_json_formatter().format(record))

        assert payload["message"] == "Test message"
        assert payload["logger"] == "test"
        assert payload["level"] == "INFO"
        assert payload["correlation_id"] == "abc-123"
