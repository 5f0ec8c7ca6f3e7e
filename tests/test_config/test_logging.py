"""Testes para whatsapp_cloud.config.logging.

Cobre: configure_logging, ContextFilter, create_json_formatter, get_logger.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator

import pytest

from whatsapp_cloud.config.logging import (
    DEFAULT_SERVICE_NAME,
    FIELD_RENAME_MAP,
    REDACTED,
    REQUIRED_LOG_FIELDS,
    VALID_LOG_LEVELS,
    ContextFilter,
    configure_logging,
    create_json_formatter,
    get_logger,
)


@pytest.fixture(autouse=True)
def restore_root_logger() -> Iterator[None]:
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    root.handlers = handlers
    root.setLevel(level)


def _record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord("whatsapp_cloud.test", logging.INFO, __file__, 1, "evento", None, None)
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestConfigureLogging:
    @pytest.mark.parametrize("level", sorted(VALID_LOG_LEVELS))
    def test_sets_root_level(self, level: str) -> None:
        configure_logging(level=level)
        assert logging.getLogger().level == getattr(logging, level)

    def test_level_is_case_insensitive(self) -> None:
        configure_logging(level="warning")
        assert logging.getLogger().level == logging.WARNING

    def test_invalid_level_raises(self) -> None:
        with pytest.raises(ValueError, match="Invalid log level"):
            configure_logging(level="VERBOSE")

    def test_replaces_existing_handlers(self) -> None:
        configure_logging()
        handler = configure_logging()
        assert logging.getLogger().handlers == [handler]


class TestContextFilter:
    def test_injects_service_and_correlation_id(self) -> None:
        record = _record()
        ContextFilter("bot", lambda: "corr-1").filter(record)
        assert record.service == "bot"
        assert record.correlation_id == "corr-1"

    def test_keeps_explicit_correlation_id(self) -> None:
        record = _record(correlation_id="explicit")
        ContextFilter(DEFAULT_SERVICE_NAME, lambda: "ctx").filter(record)
        assert record.correlation_id == "explicit"

    def test_masks_sensitive_fields(self) -> None:
        record = _record(access_token="secret", to="5511988887777", status_code=200)
        ContextFilter(DEFAULT_SERVICE_NAME).filter(record)
        assert record.access_token == REDACTED
        assert record.to == REDACTED
        assert record.status_code == 200


class TestJsonFormatter:
    def test_renders_required_fields(self) -> None:
        record = _record()
        ContextFilter("bot", lambda: "corr-1").filter(record)

        output = json.loads(create_json_formatter().format(record))

        assert output["message"] == "evento"
        assert output["service"] == "bot"
        assert output["correlation_id"] == "corr-1"
        for original, renamed in FIELD_RENAME_MAP.items():
            assert renamed in output
            assert original not in output
        assert "asctime" in REQUIRED_LOG_FIELDS


def test_get_logger_returns_named_logger() -> None:
    assert get_logger("whatsapp_cloud.client").name == "whatsapp_cloud.client"
