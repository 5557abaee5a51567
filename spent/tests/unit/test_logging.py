"""
Unit tests for logging configuration.
"""

import json
import logging

import pytest
from pythonjsonlogger.json import JsonFormatter

from spent.core import logging as spent_logging
from spent.core.config import Settings


@pytest.fixture
def root_logger():
    """Restore root logger handlers and level after each test."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    yield root
    for handler in root.handlers[:]:
        root.removeHandler(handler)
    for handler in handlers:
        root.addHandler(handler)
    root.setLevel(level)


class TestSetupLogging:
    """Test handler setup."""

    def test_json_format(self, root_logger, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test JSON output uses the JSON formatter."""
        monkeypatch.setattr(spent_logging, "settings", Settings(log_format="json"))

        spent_logging.setup_logging()

        assert len(root_logger.handlers) == 1
        assert isinstance(root_logger.handlers[0].formatter, JsonFormatter)

    def test_text_format(self, root_logger, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test text output uses a plain formatter."""
        monkeypatch.setattr(
            spent_logging, "settings", Settings(log_format="text", log_level="warning")
        )

        spent_logging.setup_logging()

        formatter = root_logger.handlers[0].formatter
        assert not isinstance(formatter, JsonFormatter)
        assert root_logger.level == logging.WARNING

    def test_json_record_carries_audit_fields(self) -> None:
        """Test audit extras appear as JSON keys."""
        formatter = JsonFormatter(fmt="%(name)s %(levelname)s %(message)s")
        record = logging.LogRecord("audit", logging.INFO, __file__, 1, "Currency changed", None, None)
        record.event = "currency_changed"
        record.code = "EUR"

        payload = json.loads(formatter.format(record))

        assert payload["message"] == "Currency changed"
        assert payload["event"] == "currency_changed"
        assert payload["code"] == "EUR"
