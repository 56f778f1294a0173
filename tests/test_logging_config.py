"""
Tests for structured logging configuration
"""

import json
import logging
import sys

import pytest

from account_management.logging_config import (
    JSONFormatter, setup_logging, get_logger, log_action
)


class TestJSONFormatter:
    """Test JSON rendering of log records"""

    def test_basic_record(self):
        record = logging.LogRecord(
            "account_management", logging.INFO, __file__, 1, "hello %s", ("world",), None
        )

        payload = json.loads(JSONFormatter().format(record))

        assert payload["level"] == "INFO"
        assert payload["logger"] == "account_management"
        assert payload["module"] == "test_logging_config"
        assert payload["message"] == "hello world"
        assert "timestamp" in payload
        # Unset structured fields are dropped
        assert "action" not in payload
        assert "extra" not in payload

    def test_timestamp_is_record_creation_time(self):
        record = logging.LogRecord(
            "account_management.operations", logging.INFO, __file__, 1, "credited", (), None
        )
        record.created = 0.0

        payload = json.loads(JSONFormatter().format(record))

        assert payload["timestamp"] == "1970-01-01T00:00:00+00:00"
        assert payload["logger"] == "account_management.operations"

    def test_structured_fields(self):
        record = logging.LogRecord(
            "account_management", logging.INFO, __file__, 1, "credited", (), None
        )
        record.action = "credit"
        record.resource = "balance"
        record.extra = {"amount": 100}

        payload = json.loads(JSONFormatter().format(record))

        assert payload["action"] == "credit"
        assert payload["resource"] == "balance"
        assert payload["extra"] == {"amount": 100}

    def test_exception_included(self):
        try:
            raise RuntimeError("boom")
        except RuntimeError:
            exc_info = sys.exc_info()

        record = logging.LogRecord(
            "account_management", logging.ERROR, __file__, 1, "failed", (), exc_info
        )
        payload = json.loads(JSONFormatter().format(record))

        assert "RuntimeError: boom" in payload["exception"]


class TestSetupLogging:
    """Test logger setup"""

    def test_json_handler_installed(self):
        logger = setup_logging("INFO")

        assert logger.name == "account_management"
        assert logger.level == logging.INFO
        assert logger.propagate is False
        assert len(logger.handlers) == 1
        assert isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_text_format(self):
        logger = setup_logging("debug", log_format="text")

        assert logger.level == logging.DEBUG
        assert not isinstance(logger.handlers[0].formatter, JSONFormatter)

    def test_repeated_setup_does_not_duplicate_handlers(self):
        setup_logging("INFO")
        logger = setup_logging("WARNING")

        assert len(logger.handlers) == 1
        assert logger.level == logging.WARNING

    def test_invalid_level(self):
        with pytest.raises(ValueError):
            setup_logging("LOUD")

    def test_invalid_format(self):
        with pytest.raises(ValueError):
            setup_logging("INFO", log_format="xml")

    def test_output_goes_to_stderr(self, capsys):
        logger = setup_logging("INFO")
        log_action(get_logger("account_management.operations"), "info", "Account credited",
                   action="credit", resource="balance", extra={"amount": 5})

        captured = capsys.readouterr()
        assert captured.out == ""
        payload = json.loads(captured.err.strip().splitlines()[-1])
        assert payload["action"] == "credit"
        assert payload["extra"] == {"amount": 5}
        assert logger.handlers


class TestLogAction:
    """Test structured action logging"""

    def test_fields_attached(self, caplog):
        logger = get_logger("account_management.test")
        with caplog.at_level(logging.INFO, logger="account_management"):
            log_action(logger, "info", "did something", action="act",
                       resource="res", extra={"k": 1})

        record = caplog.records[-1]
        assert record.getMessage() == "did something"
        assert record.action == "act"
        assert record.resource == "res"
        assert record.extra == {"k": 1}

    def test_disabled_level_skipped(self, caplog):
        logger = get_logger("account_management.test")
        with caplog.at_level(logging.ERROR, logger="account_management"):
            log_action(logger, "info", "quiet")

        assert caplog.records == []
