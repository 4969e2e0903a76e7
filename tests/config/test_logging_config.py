"""Tests for the logging configuration module."""

import json
import logging
from logging.handlers import RotatingFileHandler

import pytest
import structlog

from wwdcsearch.config import WWDCSearchSettings, get_logger, reset_settings
from wwdcsearch.config.logging import configure_logging


@pytest.fixture(autouse=True)
def reset_logging_state():
    """Restore the root logger after each test."""
    root_logger = logging.getLogger()
    original_level = root_logger.level
    original_handlers = root_logger.handlers.copy()

    yield

    for handler in root_logger.handlers.copy():
        root_logger.removeHandler(handler)
        if handler not in original_handlers:
            handler.close()
    for handler in original_handlers:
        root_logger.addHandler(handler)
    root_logger.setLevel(original_level)


class TestConfigureLogging:
    """Test configure_logging."""

    def test_log_level(self):
        """Test that the root logger gets the configured level."""
        configure_logging(WWDCSearchSettings(log_level="DEBUG"))

        assert logging.getLogger().level == logging.DEBUG

    def test_console_handler_only_by_default(self):
        """Test the default handler set."""
        configure_logging(WWDCSearchSettings())

        handlers = logging.getLogger().handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.StreamHandler)
        assert isinstance(handlers[0].formatter, structlog.stdlib.ProcessorFormatter)

    def test_log_file(self, tmp_path):
        """Test that a rotating file handler is added and its directory created."""
        log_file = tmp_path / "logs" / "wwdcsearch.log"

        configure_logging(WWDCSearchSettings(log_file=log_file, log_level="INFO"))

        file_handlers = [
            h for h in logging.getLogger().handlers if isinstance(h, RotatingFileHandler)
        ]
        assert len(file_handlers) == 1
        assert log_file.parent.is_dir()

    def test_json_format_writes_json(self, tmp_path):
        """Test that JSON formatted records are parseable."""
        log_file = tmp_path / "app.log"
        configure_logging(
            WWDCSearchSettings(log_file=log_file, log_level="INFO", log_format="json")
        )

        structlog.get_logger("wwdcsearch.test").info("Corpus loaded", videos=3)
        for handler in logging.getLogger().handlers:
            handler.flush()

        record = json.loads(log_file.read_text(encoding="utf-8").splitlines()[-1])
        assert record["event"] == "Corpus loaded"
        assert record["videos"] == 3
        assert record["level"] == "info"

    def test_records_reach_caplog(self, caplog):
        """Test that structlog events are visible to pytest."""
        configure_logging(WWDCSearchSettings(log_level="INFO"))
        # basicConfig(force=True) dropped pytest's capture handler
        logging.getLogger().addHandler(caplog.handler)

        with caplog.at_level(logging.INFO):
            structlog.get_logger("wwdcsearch.caplog").info("Search completed")

        assert "Search completed" in caplog.text


def test_get_logger_is_cached():
    """Test that loggers are reused per name."""
    assert get_logger("wwdcsearch.cached") is get_logger("wwdcsearch.cached")


def test_get_logger_survives_invalid_settings(monkeypatch):
    """Test that a bad WWDCSEARCH_* value does not break logger creation."""
    monkeypatch.setenv("WWDCSEARCH_SEARCH_DEFAULT_LIMIT", "-1")
    reset_settings()

    logger = get_logger("wwdcsearch.fallback")

    assert logger is not None
    assert logging.getLogger().level == logging.WARNING
