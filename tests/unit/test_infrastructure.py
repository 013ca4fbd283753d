"""
Tests for Logging and Settings.
"""

import json
import logging
import sys

import pytest

from business_dates.config.settings import LoggingSettings, WorkDaySettings
from business_dates.core.business_days import RANGE_SLACK_DAYS
from business_dates.infrastructure.logging import (
    JsonFormatter,
    StructuredLogger,
    get_logger,
    log_duration,
)


def _record(level: int = logging.INFO, **extra_fields) -> logging.LogRecord:
    record = logging.LogRecord(
        name="business_dates.test",
        level=level,
        pathname=__file__,
        lineno=42,
        msg="hello %s",
        args=("world",),
        exc_info=None,
    )
    record.extra_fields = extra_fields
    return record


class TestJsonFormatter:
    """Tests for JsonFormatter."""

    def test_basic_fields(self):
        entry = json.loads(JsonFormatter().format(_record()))

        assert entry["severity"] == "INFO"
        assert entry["message"] == "hello world"
        assert entry["logger"] == "business_dates.test"
        assert "timestamp" in entry
        assert "source" not in entry

    def test_extra_fields(self):
        entry = json.loads(JsonFormatter().format(_record(work_days=3, year=2010)))

        assert entry["work_days"] == 3
        assert entry["year"] == 2010

    def test_long_values_truncated(self):
        entry = json.loads(JsonFormatter().format(_record(note="a" * 2000)))
        assert entry["note"].endswith("... [truncated]")
        assert len(entry["note"]) < 2000

    def test_source_location_for_warnings(self):
        entry = json.loads(JsonFormatter().format(_record(logging.WARNING)))
        assert entry["severity"] == "WARNING"
        assert entry["source"]["line"] == 42

    def test_exception_info(self):
        record = _record(logging.ERROR)
        try:
            raise ValueError("boom")
        except ValueError:
            record.exc_info = sys.exc_info()
        entry = json.loads(JsonFormatter().format(record))
        assert "ValueError: boom" in entry["exception"]


class TestStructuredLogger:
    """Tests for StructuredLogger."""

    def test_with_fields_merges_context(self):
        logger = get_logger("business_dates.test").with_fields(year=2010)
        assert isinstance(logger, StructuredLogger)

        _, kwargs = logger.process("msg", {"extra": {"extra_fields": {"week": 43}}})
        assert kwargs["extra"]["extra_fields"] == {"year": 2010, "week": 43}

    def test_get_logger_configures_handler_once(self):
        get_logger("business_dates.once")
        get_logger("business_dates.once")
        assert len(logging.getLogger("business_dates.once").handlers) == 1


class TestLogDuration:
    """Tests for log_duration decorator."""

    def test_returns_result(self):
        @log_duration("double")
        def double(x):
            return 2 * x

        assert double(21) == 42

    def test_reraises_errors(self):
        @log_duration("fail")
        def fail():
            raise RuntimeError("nope")

        with pytest.raises(RuntimeError):
            fail()


class TestSettings:
    """Tests for environment-driven settings."""

    def test_log_level_from_environment(self, monkeypatch):
        monkeypatch.setenv("BUSINESS_DATES_LOG_LEVEL", "debug")
        assert LoggingSettings().level == "DEBUG"

    def test_unknown_log_level_falls_back_to_warning(self, monkeypatch):
        monkeypatch.setenv("BUSINESS_DATES_LOG_LEVEL", "verbose")
        assert LoggingSettings().level == "WARNING"

    def test_unknown_explicit_level_falls_back_to_warning(self):
        assert LoggingSettings(level="loud").level == "WARNING"
        assert LoggingSettings(level=" error ").level == "ERROR"

    def test_unknown_log_level_still_configures_logger(self, monkeypatch):
        monkeypatch.setenv("BUSINESS_DATES_LOG_LEVEL", "verbose")
        base_logger = logging.getLogger("business_dates.unknown_level")
        base_logger.setLevel(LoggingSettings().level)
        assert base_logger.level == logging.WARNING

    def test_log_level_default(self, monkeypatch):
        monkeypatch.delenv("BUSINESS_DATES_LOG_LEVEL", raising=False)
        assert LoggingSettings().level == "WARNING"

    def test_default_holiday_table_from_environment(self, monkeypatch):
        monkeypatch.setenv("BUSINESS_DATES_DEFAULT_HOLIDAYS", " Danish ")
        assert WorkDaySettings().default_holiday_table == "danish"

    def test_default_holiday_table_unset(self, monkeypatch):
        monkeypatch.setenv("BUSINESS_DATES_DEFAULT_HOLIDAYS", "")
        assert WorkDaySettings().default_holiday_table is None
        assert WorkDaySettings().range_slack_days == RANGE_SLACK_DAYS
