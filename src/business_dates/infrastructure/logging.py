"""
Structured JSON logging.

Provides one-line JSON log records on stdout:
- Severity, message, timestamp and logger name
- Structured extra fields, with long values truncated
- Source location for warnings and above
"""

import json
import logging
import sys
import time
from datetime import datetime, timezone
from functools import wraps
from typing import Any, Callable, Dict, TypeVar

from business_dates.config import settings
from business_dates.core.exceptions import ValidationError


F = TypeVar("F", bound=Callable[..., Any])


class JsonFormatter(logging.Formatter):
    """JSON formatter, one object per record."""

    SEVERITY_MAP = {
        logging.DEBUG: "DEBUG",
        logging.INFO: "INFO",
        logging.WARNING: "WARNING",
        logging.ERROR: "ERROR",
        logging.CRITICAL: "CRITICAL",
    }

    MAX_VALUE_LENGTH = 1000

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "severity": self.SEVERITY_MAP.get(record.levelno, "INFO"),
            "message": record.getMessage(),
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "logger": record.name,
        }

        self._add_extra_fields(record, log_entry)
        self._add_exception_info(record, log_entry)
        self._add_source_location(record, log_entry)

        return json.dumps(log_entry, ensure_ascii=False, default=str)

    def _add_extra_fields(self, record: logging.LogRecord, log_entry: Dict[str, Any]) -> None:
        """Add extra fields passed to the log."""
        extra_fields = getattr(record, "extra_fields", None)
        if extra_fields:
            for key, value in extra_fields.items():
                log_entry[key] = self._sanitize_value(value)

    def _add_exception_info(self, record: logging.LogRecord, log_entry: Dict[str, Any]) -> None:
        if record.exc_info:
            log_entry["exception"] = self.formatException(record.exc_info)

    def _add_source_location(self, record: logging.LogRecord, log_entry: Dict[str, Any]) -> None:
        """Add source location for warnings and above."""
        if record.levelno >= logging.WARNING:
            log_entry["source"] = {
                "file": record.filename,
                "line": record.lineno,
                "function": record.funcName,
            }

    def _sanitize_value(self, value: Any) -> Any:
        """Truncate long string values."""
        if isinstance(value, str) and len(value) > self.MAX_VALUE_LENGTH:
            return value[:self.MAX_VALUE_LENGTH] + "... [truncated]"
        return value


class StructuredLogger(logging.LoggerAdapter):
    """Logger adapter for adding structured fields to logs."""

    def process(self, msg: str, kwargs: Dict[str, Any]) -> tuple:
        extra = kwargs.get("extra", {})
        extra_fields = extra.pop("extra_fields", {})

        if self.extra:
            extra_fields = {**self.extra, **extra_fields}

        kwargs["extra"] = {**extra, "extra_fields": extra_fields}
        return msg, kwargs

    def with_fields(self, **fields: Any) -> "StructuredLogger":
        """Create a new logger with additional fields."""
        new_extra = {**self.extra, **fields}
        return StructuredLogger(self.logger, new_extra)


def get_logger(name: str = "business_dates") -> StructuredLogger:
    """
    Create and configure a structured JSON logger.

    Args:
        name: Logger name.

    Returns:
        Configured StructuredLogger instance.
    """
    base_logger = logging.getLogger(name)

    if not base_logger.handlers:
        base_logger.setLevel(settings.logging.level)

        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(JsonFormatter())

        base_logger.addHandler(handler)
        base_logger.propagate = False

    return StructuredLogger(base_logger, {})


def log_duration(operation: str) -> Callable[[F], F]:
    """
    Decorator to measure and log operation duration.

    Successes and rejected arguments are logged at DEBUG. Any other
    failure is logged at ERROR. Exceptions are always re-raised.

    Args:
        operation: Operation name for logging.
    """
    def decorator(func: F) -> F:
        @wraps(func)
        def wrapper(*args: Any, **kwargs: Any) -> Any:
            logger = get_logger(func.__module__)
            start = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except ValidationError as e:
                logger.debug(
                    f"{operation} rejected: {e}",
                    extra={"extra_fields": {
                        "operation": operation,
                        "status": "rejected",
                        "error_type": type(e).__name__,
                    }}
                )
                raise
            except Exception as e:
                duration_ms = int((time.perf_counter() - start) * 1000)
                logger.error(
                    f"{operation} failed: {e}",
                    extra={"extra_fields": {
                        "operation": operation,
                        "duration_ms": duration_ms,
                        "status": "error",
                        "error_type": type(e).__name__,
                    }}
                )
                raise
            duration_ms = int((time.perf_counter() - start) * 1000)
            logger.debug(
                f"{operation} completed",
                extra={"extra_fields": {
                    "operation": operation,
                    "duration_ms": duration_ms,
                    "status": "success",
                }}
            )
            return result
        return wrapper  # type: ignore
    return decorator


# Global library logger
logger = get_logger("business_dates")
