"""
Infrastructure Layer.

Cross-cutting concerns kept out of the pure core:
- Structured logging
"""

from business_dates.infrastructure.logging import (
    JsonFormatter,
    StructuredLogger,
    get_logger,
    log_duration,
    logger,
)


__all__ = [
    "JsonFormatter",
    "StructuredLogger",
    "get_logger",
    "log_duration",
    "logger",
]
