"""
Custom exceptions for the business-dates library.

Provides a hierarchy separating caller mistakes (bad arguments) from
internal defects. Malformed calendar dates (e.g. 31 April) are not wrapped:
the ``ValueError`` raised by ``datetime`` propagates as-is.
"""

from typing import Any, Optional


class BusinessDatesError(Exception):
    """Base exception for all business-dates errors."""

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


# =============================================================================
# Validation Errors (caller mistakes)
# =============================================================================

class ValidationError(BusinessDatesError):
    """Base exception for rejected arguments."""
    pass


class OutOfRangeError(ValidationError):
    """Raised when an integer component falls outside its documented bounds."""

    def __init__(self, field: str, value: Any, low: int, high: int):
        super().__init__(
            f"'{field}' must be in range [{low}, {high}], got {value!r}",
            {"field": field, "value": value, "low": low, "high": high}
        )
        self.field = field
        self.value = value
        self.low = low
        self.high = high


class InvalidArgumentError(ValidationError):
    """Raised when a structural precondition on an argument is violated."""

    def __init__(self, field: str, message: str):
        super().__init__(
            f"Invalid argument '{field}': {message}",
            {"field": field}
        )
        self.field = field


class OrderingError(InvalidArgumentError):
    """Raised when a range start is not strictly before its end."""

    def __init__(self, start: Any, end: Any):
        super().__init__("start", f"{start!r} must be before {end!r}")
        self.details.update({"start": start, "end": end})
        self.start = start
        self.end = end


# =============================================================================
# Internal Errors (defects)
# =============================================================================

class InternalInvariantError(BusinessDatesError):
    """Raised when an internal estimate proves wrong. Indicates a defect."""
    pass
