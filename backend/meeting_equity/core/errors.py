"""
Custom exceptions for the meeting equity service.

Configuration problems found by the validator are returned as data; the
exceptions here cover inputs the engine refuses to guess about and
failures of the holiday data source.
"""

from typing import Any, Dict, Optional


class MeetingEquityError(Exception):
    """Base exception for all meeting equity errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class InvalidInputError(MeetingEquityError, ValueError):
    """
    Raised when an engine input cannot be used as given.

    ``field`` names the offending input, e.g. ``"timezone"`` or
    ``"proposed_time"``.
    """

    def __init__(
        self,
        field: str,
        message: str,
        details: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message, details)
        self.field = field


class ConfigValidationError(MeetingEquityError):
    """Raised when a working-hours config is built from invalid data."""

    def __init__(self, errors: Dict[str, str]):
        super().__init__(
            "Invalid working hours configuration", details={"errors": errors}
        )
        self.errors = errors


class HolidaySourceError(MeetingEquityError):
    """Raised when holiday reference data cannot be fetched."""

    def __init__(
        self,
        message: str,
        country_code: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        super().__init__(
            message,
            details={"country_code": country_code, "status_code": status_code},
        )
        self.country_code = country_code
        self.status_code = status_code
