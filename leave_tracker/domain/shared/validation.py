"""
Validators and sanitizers shared by domain entities and value objects.

Every check raises InvalidArgumentError, naming the offending field so the
error can be reported back to whoever supplied the value.
"""

import re
from datetime import date
from typing import Any

from .exceptions import InvalidArgumentError


# Input Sanitization Utilities
class DataSanitizer:
    """Utilities for cleaning and sanitizing input data."""

    @staticmethod
    def sanitize_string(
        field_name: str,
        value: Any,
        max_length: int | None = None,
        strip: bool = True,
        allow_empty: bool = True,
    ) -> str:
        """
        Sanitize string input.

        Args:
            field_name: Name of the field being sanitized (for error reporting)
            value: Input string
            max_length: Maximum allowed length
            strip: Whether to strip whitespace
            allow_empty: Whether to allow empty strings

        Returns:
            Sanitized string

        Raises:
            InvalidArgumentError: If validation fails
        """
        if not isinstance(value, str):
            raise InvalidArgumentError(
                field_name, value, "must be a string", "INVALID_TYPE"
            )

        # Remove null bytes and control characters
        value = re.sub(r"[\x00-\x08\x0b\x0c\x0e-\x1f\x7f-\x84\x86-\x9f]", "", value)

        if strip:
            value = value.strip()

        if not allow_empty and not value:
            raise InvalidArgumentError(
                field_name, value, "cannot be empty or blank", "EMPTY_VALUE"
            )

        if max_length and len(value) > max_length:
            raise InvalidArgumentError(
                field_name,
                value,
                f"exceeds maximum length of {max_length}",
                "TOO_LONG",
            )

        return value


# Business Rule Validators
class BusinessRuleValidators:
    """Collection of business rule validation functions."""

    @staticmethod
    def validate_required_field(field_name: str, value: Any) -> None:
        """Validate that required field is present."""
        if value is None:
            raise InvalidArgumentError(
                field_name, value, f"{field_name} is required", "REQUIRED_FIELD"
            )

    @staticmethod
    def validate_calendar_date(field_name: str, value: Any) -> None:
        """Validate that value is a plain calendar date (not a datetime)."""
        BusinessRuleValidators.validate_required_field(field_name, value)
        # datetime is a subclass of date
        if not isinstance(value, date) or hasattr(value, "hour"):
            raise InvalidArgumentError(
                field_name, value, "must be a calendar date", "INVALID_DATE"
            )

    @staticmethod
    def validate_date_range(
        start_field: str, start_date: date, end_field: str, end_date: date
    ) -> None:
        """Validate an inclusive date range (end on or after start)."""
        if end_date < start_date:
            raise InvalidArgumentError(
                end_field,
                end_date,
                f"{end_field} cannot be before {start_field}",
                "INVALID_DATE_RANGE",
            )

    @staticmethod
    def validate_range(
        field_name: str,
        value: Any,
        min_val: int | None = None,
        max_val: int | None = None,
    ) -> None:
        """Validate that an integer value is within specified range."""
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidArgumentError(
                field_name, value, "must be an integer", "INVALID_TYPE"
            )

        if min_val is not None and value < min_val:
            raise InvalidArgumentError(
                field_name, value, f"must be at least {min_val}", "BELOW_MINIMUM"
            )

        if max_val is not None and value > max_val:
            raise InvalidArgumentError(
                field_name, value, f"must be at most {max_val}", "ABOVE_MAXIMUM"
            )
