"""
Domain Exceptions

Defines custom exceptions for leave bookkeeping errors with discriminated types.
Input problems (bad arguments, unknown accounts) and business rule rejections
(insufficient balance, overlapping dates) are kept apart so callers can react
to each differently.
"""

from datetime import date
from enum import Enum
from uuid import UUID

DetailValue = str | int | bool | None


class ErrorType(str, Enum):
    """Error type enumeration for discriminated unions."""

    VALIDATION = "validation"
    BUSINESS_RULE = "business_rule"
    NOT_FOUND = "not_found"


class DomainError(Exception):
    """Base class for all domain errors with type discrimination."""

    def __init__(
        self,
        message: str,
        error_type: ErrorType,
        details: dict[str, DetailValue] | None = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_type = error_type
        self.details = details or {}

    def to_dict(self) -> dict[str, str | dict[str, DetailValue]]:
        """Convert error to dictionary for API responses."""
        return {
            "type": self.error_type.value,
            "message": self.message,
            "details": self.details,
        }


class InvalidArgumentError(DomainError, ValueError):
    """Raised when a constructor or operation receives malformed input."""

    def __init__(
        self,
        field_name: str,
        value: object,
        message: str,
        error_code: str | None = None,
    ) -> None:
        self.field_name = field_name
        self.value = value
        self.error_code = error_code or "INVALID_ARGUMENT"

        details: dict[str, DetailValue] = {
            "field": field_name,
            "value": str(value) if value is not None else None,
            "error_code": self.error_code,
        }
        super().__init__(
            f"Invalid value for '{field_name}': {message}",
            ErrorType.VALIDATION,
            details,
        )


class NotFoundError(DomainError):
    """Base class for lookups of entities that do not exist."""

    def __init__(self, message: str, details: dict[str, DetailValue] | None = None) -> None:
        super().__init__(message, ErrorType.NOT_FOUND, details)


class EmployeeNotFoundError(NotFoundError):
    """Raised when an employee account id is not registered."""

    def __init__(self, account_id: UUID | str) -> None:
        details: dict[str, DetailValue] = {
            "account_id": str(account_id),
            "entity_type": "employee_account",
        }
        super().__init__(f"Employee with ID {account_id} not found", details)
        self.account_id = account_id


class LeaveRuleError(DomainError):
    """Base class for leave applications rejected by a business rule."""

    def __init__(self, message: str, details: dict[str, DetailValue] | None = None) -> None:
        super().__init__(message, ErrorType.BUSINESS_RULE, details)


class LeaveLimitExceededError(LeaveRuleError):
    """Raised when requested leave is longer than the remaining balance."""

    def __init__(self, requested_days: int, remaining_days: int) -> None:
        details: dict[str, DetailValue] = {
            "requested_days": requested_days,
            "remaining_days": remaining_days,
        }
        super().__init__(
            f"Cannot apply for {requested_days} days. "
            f"Only {remaining_days} leaves remaining.",
            details,
        )
        self.requested_days = requested_days
        self.remaining_days = remaining_days


class InvalidLeaveDateError(LeaveRuleError):
    """Raised when requested leave overlaps leave that is already booked."""

    def __init__(
        self,
        requested_start: date,
        requested_end: date,
        existing_start: date,
        existing_end: date,
    ) -> None:
        details: dict[str, DetailValue] = {
            "requested_start": requested_start.isoformat(),
            "requested_end": requested_end.isoformat(),
            "existing_start": existing_start.isoformat(),
            "existing_end": existing_end.isoformat(),
        }
        super().__init__(
            f"Leave dates {requested_start} to {requested_end} overlap with "
            f"existing leave from {existing_start} to {existing_end}.",
            details,
        )
        self.existing_start = existing_start
        self.existing_end = existing_end
