"""
Leave Record Value Object

One approved date range together with its category. Both endpoints are
inclusive, so a record starting and ending on the same day lasts one day.
"""

from datetime import date

from pydantic import computed_field, field_validator, model_validator

from ...shared.base import ValueObject
from ...shared.exceptions import InvalidArgumentError
from ...shared.validation import BusinessRuleValidators
from .enums import LeaveCategory


class LeaveRecord(ValueObject):
    """
    Immutable leave date range with a category.

    Records are compared by value. Two records overlap when their closed date
    intervals intersect, which includes ranges that only share a boundary day.
    """

    category: LeaveCategory
    start: date
    end: date

    @field_validator("start", "end", mode="before")
    @classmethod
    def validate_calendar_date(cls, v, info):
        BusinessRuleValidators.validate_calendar_date(info.field_name, v)
        return v

    @model_validator(mode="after")
    def end_not_before_start(self) -> "LeaveRecord":
        BusinessRuleValidators.validate_date_range("start", self.start, "end", self.end)
        return self

    @classmethod
    def create(cls, category: LeaveCategory | str, start: date, end: date) -> "LeaveRecord":
        """
        Create a leave record, failing fast on malformed input.

        Args:
            category: Leave category (member or its string value)
            start: First day of leave
            end: Last day of leave (inclusive)

        Returns:
            The new leave record

        Raises:
            InvalidArgumentError: If the category is unknown, a date is missing
                or not a calendar date, or start is after end
        """
        BusinessRuleValidators.validate_required_field("category", category)
        try:
            category = LeaveCategory(category)
        except ValueError:
            raise InvalidArgumentError(
                "category", category, "unknown leave category", "INVALID_CATEGORY"
            ) from None

        BusinessRuleValidators.validate_calendar_date("start", start)
        BusinessRuleValidators.validate_calendar_date("end", end)
        BusinessRuleValidators.validate_date_range("start", start, "end", end)

        return cls(category=category, start=start, end=end)

    @computed_field  # type: ignore[prop-decorator]
    @property
    def duration_days(self) -> int:
        """Number of leave days, counting both endpoints."""
        return (self.end - self.start).days + 1

    def overlaps_with(self, other: "LeaveRecord") -> bool:
        """Check if this record's closed date range intersects another's."""
        return self.start <= other.end and self.end >= other.start

    def contains(self, day: date) -> bool:
        """Check if a day falls within this record."""
        return self.start <= day <= self.end

    def describe_range(self) -> str:
        return f"{self.start.isoformat()} to {self.end.isoformat()}"

    def __str__(self) -> str:
        return (
            f"{self.category} leave {self.describe_range()} "
            f"({self.duration_days} days)"
        )

