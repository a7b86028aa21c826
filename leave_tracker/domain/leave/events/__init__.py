"""Domain events raised by leave accounts."""

from datetime import date

from ...shared.base import DomainEvent
from ..value_objects.enums import LeaveCategory


class LeaveApplied(DomainEvent):
    """Raised when a leave record is accepted by an employee account."""

    employee_name: str
    category: LeaveCategory
    start: date
    end: date
    duration_days: int
    remaining_days: int


__all__ = ["LeaveApplied"]
