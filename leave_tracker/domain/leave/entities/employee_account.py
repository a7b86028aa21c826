"""Employee account aggregate for leave balance bookkeeping."""

import threading
from itertools import combinations
from typing import Any

from pydantic import Field, PrivateAttr, field_validator

from ...shared.base import AggregateRoot
from ...shared.exceptions import (
    InvalidArgumentError,
    InvalidLeaveDateError,
    LeaveLimitExceededError,
)
from ...shared.validation import BusinessRuleValidators, DataSanitizer
from ..events import LeaveApplied
from ..value_objects.leave_record import LeaveRecord

NAME_MAX_LENGTH = 100


class EmployeeAccount(AggregateRoot):
    """
    Employee account holding a leave allotment and the leave applied against it.

    The account is the only place leave records are stored. A record is
    accepted when it fits the remaining balance and does not overlap any
    record already on the account; otherwise the account is left untouched.
    Balances are always derived from the stored records, never kept separately.
    """

    name: str = Field(frozen=True)
    total_allotment: int = Field(frozen=True)

    _records: list[LeaveRecord] = PrivateAttr(default_factory=list)
    _lock: Any = PrivateAttr(default_factory=threading.RLock)

    @field_validator("name", mode="before")
    @classmethod
    def sanitize_name(cls, v):
        return DataSanitizer.sanitize_string(
            "name", v, max_length=NAME_MAX_LENGTH, allow_empty=False
        )

    @field_validator("total_allotment", mode="before")
    @classmethod
    def validate_total_allotment(cls, v):
        BusinessRuleValidators.validate_range("total_allotment", v, 0, None)
        return v

    @classmethod
    def create(cls, name: str, total_allotment: int) -> "EmployeeAccount":
        """
        Create a new employee account with no leave applied.

        Raises:
            InvalidArgumentError: If the name is blank or the allotment negative
        """
        name = DataSanitizer.sanitize_string(
            "name", name, max_length=NAME_MAX_LENGTH, allow_empty=False
        )
        BusinessRuleValidators.validate_range("total_allotment", total_allotment, 0, None)
        return cls(name=name, total_allotment=total_allotment)

    def is_valid(self) -> bool:
        """Validate business rules."""
        with self._lock:
            no_overlaps = not any(
                a.overlaps_with(b) for a, b in combinations(self._records, 2)
            )
            return bool(self.name) and self.remaining_days >= 0 and no_overlaps

    @property
    def applied_records(self) -> tuple[LeaveRecord, ...]:
        """Snapshot of accepted records in the order they were applied."""
        with self._lock:
            return tuple(self._records)

    @property
    def taken_days(self) -> int:
        """Total leave days taken across all accepted records."""
        with self._lock:
            return sum(record.duration_days for record in self._records)

    @property
    def remaining_days(self) -> int:
        """Allotment left after subtracting all taken days."""
        return self.total_allotment - self.taken_days

    def find_overlap(self, record: LeaveRecord) -> LeaveRecord | None:
        """Return the first accepted record overlapping the given one, if any."""
        with self._lock:
            for existing in self._records:
                if existing.overlaps_with(record):
                    return existing
            return None

    def can_accept(self, record: LeaveRecord) -> bool:
        """Check whether a record would pass both the balance and overlap rules."""
        with self._lock:
            return (
                record.duration_days <= self.remaining_days
                and self.find_overlap(record) is None
            )

    def apply(self, record: LeaveRecord) -> None:
        """
        Apply for leave.

        Both rules are checked against the account as it is before the call;
        the record is stored only when both pass.

        Args:
            record: Leave to apply for

        Raises:
            InvalidArgumentError: If record is not a LeaveRecord
            LeaveLimitExceededError: If the leave exceeds the remaining balance
            InvalidLeaveDateError: If the leave overlaps an accepted record
        """
        if not isinstance(record, LeaveRecord):
            raise InvalidArgumentError(
                "record", record, "must be a LeaveRecord", "INVALID_TYPE"
            )

        with self._lock:
            remaining = self.remaining_days
            if record.duration_days > remaining:
                raise LeaveLimitExceededError(record.duration_days, remaining)

            conflict = self.find_overlap(record)
            if conflict is not None:
                raise InvalidLeaveDateError(
                    record.start, record.end, conflict.start, conflict.end
                )

            self._records.append(record)
            self.mark_updated()
            self.add_domain_event(
                LeaveApplied(
                    aggregate_id=self.id,
                    employee_name=self.name,
                    category=record.category,
                    start=record.start,
                    end=record.end,
                    duration_days=record.duration_days,
                    remaining_days=remaining - record.duration_days,
                )
            )

    def __str__(self) -> str:
        return (
            f"EmployeeAccount(id={self.id}, name={self.name!r}, "
            f"total_allotment={self.total_allotment}, taken_days={self.taken_days}, "
            f"remaining_days={self.remaining_days}, "
            f"applied_records={len(self.applied_records)} records)"
        )
