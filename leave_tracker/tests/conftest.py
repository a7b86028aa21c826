"""
Shared fixtures and factories for leave tracker tests.
"""

from datetime import date

import pytest

from leave_tracker.domain.leave.entities.employee_account import EmployeeAccount
from leave_tracker.domain.leave.services.leave_directory import LeaveDirectory
from leave_tracker.domain.leave.value_objects.enums import LeaveCategory
from leave_tracker.domain.leave.value_objects.leave_record import LeaveRecord


class LeaveRecordFactory:
    """Factory for leave records within a single year."""

    @staticmethod
    def create(
        start: tuple[int, int],
        end: tuple[int, int],
        category: LeaveCategory = LeaveCategory.CASUAL,
        year: int = 2025,
    ) -> LeaveRecord:
        """Create a record from (month, day) pairs."""
        return LeaveRecord.create(
            category, date(year, *start), date(year, *end)
        )


@pytest.fixture
def make_record():
    """Factory fixture building leave records from (month, day) pairs."""
    return LeaveRecordFactory.create


@pytest.fixture
def alice() -> EmployeeAccount:
    """Employee with 20 days of leave."""
    return EmployeeAccount.create("Alice Johnson", 20)


@pytest.fixture
def bob() -> EmployeeAccount:
    """Employee with 10 days of leave."""
    return EmployeeAccount.create("Bob Williams", 10)


@pytest.fixture
def directory(alice, bob) -> LeaveDirectory:
    """Directory with Alice and Bob registered."""
    leave_directory = LeaveDirectory()
    leave_directory.register(alice)
    leave_directory.register(bob)
    return leave_directory
