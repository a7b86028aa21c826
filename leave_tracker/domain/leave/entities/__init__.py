"""Leave domain entities."""

from .employee_account import EmployeeAccount

__all__ = [
    "EmployeeAccount",
]
