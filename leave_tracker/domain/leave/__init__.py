"""Leave domain: employee accounts, leave records and the directory service."""

from .entities import EmployeeAccount
from .events import LeaveApplied
from .repositories import AccountRepository, InMemoryAccountRepository
from .services import LeaveDirectory
from .value_objects import LeaveCategory, LeaveRecord

__all__ = [
    "AccountRepository",
    "EmployeeAccount",
    "InMemoryAccountRepository",
    "LeaveApplied",
    "LeaveCategory",
    "LeaveDirectory",
    "LeaveRecord",
]
