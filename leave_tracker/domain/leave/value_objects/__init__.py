"""Value objects for the leave domain."""

from .enums import LeaveCategory
from .leave_record import LeaveRecord

__all__ = [
    "LeaveCategory",
    "LeaveRecord",
]
