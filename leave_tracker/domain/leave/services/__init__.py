"""
Domain Services

Business operations that span more than one employee account.
"""

from .leave_directory import LeaveDirectory

__all__ = [
    "LeaveDirectory",
]
