"""Domain enums for leave bookkeeping."""

from enum import Enum


class LeaveCategory(str, Enum):
    """Leave category. Informational only; never affects balance or overlap rules."""

    CASUAL = "casual"
    SICK = "sick"
    ANNUAL = "annual"

    @property
    def label(self) -> str:
        """Human readable name."""
        return self.value.capitalize()

    def __str__(self) -> str:
        return self.name
