"""Enumeration types for loan entities."""

from enum import Enum


class LoanCategory(str, Enum):
    BUSINESS = "Business"
    PERSONAL = "Personal"
    MORTGAGE = "Mortgage"
    CAR = "Car"

    @classmethod
    def from_choice(cls, choice: int) -> "LoanCategory | None":
        """Map a 1-based menu choice to a category, or None when out of range."""
        members = list(cls)
        if 1 <= choice <= len(members):
            return members[choice - 1]
        return None

    @property
    def label(self) -> str:
        return self.value


class RateType(str, Enum):
    FIXED = "Fixed"
    FLEXIBLE = "Flexible"
