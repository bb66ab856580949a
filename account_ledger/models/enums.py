"""
Shared enumerations for database models.

Using Python enums mapped to database enums ensures that
only valid values can be stored. An invalid movement kind
is caught at the database level, not just in Python
validation.
"""

import enum


class MovementKind(str, enum.Enum):
    """Direction of a movement. Stored as the single letter."""
    CREDIT = "C"
    DEBIT = "D"

    @classmethod
    def parse(cls, value: str) -> "MovementKind | None":
        """Normalize 'C', 'c', 'D' or 'd'. Anything else is None."""
        if not isinstance(value, str):
            return None
        try:
            return cls(value.upper())
        except ValueError:
            return None
