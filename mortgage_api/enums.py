# This project was developed with assistance from AI tools.
"""
Domain enums for the mortgage calculator.

Shared by the services and the Pydantic schemas.
"""

import enum


class PaymentSchedule(str, enum.Enum):
    MONTHLY = "monthly"
    BI_WEEKLY = "bi-weekly"
    ACCELERATED_BI_WEEKLY = "accelerated bi-weekly"

    @classmethod
    def parse(cls, value: str) -> "PaymentSchedule | None":
        """Case-insensitive lookup. Returns None for unrecognized schedules."""
        try:
            return cls(value.lower())
        except ValueError:
            return None
