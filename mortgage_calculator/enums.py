# This project was developed with assistance from AI tools.
"""
Domain enums for the mortgage calculator.

Shared by the calculation services and the Pydantic schemas.
"""

import enum


class PaymentSchedule(str, enum.Enum):
    MONTHLY = "Monthly"
    BI_WEEKLY = "Bi-Weekly"
    ACCELERATED_BI_WEEKLY = "Accelerated Bi-Weekly"
