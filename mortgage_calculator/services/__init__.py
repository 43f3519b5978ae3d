# This project was developed with assistance from AI tools.
"""Mortgage calculation engine -- pure functions, no I/O."""

from .calculator import calculate_from_request, calculate_mortgage
from .converters import InvalidPaymentScheduleError
from .validation import validate_loan_request, validate_user_input

__all__ = [
    "InvalidPaymentScheduleError",
    "calculate_from_request",
    "calculate_mortgage",
    "validate_loan_request",
    "validate_user_input",
]
