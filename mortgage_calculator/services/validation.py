# This project was developed with assistance from AI tools.
"""Validation of raw calculator input.

Client input arrives as optional text. Each field is checked independently
and failures are collected into a mapping of error key -> message; an empty
mapping means the input is valid. Nothing here raises on bad input.
"""

import math
import re

from ..schemas.calculator import LoanRequest, ValidationErrors
from .insurance import down_payment_percentage

MIN_DOWN_PAYMENT_PCT = 5

PROPERTY_PRICE_ERROR = "propertyPriceError"
DOWN_PAYMENT_ERROR = "downPaymentError"
INTEREST_RATE_ERROR = "interestRateError"
AMORTIZATION_PERIOD_ERROR = "amortizationPeriodError"
PAYMENT_SCHEDULE_ERROR = "paymentScheduleError"

_AMOUNT_NOISE = re.compile(r"[$,\s]")


def parse_amount(value: str | None) -> float | None:
    """Parse a numeric string, ignoring currency symbols and thousands separators.

    Returns None when the value is absent, blank, not a number, or not finite.
    """
    if value is None:
        return None
    cleaned = _AMOUNT_NOISE.sub("", value)
    if not cleaned:
        return None
    try:
        amount = float(cleaned)
    except ValueError:
        return None
    if not math.isfinite(amount):
        return None
    return amount


def _is_positive(amount: float | None) -> bool:
    return amount is not None and amount > 0


def _check_down_payment(price: float | None, down_payment: float | None) -> str | None:
    """Return the first failing down payment rule, or None."""
    if not _is_positive(down_payment):
        return "You must submit a valid deposit."
    # Price errors are reported on their own field
    if not _is_positive(price):
        return None
    if down_payment > price:
        return "A deposit cannot exceed the property's total price."
    if down_payment_percentage(price, down_payment) < MIN_DOWN_PAYMENT_PCT:
        return f"A deposit for a mortgage cannot be less than {MIN_DOWN_PAYMENT_PCT}%!"
    return None


def validate_user_input(
    property_price: str | None,
    down_payment: str | None,
    interest_rate: str | None,
    amortization_period: str | None,
    payment_schedule: str | None,
) -> ValidationErrors:
    """Validate the five calculator fields.

    Down payment rules run in order and stop at the first failure, so the
    field carries at most one message.
    """
    errors: ValidationErrors = {}
    price = parse_amount(property_price)

    if not _is_positive(price):
        errors[PROPERTY_PRICE_ERROR] = "You must submit a valid property price."

    if not _is_positive(parse_amount(interest_rate)):
        errors[INTEREST_RATE_ERROR] = "You must submit a valid interest rate."

    if parse_amount(amortization_period) is None:
        errors[AMORTIZATION_PERIOD_ERROR] = "You must select an amortization period."

    if payment_schedule is None or not payment_schedule.strip():
        errors[PAYMENT_SCHEDULE_ERROR] = "You must select a payment schedule."

    down_payment_error = _check_down_payment(price, parse_amount(down_payment))
    if down_payment_error:
        errors[DOWN_PAYMENT_ERROR] = down_payment_error

    return errors


def validate_loan_request(req: LoanRequest) -> ValidationErrors:
    """Validate a LoanRequest body."""
    return validate_user_input(
        req.property_price,
        req.down_payment,
        req.interest_rate,
        req.amortization_period,
        req.payment_schedule,
    )
