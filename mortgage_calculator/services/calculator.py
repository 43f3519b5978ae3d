# This project was developed with assistance from AI tools.
"""Mortgage payment calculation logic.

Pure math, no I/O. Expects input that has already passed
``validate_user_input``. The validator checks only that a payment schedule
was supplied, so an unknown one is raised from here.
"""

import logging

from ..enums import PaymentSchedule
from ..schemas.calculator import CalculationResult, LoanRequest
from .converters import percent_to_decimal, per_period_rate, periods_per_year, total_payments
from .insurance import (
    apply_insurance,
    down_payment_percentage,
    insurance_rate_tier,
    is_insurance_required,
    premium_for_loan,
)
from .payment import periodic_payment
from .validation import parse_amount

logger = logging.getLogger(__name__)


def calculate_mortgage(
    property_price: float,
    down_payment: float,
    interest_rate: float,
    amortization_period: float,
    payment_schedule: PaymentSchedule | str,
) -> CalculationResult:
    """Compute the periodic payment and insurance breakdown for a purchase.

    Args:
        property_price: Purchase price of the property.
        down_payment: Amount paid up front.
        interest_rate: Annual interest rate as a percentage (5 means 5%).
        amortization_period: Years over which the loan is repaid.
        payment_schedule: One of the ``PaymentSchedule`` values.

    Raises:
        InvalidPaymentScheduleError: ``payment_schedule`` is not supported.
    """
    periods = periods_per_year(payment_schedule)
    schedule = PaymentSchedule(payment_schedule)
    annual_rate = percent_to_decimal(interest_rate)
    rate = per_period_rate(annual_rate, periods)
    n_payments = total_payments(periods, amortization_period)

    down_pct = down_payment_percentage(property_price, down_payment)
    needs_insurance = is_insurance_required(property_price, down_payment)

    mortgage_amount = property_price - down_payment
    insurance_rate = 0.0
    premium = 0.0
    if needs_insurance:
        insurance_rate = insurance_rate_tier(down_pct)
        premium = premium_for_loan(property_price, down_payment, insurance_rate)
        mortgage_amount = apply_insurance(mortgage_amount, premium)

    payment = periodic_payment(mortgage_amount, n_payments, rate)

    logger.debug(
        "Calculated %s payment over %s payments (insured=%s)",
        schedule.value,
        n_payments,
        needs_insurance,
    )

    return CalculationResult(
        periodic_payment=payment,
        total_mortgage_amount=mortgage_amount,
        needs_insurance=needs_insurance,
        insurance_rate=insurance_rate,
        insurance_premium=premium,
        per_period_interest_rate=rate,
        annual_interest_rate=annual_rate,
        total_number_of_payments=n_payments,
        periods_per_year=periods,
        down_payment_percentage=down_pct,
        down_payment=down_payment,
        property_price=property_price,
        payment_schedule=schedule,
    )


def calculate_from_request(req: LoanRequest) -> CalculationResult:
    """Parse a validated LoanRequest and calculate it."""
    return calculate_mortgage(
        property_price=parse_amount(req.property_price),
        down_payment=parse_amount(req.down_payment),
        interest_rate=parse_amount(req.interest_rate),
        amortization_period=parse_amount(req.amortization_period),
        payment_schedule=req.payment_schedule.strip(),
    )
