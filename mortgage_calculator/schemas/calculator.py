# This project was developed with assistance from AI tools.
"""Mortgage calculator schemas."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from ..enums import PaymentSchedule

# Error key (e.g. "downPaymentError") -> message. Empty means valid.
ValidationErrors = dict[str, str]


class LoanRequest(BaseModel):
    """Raw calculator input as submitted by the form.

    Every field is optional text; ``validate_loan_request`` decides what is
    acceptable. The form's camelCase names are accepted alongside snake_case.
    """

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    property_price: str | None = None
    down_payment: str | None = None
    interest_rate: str | None = None
    amortization_period: str | None = None
    payment_schedule: str | None = None

    @field_validator("*", mode="before")
    @classmethod
    def _numbers_as_text(cls, value: Any) -> Any:
        if isinstance(value, int | float) and not isinstance(value, bool):
            return str(value)
        return value


class CalculationResult(BaseModel):
    """Mortgage calculation results. Rates are decimals (0.05 means 5%)."""

    model_config = ConfigDict(frozen=True)

    periodic_payment: float
    total_mortgage_amount: float = Field(
        description="Amount financed: price minus down payment, plus any insurance premium.",
    )
    needs_insurance: bool
    insurance_rate: float
    insurance_premium: float
    per_period_interest_rate: float
    annual_interest_rate: float
    total_number_of_payments: float
    periods_per_year: int
    down_payment_percentage: float
    down_payment: float
    property_price: float
    payment_schedule: PaymentSchedule


class PaymentScheduleOption(BaseModel):
    """A selectable payment schedule."""

    name: PaymentSchedule
    periods_per_year: int


class CalculatorOptions(BaseModel):
    """Choices and defaults for the calculator form."""

    payment_schedules: list[PaymentScheduleOption]
    amortization_periods: list[int]
    default_amortization_period: int
    default_payment_schedule: PaymentSchedule
