# This project was developed with assistance from AI tools.
"""Rate and period unit conversions.

Turns the user-facing quantities (annual percentage rate, named payment
schedule, amortization years) into the per-period terms the payment
formula works with.
"""

from typing import assert_never

from ..enums import PaymentSchedule


class InvalidPaymentScheduleError(ValueError):
    """Raised when a payment schedule is not one of the supported schedules."""

    def __init__(self, schedule: object) -> None:
        self.schedule = schedule
        super().__init__(f"Invalid payment schedule: {schedule}")


def percent_to_decimal(percent: float) -> float:
    """Convert a percentage to a decimal, e.g. 5 -> 0.05. No bounds checking."""
    return percent / 100


def periods_per_year(schedule: PaymentSchedule | str | None) -> int:
    """Number of payment periods per year for a payment schedule.

    Raises:
        InvalidPaymentScheduleError: ``schedule`` is not a known schedule
            (including ``None``).
    """
    try:
        schedule = PaymentSchedule(schedule)
    except ValueError:
        raise InvalidPaymentScheduleError(schedule) from None

    match schedule:
        case PaymentSchedule.MONTHLY:
            return 12
        case PaymentSchedule.BI_WEEKLY:
            return 26
        case PaymentSchedule.ACCELERATED_BI_WEEKLY:
            return 27
        case _:
            assert_never(schedule)


def per_period_rate(annual_rate: float, periods: int) -> float:
    """Interest rate charged each period, e.g. 0.05 annual over 12 periods -> 0.004167."""
    return annual_rate / periods


def total_payments(periods: int, years: float) -> float:
    """Total number of payments over the amortization period."""
    return periods * years
