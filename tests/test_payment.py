# This project was developed with assistance from AI tools.
"""Tests for the annuity payment formula."""

import pytest

from mortgage_calculator.services.payment import periodic_payment


def test_thirty_year_monthly_payment():
    result = periodic_payment(300000, 360, 0.05 / 12)
    assert result == pytest.approx(1610.4648690364193, abs=1e-4)


def test_zero_rate_is_straight_line():
    """should divide the principal evenly when there is no interest."""
    assert periodic_payment(120000, 240, 0) == 120000 / 240


def test_total_repaid_exceeds_principal_with_interest():
    payment = periodic_payment(200000, 26 * 25, 0.04 / 26)
    assert payment * 26 * 25 > 200000


def test_zero_principal():
    assert periodic_payment(0, 360, 0.05 / 12) == 0


def test_zero_payments_with_zero_rate_raises():
    with pytest.raises(ZeroDivisionError):
        periodic_payment(100000, 0, 0)
