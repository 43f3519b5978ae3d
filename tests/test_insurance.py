# This project was developed with assistance from AI tools.
"""Tests for the default insurance policy."""

import pytest

from mortgage_calculator.services.insurance import (
    apply_insurance,
    down_payment_percentage,
    insurance_premium,
    insurance_rate_tier,
    is_insurance_required,
    premium_for_loan,
)


class TestInsuranceRequired:
    def test_below_twenty_percent(self):
        assert is_insurance_required(300000, 50000) is True

    def test_just_below_twenty_percent(self):
        assert is_insurance_required(300000, 59999) is True

    def test_exactly_twenty_percent(self):
        """should not require insurance at exactly 20%."""
        assert is_insurance_required(300000, 60000) is False

    def test_above_twenty_percent(self):
        assert is_insurance_required(300000, 70000) is False

    def test_zero_down_payment(self):
        assert is_insurance_required(300000, 0) is True


class TestRateTier:
    @pytest.mark.parametrize(
        ("pct", "rate"),
        [
            (4, 0.045),
            (5, 0.045),
            (9, 0.045),
            (9.99, 0.045),
            (10, 0.031),
            (12, 0.031),
            (14.99, 0.031),
            (15, 0.028),
            (17, 0.028),
            (19.99, 0.028),
            (20, 0),
            (25, 0),
        ],
    )
    def test_tiers(self, pct, rate):
        assert insurance_rate_tier(pct) == rate

    def test_tier_from_purchase(self):
        assert insurance_rate_tier(down_payment_percentage(300000, 45000)) == 0.028


class TestPremium:
    def test_premium(self):
        assert insurance_premium(0.045, 100000) == 4500

    def test_zero_rate(self):
        assert insurance_premium(0, 100000) == 0

    def test_zero_principal(self):
        assert insurance_premium(0.045, 0) == 0

    def test_large_principal(self):
        assert insurance_premium(0.028, 10_000_000) == pytest.approx(280000)

    def test_small_principal(self):
        assert insurance_premium(0.031, 0.01) == pytest.approx(0.00031)

    def test_premium_for_loan_uses_amount_borrowed(self):
        """should charge the premium on price minus down payment."""
        assert premium_for_loan(300000, 50000, 0.028) == pytest.approx(7000)


def test_apply_insurance_adds_premium():
    assert apply_insurance(250000, 7000) == 257000


def test_down_payment_percentage():
    assert down_payment_percentage(300000, 60000) == pytest.approx(20)
