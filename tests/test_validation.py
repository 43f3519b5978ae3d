# This project was developed with assistance from AI tools.
"""Tests for calculator input validation."""

import pytest

from mortgage_calculator.schemas.calculator import LoanRequest
from mortgage_calculator.services.validation import (
    parse_amount,
    validate_loan_request,
    validate_user_input,
)

VALID = ("100000", "5000", "5", "20", "Monthly")


def _validate(**overrides):
    fields = dict(
        zip(
            (
                "property_price",
                "down_payment",
                "interest_rate",
                "amortization_period",
                "payment_schedule",
            ),
            VALID,
            strict=True,
        )
    )
    fields.update(overrides)
    return validate_user_input(**fields)


class TestParseAmount:
    def test_plain_number(self):
        assert parse_amount("350000") == 350000

    def test_decimal(self):
        assert parse_amount("4.25") == 4.25

    def test_currency_formatting(self):
        assert parse_amount("$450,000") == 450000

    @pytest.mark.parametrize("raw", [None, "", "   ", "abc", "12abc", "nan", "inf", "-Infinity"])
    def test_unparsable(self, raw):
        assert parse_amount(raw) is None

    def test_negative(self):
        assert parse_amount("-100") == -100


class TestValidateUserInput:
    def test_all_valid(self):
        """should return an empty mapping when every field is valid."""
        assert _validate() == {}

    def test_missing_property_price(self):
        errors = _validate(property_price=None)
        assert errors["propertyPriceError"] == "You must submit a valid property price."

    @pytest.mark.parametrize("price", ["0", "-1", "abc"])
    def test_invalid_property_price(self, price):
        assert "propertyPriceError" in _validate(property_price=price)

    def test_zero_down_payment(self):
        errors = _validate(property_price="100000", down_payment="0")
        assert errors["downPaymentError"] == "You must submit a valid deposit."

    def test_missing_down_payment(self):
        errors = _validate(down_payment=None)
        assert errors["downPaymentError"] == "You must submit a valid deposit."

    def test_down_payment_below_five_percent(self):
        errors = _validate(property_price="100000", down_payment="4000")
        assert errors["downPaymentError"] == "A deposit for a mortgage cannot be less than 5%!"

    def test_down_payment_exactly_five_percent(self):
        assert _validate(property_price="100000", down_payment="5000") == {}

    def test_down_payment_exceeds_price(self):
        """should report the exceeds-price message, not the 5% message."""
        errors = _validate(property_price="100000", down_payment="150000")
        assert errors["downPaymentError"] == "A deposit cannot exceed the property's total price."

    def test_down_payment_equal_to_price(self):
        assert _validate(property_price="100000", down_payment="100000") == {}

    def test_invalid_price_skips_price_dependent_deposit_checks(self):
        errors = _validate(property_price=None, down_payment="5000")
        assert "propertyPriceError" in errors
        assert "downPaymentError" not in errors

    def test_missing_interest_rate(self):
        errors = _validate(interest_rate=None)
        assert errors["interestRateError"] == "You must submit a valid interest rate."

    def test_zero_interest_rate(self):
        assert "interestRateError" in _validate(interest_rate="0")

    def test_missing_amortization_period(self):
        errors = _validate(amortization_period=None)
        assert errors["amortizationPeriodError"] == "You must select an amortization period."

    def test_amortization_period_presence_only(self):
        """should not check amortization period positivity."""
        assert _validate(amortization_period="0") == {}

    def test_missing_payment_schedule(self):
        errors = _validate(payment_schedule=None)
        assert errors["paymentScheduleError"] == "You must select a payment schedule."

    def test_unknown_schedule_is_not_a_validation_error(self):
        assert _validate(payment_schedule="Weekly") == {}

    def test_collects_every_failing_field(self):
        errors = validate_user_input(None, None, None, None, None)
        assert set(errors) == {
            "propertyPriceError",
            "downPaymentError",
            "interestRateError",
            "amortizationPeriodError",
            "paymentScheduleError",
        }

    def test_error_keys_follow_check_order(self):
        errors = validate_user_input(None, None, None, None, None)
        assert list(errors) == [
            "propertyPriceError",
            "interestRateError",
            "amortizationPeriodError",
            "paymentScheduleError",
            "downPaymentError",
        ]


def test_validate_loan_request_accepts_camel_case_and_numbers():
    req = LoanRequest.model_validate(
        {
            "propertyPrice": 300000,
            "downPayment": "50000",
            "interestRate": 5,
            "amortizationPeriod": "30",
            "paymentSchedule": "Monthly",
        }
    )
    assert req.property_price == "300000"
    assert validate_loan_request(req) == {}


def test_validate_loan_request_reports_missing_fields():
    errors = validate_loan_request(LoanRequest(property_price="300000"))
    assert "propertyPriceError" not in errors
    assert "downPaymentError" in errors
