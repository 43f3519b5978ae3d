# This project was developed with assistance from AI tools.
"""Mortgage default insurance policy (CMHC-style).

Insurance is mandatory when the down payment is below 20% of the property
price. The premium is a tiered percentage of the amount borrowed and is
added to the financed amount.
"""

INSURANCE_THRESHOLD = 0.20

# (upper bound on down payment %, exclusive) -> premium rate
_RATE_TIERS: tuple[tuple[float, float], ...] = (
    (10, 0.045),
    (15, 0.031),
    (20, 0.028),
)


def down_payment_percentage(property_price: float, down_payment: float) -> float:
    """Down payment as a percentage of the property price."""
    return down_payment / property_price * 100


def is_insurance_required(property_price: float, down_payment: float) -> bool:
    """True when the down payment is strictly less than 20% of the price."""
    return down_payment < INSURANCE_THRESHOLD * property_price


def insurance_rate_tier(down_payment_pct: float) -> float:
    """Premium rate for a down payment percentage; 0 at 20% and above."""
    for upper_bound, rate in _RATE_TIERS:
        if down_payment_pct < upper_bound:
            return rate
    return 0.0


def insurance_premium(rate: float, principal_before_insurance: float) -> float:
    """Premium owed on the amount borrowed before insurance."""
    return rate * principal_before_insurance


def premium_for_loan(property_price: float, down_payment: float, rate: float) -> float:
    """Premium for a purchase, charged on ``property_price - down_payment``."""
    return insurance_premium(rate, property_price - down_payment)


def apply_insurance(current_principal: float, premium: float) -> float:
    """Add the insurance premium to the financed amount."""
    return current_principal + premium
