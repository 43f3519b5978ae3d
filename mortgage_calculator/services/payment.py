# This project was developed with assistance from AI tools.
"""Fixed-payment annuity formula."""


def periodic_payment(principal: float, n_payments: float, rate: float) -> float:
    """Payment per period that fully amortizes ``principal`` over ``n_payments``.

    M = P * r * (1 + r)^n / ((1 + r)^n - 1)

    A zero rate falls back to straight-line repayment. ``n_payments`` must be
    non-zero; callers guarantee it through validation.
    """
    if rate == 0:
        return principal / n_payments

    compound = (1 + rate) ** n_payments
    return principal * rate * compound / (compound - 1)
