# This project was developed with assistance from AI tools.
"""Public API routes -- no authentication required."""

import logging

from fastapi import APIRouter, Request, status
from fastapi.responses import JSONResponse

from ..core.errors import build_error, get_request_id
from ..enums import PaymentSchedule
from ..schemas.calculator import (
    CalculationResult,
    CalculatorOptions,
    LoanRequest,
    PaymentScheduleOption,
)
from ..schemas.error import ErrorResponse
from ..services.calculator import calculate_from_request
from ..services.converters import periods_per_year
from ..services.validation import validate_loan_request

logger = logging.getLogger(__name__)

router = APIRouter()

AMORTIZATION_PERIODS: list[int] = [5, 10, 15, 20, 25, 30]

CALCULATOR_OPTIONS = CalculatorOptions(
    payment_schedules=[
        PaymentScheduleOption(name=schedule, periods_per_year=periods_per_year(schedule))
        for schedule in PaymentSchedule
    ],
    amortization_periods=AMORTIZATION_PERIODS,
    default_amortization_period=5,
    default_payment_schedule=PaymentSchedule.MONTHLY,
)


@router.get("/calculator-options", response_model=CalculatorOptions)
async def get_calculator_options() -> CalculatorOptions:
    """Return the payment schedules and amortization periods the form offers."""
    return CALCULATOR_OPTIONS


@router.post(
    "/calculate",
    response_model=CalculationResult,
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_500_INTERNAL_SERVER_ERROR: {"model": ErrorResponse},
    },
)
async def calculate_mortgage(req: LoanRequest, request: Request):
    """Calculate the periodic mortgage payment, including default insurance.

    Invalid input returns 400 with per-field messages in ``errors``.
    """
    errors = validate_loan_request(req)
    if errors:
        logger.info("Rejected calculation request: %s", ", ".join(sorted(errors)))
        body = build_error(
            status.HTTP_400_BAD_REQUEST,
            "One or more fields are invalid.",
            get_request_id(request),
            errors=errors,
        )
        return JSONResponse(status_code=status.HTTP_400_BAD_REQUEST, content=body.model_dump())

    return calculate_from_request(req)
