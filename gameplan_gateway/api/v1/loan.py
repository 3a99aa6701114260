"""POST /calculate-loan - Fixed-rate amortization schedule endpoint"""

import time
from fastapi import APIRouter, Depends, Request

from gameplan_gateway.api.v1.schemas import (
    LoanCalculationRequest,
    LoanCalculationResponse,
    RepaymentEntrySchema,
    ErrorResponse,
)
from gameplan_gateway.api.dependencies import get_request_id, get_max_term_periods
from gameplan_gateway.domain.amortization import compute
from gameplan_gateway.domain.models import LoanRequest
from gameplan_gateway.infrastructure.observability.metrics import record_calculation
from gameplan_gateway.infrastructure.observability.logging import log_calculation

router = APIRouter()


@router.post(
    "/calculate-loan",
    response_model=LoanCalculationResponse,
    responses={400: {"model": ErrorResponse}},
)
def calculate_loan(
    request_body: LoanCalculationRequest,
    request: Request,
    max_term_periods: int = Depends(get_max_term_periods),
):
    """
    Compute the monthly payment and full repayment schedule for a loan.

    Flow:
    1. Map the wire body onto a LoanRequest
    2. Run the amortization engine (raises InvalidInputError -> HTTP 400)
    3. Serialize the schedule back to the wire format
    """
    start_time = time.time()
    request_id = get_request_id(request)

    loan = LoanRequest(
        principal=request_body.loan_amount,
        annual_rate_percent=request_body.interest_rate,
        term_periods=request_body.duration,
    )
    result = compute(loan, max_term_periods=max_term_periods)

    duration_ms = (time.time() - start_time) * 1000
    record_calculation(loan.term_periods)
    log_calculation(
        request_id,
        loan.principal,
        loan.term_periods,
        result.payment,
        result.total_interest,
        result.total_paid,
        duration_ms,
    )

    return LoanCalculationResponse(
        monthly_payment=result.payment,
        total_interest_paid=result.total_interest,
        repayment_schedule=[
            RepaymentEntrySchema(
                month=entry.period,
                monthly_payment=entry.payment,
                interest_portion=entry.interest_portion,
                principal_portion=entry.principal_portion,
                remaining_balance=entry.remaining_balance,
            )
            for entry in result.schedule
        ],
    )
