"""POST /v1/maturity - fixed-deposit maturity calculation endpoint"""

import time
import logging
from fastapi import APIRouter, HTTPException, Request

from fd_gateway.api.v1.schemas import MaturityRequest, MaturityResponse, DisplayFigures
from fd_gateway.api.dependencies import get_request_id
from fd_gateway.domain.models import CompoundingFrequency, DepositInput
from fd_gateway.domain.maturity import calculate
from fd_gateway.domain.exceptions import CalculationError
from fd_gateway.infrastructure.observability.metrics import record_calculation
from fd_gateway.infrastructure.observability.logging import log_calculation
from fd_gateway.utils.currency import format_inr, split_shares

router = APIRouter()


@router.post("/maturity", response_model=MaturityResponse)
def calculate_maturity(request_body: MaturityRequest, request: Request):
    """
    Calculate the maturity amount of a fixed deposit.

    The response is purely numeric and never waits on the advisory;
    clients fetch the advisory separately from POST /v1/advisory.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    compounding = CompoundingFrequency.from_label(request_body.compounding)
    deposit = DepositInput(
        principal=request_body.principal,
        annual_rate_percent=request_body.annual_rate_percent,
        tenure_years=request_body.tenure_years,
        compounding=compounding,
    )

    try:
        result = calculate(deposit)
    except CalculationError as e:
        logging.error(f"Calculation error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=422, detail=str(e))

    principal_pct, interest_pct = split_shares(result.principal, result.total_interest)

    duration_ms = (time.time() - start_time) * 1000
    record_calculation(compounding.label)
    log_calculation(request_id, compounding.label, deposit.tenure_years, duration_ms)

    return MaturityResponse(
        principal=result.principal,
        maturity_amount=result.maturity_amount,
        total_interest=result.total_interest,
        compounding=compounding.label,
        periods_per_year=int(compounding),
        display=DisplayFigures(
            principal=format_inr(result.principal),
            maturity_amount=format_inr(result.maturity_amount),
            total_interest=format_inr(result.total_interest),
            principal_share_pct=round(principal_pct, 2),
            interest_share_pct=round(interest_pct, 2),
        ),
    )
