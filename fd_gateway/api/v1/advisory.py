"""POST /v1/advisory - best-effort caution message for unusual deposit inputs"""

import time
import logging
from fastapi import APIRouter, Depends, HTTPException, Request

from fd_gateway.api.v1.schemas import AdvisoryRequest, AdvisoryResponse
from fd_gateway.api.dependencies import get_advisory_flow, get_request_id
from fd_gateway.domain.advisory import AdvisoryFlow
from fd_gateway.infrastructure.observability.metrics import record_advisory
from fd_gateway.infrastructure.observability.logging import log_advisory

router = APIRouter()


@router.post("/advisory", response_model=AdvisoryResponse)
async def create_advisory(
    request_body: AdvisoryRequest,
    request: Request,
    flow: AdvisoryFlow = Depends(get_advisory_flow),
):
    """
    Check deposit inputs against reference rates and explain anything unusual.

    Flow:
    1. Look up the reference rate for the tenure
    2. Compare rate and maturity amount against the deterministic gate
    3. If the gate fires, ask the generation service for a short caution
    4. Return the caution, or null

    Generation failures are absorbed and reported as null.
    """
    start_time = time.time()
    request_id = get_request_id(request)

    try:
        outcome = await flow.evaluate(
            request_body.principal,
            request_body.annual_rate_percent,
            request_body.tenure_years,
            request_body.maturity_amount,
        )
    except Exception as e:
        logging.error(f"Unexpected error: {e}", extra={"request_id": request_id})
        raise HTTPException(status_code=500, detail="Internal server error")

    duration_ms = (time.time() - start_time) * 1000
    record_advisory(outcome.outcome, outcome.assessment.reasons)
    log_advisory(request_id, outcome.outcome, outcome.assessment.reasons, duration_ms)

    return AdvisoryResponse(advisory=outcome.message)
