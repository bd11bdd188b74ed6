"""GET /v1/reference-rate - prevailing FD rate for a tenure"""

from fastapi import APIRouter, Query

from fd_gateway.api.v1.schemas import ReferenceRateResponse
from fd_gateway.domain.reference_rates import reference_rate

router = APIRouter()


@router.get("/reference-rate", response_model=ReferenceRateResponse)
def get_reference_rate(
    tenure_years: float = Query(..., ge=0.1, description="Deposit period in years"),
):
    """Static tenure-bucketed benchmark used by the advisory gate"""
    return ReferenceRateResponse(
        tenure_years=tenure_years,
        reference_rate_percent=reference_rate(tenure_years),
    )
