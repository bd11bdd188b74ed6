"""Pydantic schemas for API request/response validation"""

from pydantic import BaseModel, Field
from typing import Literal, Optional

CompoundingLabel = Literal["annually", "semi-annually", "quarterly", "monthly"]


class MaturityRequest(BaseModel):
    """Request body for POST /v1/maturity"""

    principal: float = Field(..., gt=0, description="Deposit amount", examples=[100000])
    annual_rate_percent: float = Field(..., ge=0.1, le=100, description="Annual interest rate in percent", examples=[6.5])
    tenure_years: float = Field(..., ge=0.1, description="Deposit period in years", examples=[5])
    compounding: CompoundingLabel = Field("annually", description="How often interest is compounded")


class DisplayFigures(BaseModel):
    """Rounded, formatted figures for rendering; never fed back into calculation"""

    principal: str
    maturity_amount: str
    total_interest: str
    principal_share_pct: float
    interest_share_pct: float


class MaturityResponse(BaseModel):
    """Response for POST /v1/maturity"""

    principal: float
    maturity_amount: float
    total_interest: float
    compounding: CompoundingLabel
    periods_per_year: int
    display: DisplayFigures


class AdvisoryRequest(BaseModel):
    """Request body for POST /v1/advisory"""

    principal: float = Field(..., gt=0, description="Deposit amount")
    annual_rate_percent: float = Field(..., ge=0.1, le=100, description="Annual interest rate in percent")
    tenure_years: float = Field(..., ge=0.1, description="Deposit period in years")
    maturity_amount: float = Field(..., gt=0, description="Maturity amount returned by /v1/maturity")


class AdvisoryResponse(BaseModel):
    """Response for POST /v1/advisory - advisory is null when there is nothing to flag"""

    advisory: Optional[str] = None


class ReferenceRateResponse(BaseModel):
    """Response for GET /v1/reference-rate"""

    tenure_years: float
    reference_rate_percent: float
