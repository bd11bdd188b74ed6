"""Compound-interest maturity calculation"""

import math

from fd_gateway.domain.models import CompoundingFrequency, DepositInput, DepositResult
from fd_gateway.domain.exceptions import CalculationError


def compute_maturity(
    principal: float,
    annual_rate_percent: float,
    tenure_years: float,
    compounding: CompoundingFrequency | int = CompoundingFrequency.ANNUAL,
) -> DepositResult:
    """
    Grow the principal by compound interest over the tenure.

    maturity = principal * (1 + r/n) ** (n * t)

    where r is the annual rate as a fraction, n the compounding periods per
    year and t the tenure in years. n * t may be fractional; the exponent is
    real-valued rather than a whole count of periods. Nothing is rounded here:
    currency rounding belongs to the display layer.

    Inputs are expected to be validated by the caller. Out-of-range values
    produce a defined but meaningless result.

    Raises:
        CalculationError: If the result overflows or is otherwise not finite
    """
    r = annual_rate_percent / 100
    n = int(compounding)

    try:
        maturity_amount = principal * (1 + r / n) ** (n * tenure_years)
    except OverflowError as e:
        raise CalculationError(
            f"Maturity overflowed for rate={annual_rate_percent}% tenure={tenure_years}y"
        ) from e

    if isinstance(maturity_amount, complex) or not math.isfinite(maturity_amount):
        raise CalculationError(f"Maturity amount is not a finite number: {maturity_amount}")

    # Derived from the same value so the two figures can never disagree
    return DepositResult(
        principal=principal,
        maturity_amount=maturity_amount,
        total_interest=maturity_amount - principal,
    )


def calculate(deposit: DepositInput) -> DepositResult:
    """Calculate maturity for a DepositInput"""
    return compute_maturity(
        deposit.principal,
        deposit.annual_rate_percent,
        deposit.tenure_years,
        deposit.compounding,
    )
