"""Advisory flow - flags anomalous deposit inputs and asks for a caution message"""

import asyncio
import logging
from typing import Awaitable, Callable, List, Optional, Protocol

from fd_gateway.config import settings
from fd_gateway.domain.exceptions import AdvisoryUnavailableError
from fd_gateway.domain.models import AdvisoryContext, AdvisoryOutcome, AnomalyAssessment
from fd_gateway.domain.reference_rates import reference_rate

RATE_DEVIATION = "rate_deviation"
MATURITY_DEVIATION = "maturity_deviation"


class AdvisoryGenerator(Protocol):
    """Anything that can turn an AdvisoryContext into a short caution message"""

    def generate_advisory(self, context: AdvisoryContext) -> Awaitable[str]:
        ...


def simple_interest_estimate(principal: float, annual_rate_percent: float, tenure_years: float) -> float:
    """Simple-interest sanity figure, independent of the compounding schedule"""
    return principal * (1 + annual_rate_percent / 100 * tenure_years)


def assess_anomaly(
    principal: float,
    annual_rate_percent: float,
    tenure_years: float,
    maturity_amount: float,
    rate_lookup: Callable[[float], float] = reference_rate,
    rate_threshold_pp: float | None = None,
    maturity_tolerance: float | None = None,
) -> AnomalyAssessment:
    """
    Decide whether the inputs look anomalous. Pure and deterministic.

    The rule fires if either:
    - the rate differs from the tenure's reference rate by more than
      rate_threshold_pp percentage points (default 2.0), or
    - the maturity amount deviates from the simple-interest estimate by more
      than maturity_tolerance, relative to the estimate (default 5%).

    Both comparisons are strict.
    """
    if rate_threshold_pp is None:
        rate_threshold_pp = settings.rate_deviation_threshold_pp
    if maturity_tolerance is None:
        maturity_tolerance = settings.maturity_deviation_tolerance

    ref_rate = rate_lookup(tenure_years)
    estimate = simple_interest_estimate(principal, annual_rate_percent, tenure_years)

    rate_deviation = abs(annual_rate_percent - ref_rate)
    maturity_deviation = abs(maturity_amount - estimate) / estimate if estimate else float("inf")

    reasons: List[str] = []
    if rate_deviation > rate_threshold_pp:
        reasons.append(RATE_DEVIATION)
    if maturity_deviation > maturity_tolerance:
        reasons.append(MATURITY_DEVIATION)

    return AnomalyAssessment(
        triggered=bool(reasons),
        reference_rate_percent=ref_rate,
        simple_estimate=estimate,
        rate_deviation_pp=rate_deviation,
        maturity_deviation=maturity_deviation,
        reasons=reasons,
    )


class AdvisoryFlow:
    """
    Best-effort advisory on top of a maturity result.

    The gate (assess_anomaly) is deterministic; only the wording comes from
    the generator. Generator failures never escape: the flow answers None,
    which callers cannot tell apart from "nothing to flag".
    """

    def __init__(
        self,
        generator: AdvisoryGenerator,
        rate_lookup: Callable[[float], float] = reference_rate,
        timeout: float | None = None,
        rate_threshold_pp: float | None = None,
        maturity_tolerance: float | None = None,
    ):
        self.generator = generator
        self.rate_lookup = rate_lookup
        self.timeout = timeout if timeout is not None else settings.advisory_timeout_seconds
        self.rate_threshold_pp = rate_threshold_pp
        self.maturity_tolerance = maturity_tolerance

    async def advise(
        self,
        principal: float,
        annual_rate_percent: float,
        tenure_years: float,
        maturity_amount: float,
    ) -> Optional[str]:
        """Return a caution message, or None when there is nothing to say"""
        outcome = await self.evaluate(principal, annual_rate_percent, tenure_years, maturity_amount)
        return outcome.message

    async def evaluate(
        self,
        principal: float,
        annual_rate_percent: float,
        tenure_years: float,
        maturity_amount: float,
    ) -> AdvisoryOutcome:
        """
        Run the gate and, if it fires, the generation step.

        Outcomes:
        - not_triggered: gate did not fire, generator never called
        - issued: generator returned a message
        - empty: generator saw nothing worth flagging
        - unavailable: generator failed or timed out
        """
        assessment = assess_anomaly(
            principal,
            annual_rate_percent,
            tenure_years,
            maturity_amount,
            rate_lookup=self.rate_lookup,
            rate_threshold_pp=self.rate_threshold_pp,
            maturity_tolerance=self.maturity_tolerance,
        )

        if not assessment.triggered:
            return AdvisoryOutcome(message=None, outcome="not_triggered", assessment=assessment)

        context = AdvisoryContext(
            principal=principal,
            annual_rate_percent=annual_rate_percent,
            tenure_years=tenure_years,
            maturity_amount=maturity_amount,
            reference_rate_percent=assessment.reference_rate_percent,
            simple_estimate=assessment.simple_estimate,
        )

        try:
            message = await asyncio.wait_for(
                self.generator.generate_advisory(context),
                timeout=self.timeout,
            )
        except asyncio.TimeoutError:
            logging.warning(
                f"Advisory generation timed out after {self.timeout}s",
                extra={"step": "advisory_generation", "reasons": assessment.reasons},
            )
            return AdvisoryOutcome(message=None, outcome="unavailable", assessment=assessment)
        except AdvisoryUnavailableError as e:
            logging.warning(
                f"Advisory unavailable: {e}",
                extra={"step": "advisory_generation", "reasons": assessment.reasons},
            )
            return AdvisoryOutcome(message=None, outcome="unavailable", assessment=assessment)
        except Exception as e:
            logging.error(
                f"Unexpected advisory generation error: {e}",
                extra={"step": "advisory_generation", "reasons": assessment.reasons},
            )
            return AdvisoryOutcome(message=None, outcome="unavailable", assessment=assessment)

        message = (message or "").strip()
        if not message:
            return AdvisoryOutcome(message=None, outcome="empty", assessment=assessment)

        return AdvisoryOutcome(message=message, outcome="issued", assessment=assessment)
