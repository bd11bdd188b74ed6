"""Domain models - pure Python dataclasses representing deposit entities"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import List, Optional

from fd_gateway.domain.exceptions import InvalidInputError


class CompoundingFrequency(IntEnum):
    """Number of times per year interest is credited"""

    ANNUAL = 1
    SEMI_ANNUAL = 2
    QUARTERLY = 4
    MONTHLY = 12

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def from_label(cls, label: str) -> "CompoundingFrequency":
        """Resolve a wire label ("annually", "monthly", ...) to a frequency"""
        for frequency, name in _LABELS.items():
            if name == label:
                return frequency
        raise InvalidInputError(f"Unknown compounding frequency: {label!r}")


_LABELS = {
    CompoundingFrequency.ANNUAL: "annually",
    CompoundingFrequency.SEMI_ANNUAL: "semi-annually",
    CompoundingFrequency.QUARTERLY: "quarterly",
    CompoundingFrequency.MONTHLY: "monthly",
}


@dataclass(frozen=True)
class DepositInput:
    """Validated fixed-deposit parameters supplied by the caller"""

    principal: float
    annual_rate_percent: float
    tenure_years: float
    compounding: CompoundingFrequency = CompoundingFrequency.ANNUAL


@dataclass(frozen=True)
class DepositResult:
    """Outcome of a maturity calculation"""

    principal: float
    maturity_amount: float
    total_interest: float


@dataclass(frozen=True)
class AnomalyAssessment:
    """Outcome of the deterministic advisory gate"""

    triggered: bool
    reference_rate_percent: float
    simple_estimate: float
    rate_deviation_pp: float
    maturity_deviation: float
    reasons: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class AdvisoryContext:
    """Structured request forwarded to the text-generation step"""

    principal: float
    annual_rate_percent: float
    tenure_years: float
    maturity_amount: float
    reference_rate_percent: float
    simple_estimate: float


@dataclass(frozen=True)
class AdvisoryOutcome:
    """Advisory message plus the bookkeeping needed for logs and metrics"""

    message: Optional[str]
    outcome: str  # not_triggered | issued | empty | unavailable
    assessment: AnomalyAssessment
