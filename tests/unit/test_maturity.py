"""Unit tests for maturity calculation"""

import pytest
from dataclasses import replace
from fd_gateway.domain.models import CompoundingFrequency, DepositInput
from fd_gateway.domain.maturity import compute_maturity, calculate
from fd_gateway.domain.exceptions import CalculationError, InvalidInputError

FREQUENCIES = list(CompoundingFrequency)


def test_annual_compounding_scenario(typical_deposit: DepositInput):
    """1 lakh at 6.5% for 5 years, compounded annually"""
    result = calculate(typical_deposit)

    assert result.principal == 100000
    assert result.maturity_amount == pytest.approx(100000 * 1.065 ** 5)
    assert result.maturity_amount == pytest.approx(137008.67, abs=0.01)
    assert result.total_interest == pytest.approx(37008.67, abs=0.01)


def test_monthly_compounding_scenario(typical_deposit: DepositInput):
    """Monthly compounding on the same deposit earns more than annual"""
    monthly = calculate(replace(typical_deposit, compounding=CompoundingFrequency.MONTHLY))
    annual = calculate(typical_deposit)

    assert monthly.maturity_amount == pytest.approx(100000 * (1 + 0.065 / 12) ** 60)
    assert monthly.maturity_amount == pytest.approx(138281.73, abs=0.01)
    assert monthly.maturity_amount > annual.maturity_amount


def test_total_interest_is_exact_difference():
    """Interest is derived from the maturity amount, never rounded separately"""
    for frequency in FREQUENCIES:
        result = compute_maturity(123456.78, 7.35, 2.75, frequency)
        assert result.total_interest == result.maturity_amount - 123456.78


@pytest.mark.parametrize("frequency", FREQUENCIES)
@pytest.mark.parametrize("principal,rate,tenure", [
    (1, 0.1, 0.1),
    (100000, 6.5, 5),
    (2500000, 100, 0.5),
    (750.5, 12.25, 30),
])
def test_maturity_never_below_principal(principal, rate, tenure, frequency):
    result = compute_maturity(principal, rate, tenure, frequency)
    assert result.maturity_amount > principal
    assert result.total_interest > 0


def test_zero_rate_returns_principal_exactly():
    """r=0 is outside the validated range but still well defined"""
    result = compute_maturity(50000, 0, 3, CompoundingFrequency.QUARTERLY)
    assert result.maturity_amount == 50000
    assert result.total_interest == 0


def test_more_frequent_compounding_never_decreases_maturity():
    amounts = [compute_maturity(100000, 8, 3.5, f).maturity_amount for f in sorted(FREQUENCIES)]
    assert amounts == sorted(amounts)


def test_longer_tenure_increases_maturity():
    tenures = [0.1, 0.5, 1, 2.5, 5, 10]
    amounts = [compute_maturity(100000, 6.5, t, CompoundingFrequency.QUARTERLY).maturity_amount for t in tenures]
    assert all(a < b for a, b in zip(amounts, amounts[1:]))


def test_higher_rate_increases_maturity():
    rates = [0.1, 1, 5, 6.5, 20, 100]
    amounts = [compute_maturity(100000, r, 5, CompoundingFrequency.MONTHLY).maturity_amount for r in rates]
    assert all(a < b for a, b in zip(amounts, amounts[1:]))


def test_fractional_periods_use_real_exponent():
    """1.25 years compounded semi-annually is 2.5 periods"""
    result = compute_maturity(1000, 10, 1.25, CompoundingFrequency.SEMI_ANNUAL)
    assert result.maturity_amount == pytest.approx(1000 * 1.05 ** 2.5)


def test_accepts_plain_integer_frequency():
    assert compute_maturity(1000, 12, 1, 12) == compute_maturity(1000, 12, 1, CompoundingFrequency.MONTHLY)


def test_overflow_raises_calculation_error():
    with pytest.raises(CalculationError):
        compute_maturity(1e300, 100, 10000, CompoundingFrequency.MONTHLY)


def test_result_is_immutable(typical_deposit: DepositInput):
    result = calculate(typical_deposit)
    with pytest.raises(AttributeError):
        result.maturity_amount = 0


@pytest.mark.parametrize("label,frequency", [
    ("annually", CompoundingFrequency.ANNUAL),
    ("semi-annually", CompoundingFrequency.SEMI_ANNUAL),
    ("quarterly", CompoundingFrequency.QUARTERLY),
    ("monthly", CompoundingFrequency.MONTHLY),
])
def test_compounding_labels(label, frequency):
    assert CompoundingFrequency.from_label(label) is frequency
    assert frequency.label == label


def test_unknown_compounding_label():
    with pytest.raises(InvalidInputError):
        CompoundingFrequency.from_label("daily")
