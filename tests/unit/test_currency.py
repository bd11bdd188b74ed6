"""Unit tests for currency display helpers"""

import pytest
from fd_gateway.utils.currency import format_inr, split_shares


@pytest.mark.parametrize("amount,expected", [
    (0, "₹0.00"),
    (999.5, "₹999.50"),
    (1000, "₹1,000.00"),
    (100000, "₹1,00,000.00"),
    (137008.6663, "₹1,37,008.67"),
    (12345678.9, "₹1,23,45,678.90"),
    (-37008.67, "-₹37,008.67"),
])
def test_format_inr_indian_grouping(amount, expected):
    assert format_inr(amount) == expected


def test_split_shares():
    principal_pct, interest_pct = split_shares(100000, 37008.67)

    assert principal_pct == pytest.approx(72.99, abs=0.01)
    assert principal_pct + interest_pct == pytest.approx(100)


def test_split_shares_zero_total():
    assert split_shares(0, 0) == (0.0, 0.0)


@pytest.mark.parametrize("amount", [-0.001, -0.004, -0.0])
def test_format_inr_no_sign_when_rounding_to_zero(amount):
    assert format_inr(amount) == "₹0.00"
