"""Currency display helpers"""

from typing import Tuple


def _group_indian(digits: str) -> str:
    """Group an integer digit string as 12,34,56,789 (lakh/crore style)"""
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups) + "," + tail


def format_inr(amount: float) -> str:
    """
    Format an amount in rupees with Indian digit grouping and two decimals.

    Example:
        1234567.891 -> "₹12,34,567.89"
    """
    rounded = round(amount, 2)
    # Sign of the displayed value, so -0.001 renders as ₹0.00
    sign = "-" if rounded < 0 else ""
    whole, fraction = f"{abs(rounded):.2f}".split(".")
    return f"{sign}₹{_group_indian(whole)}.{fraction}"


def split_shares(principal: float, total_interest: float) -> Tuple[float, float]:
    """Principal and interest as percentages of the maturity amount"""
    total = principal + total_interest
    if total <= 0:
        return 0.0, 0.0
    principal_pct = principal / total * 100
    return principal_pct, 100 - principal_pct
