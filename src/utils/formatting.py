from __future__ import annotations

import math

CURRENCY_SYMBOL = "₹"
LAKH = 100_000
CRORE = 10_000_000


def _non_finite(x: float) -> str:
    if math.isnan(x):
        return "NaN"
    return "∞" if x > 0 else "-∞"


def _group_indian(digits: str) -> str:
    # 12345678 -> 1,23,45,678
    if len(digits) <= 3:
        return digits
    head, tail = digits[:-3], digits[-3:]
    groups = []
    while len(head) > 2:
        groups.insert(0, head[-2:])
        head = head[:-2]
    if head:
        groups.insert(0, head)
    return ",".join(groups + [tail])


def group_en_in(value: float) -> str:
    """en-IN digit grouping with at most three fraction digits."""
    if not math.isfinite(value):
        return _non_finite(value)
    sign = "-" if value < 0 else ""
    text = f"{abs(value):.3f}".rstrip("0").rstrip(".")
    int_part, _, frac = text.partition(".")
    out = sign + _group_indian(int_part)
    return f"{out}.{frac}" if frac else out


def _fixed2(x: float) -> str:
    # only +inf reaches here; fixed-point notation spells it out
    return f"{x:.2f}" if math.isfinite(x) else "Infinity"


def format_inr(value: float) -> str:
    if value >= CRORE:
        return f"{CURRENCY_SYMBOL}{_fixed2(value / CRORE)} Cr"
    if value >= LAKH:
        return f"{CURRENCY_SYMBOL}{_fixed2(value / LAKH)} L"
    return f"{CURRENCY_SYMBOL}{group_en_in(value)}"


def format_percent(ratio: float) -> str:
    if not math.isfinite(ratio):
        return f"{_non_finite(ratio)}%"
    return f"{ratio * 100:,.2f}%"
