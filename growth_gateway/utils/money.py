"""Decimal helpers for monetary values"""

from decimal import ROUND_HALF_UP, Decimal

CENT = Decimal("0.01")


def to_decimal(value: int | float | str | Decimal) -> Decimal:
    """Convert to Decimal without picking up binary float noise (0.1 -> 0.1)"""
    if isinstance(value, bool):
        raise TypeError(f"expected a number, got {value!r}")
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(repr(value))
    return Decimal(value)


def to_money(value: Decimal) -> Decimal:
    """Round to cents for presentation; never used inside the engines"""
    return value.quantize(CENT, rounding=ROUND_HALF_UP)
