from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal

D = Decimal

ZERO = D("0")
_CENT = D("0.01")
_WHOLE = D("1")
_BASIS_POINT = D("0.0001")


def to_decimal(value: float | int | Decimal) -> Decimal:
    return value if isinstance(value, Decimal) else Decimal(str(value))


def round_cents(value: Decimal) -> Decimal:
    return value.quantize(_CENT, rounding=ROUND_HALF_UP)


def round_whole(value: Decimal) -> Decimal:
    return value.quantize(_WHOLE, rounding=ROUND_HALF_UP)


def round_rate(value: Decimal) -> Decimal:
    return value.quantize(_BASIS_POINT, rounding=ROUND_HALF_UP)


def ratio(numerator: Decimal, denominator: Decimal) -> Decimal:
    """Rate of ``numerator`` over ``denominator`` at basis-point precision, 0 for a non-positive base."""
    if denominator <= 0:
        return round_rate(ZERO)
    return round_rate(numerator / denominator)


__all__ = [
    "ZERO",
    "ratio",
    "round_cents",
    "round_rate",
    "round_whole",
    "to_decimal",
]
