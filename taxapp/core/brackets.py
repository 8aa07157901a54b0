from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from taxapp.core.models import BracketBreakdown
from taxapp.core.rounding import ZERO, round_cents

D = Decimal


@dataclass(frozen=True)
class TaxBracket:
    lower: D
    upper: D | None
    rate: D

    @property
    def width(self) -> D | None:
        if self.upper is None:
            return None
        return self.upper - self.lower


@dataclass(frozen=True)
class BracketWalk:
    tax: D
    top_rate: D
    breakdown: tuple[BracketBreakdown, ...]


def brackets_from_rows(rows: Iterable[tuple[str, str | None, str]]) -> tuple[TaxBracket, ...]:
    return tuple(
        TaxBracket(D(lower), D(upper) if upper is not None else None, D(rate))
        for lower, upper, rate in rows
    )


def walk_brackets(brackets: Iterable[TaxBracket], taxable_income: D) -> BracketWalk:
    """Partition ``taxable_income`` across ascending brackets.

    Each bracket absorbs ``min(remaining, width)``; the unbounded top bracket
    absorbs whatever is left. The walk stops as soon as nothing remains, so
    the breakdown only lists traversed brackets and ``top_rate`` is the rate
    of the last one traversed. A traversed bracket with a 0% rate therefore
    reports 0 even though the next dollar would be taxed higher.

    ``tax`` is the unrounded sum quantized to cents; each breakdown entry
    carries its own cent-rounded share.
    """
    ti = max(ZERO, taxable_income)
    remaining = ti
    tax = ZERO
    top_rate = ZERO
    breakdown: list[BracketBreakdown] = []
    for bracket in brackets:
        if remaining <= 0:
            break
        width = bracket.width
        span = remaining if width is None else min(remaining, width)
        bracket_tax = span * bracket.rate
        breakdown.append(
            BracketBreakdown(
                rate=bracket.rate,
                min=bracket.lower,
                max=bracket.upper if bracket.upper is not None else ti,
                taxable_amount=span,
                tax=round_cents(bracket_tax),
            )
        )
        tax += bracket_tax
        top_rate = bracket.rate
        remaining -= span
    return BracketWalk(tax=round_cents(tax), top_rate=top_rate, breakdown=tuple(breakdown))


__all__ = ["BracketWalk", "TaxBracket", "brackets_from_rows", "walk_brackets"]
