from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal

from taxapp.core.brackets import TaxBracket
from taxapp.core.models import StateTaxType

D = Decimal


@dataclass(frozen=True)
class StateTaxInfo:
    name: str
    abbreviation: str
    tax_type: StateTaxType
    flat_rate: D | None = None
    brackets: tuple[TaxBracket, ...] = ()
    standard_deduction: D | None = None
    notable_credits: tuple[str, ...] = field(default_factory=tuple)


def no_tax(name: str, abbreviation: str, *notes: str) -> StateTaxInfo:
    return StateTaxInfo(name, abbreviation, StateTaxType.NONE, notable_credits=notes)


def flat_tax(name: str, abbreviation: str, rate: str, standard_deduction: str, *notes: str) -> StateTaxInfo:
    return StateTaxInfo(
        name,
        abbreviation,
        StateTaxType.FLAT,
        flat_rate=D(rate),
        standard_deduction=D(standard_deduction),
        notable_credits=notes,
    )


def progressive_tax(
    name: str,
    abbreviation: str,
    standard_deduction: str,
    brackets: tuple[TaxBracket, ...],
    *notes: str,
) -> StateTaxInfo:
    return StateTaxInfo(
        name,
        abbreviation,
        StateTaxType.PROGRESSIVE,
        brackets=brackets,
        standard_deduction=D(standard_deduction),
        notable_credits=notes,
    )


__all__ = ["StateTaxInfo", "flat_tax", "no_tax", "progressive_tax"]
