from __future__ import annotations

from decimal import Decimal

from taxapp.core.brackets import walk_brackets
from taxapp.core.models import BracketBreakdown, StateTaxInput, StateTaxResult, StateTaxType
from taxapp.core.rounding import ZERO, ratio, round_whole
from taxapp.core.states.info import StateTaxInfo
from taxapp.core.states.registry import get_state_info

D = Decimal


def _result(
    info: StateTaxInfo,
    input_: StateTaxInput,
    *,
    tax: D,
    top_rate: D,
    brackets: list[BracketBreakdown],
    standard_deduction: D,
) -> StateTaxResult:
    return StateTaxResult(
        state_name=info.name,
        state_abbreviation=info.abbreviation,
        tax_type=info.tax_type,
        filing_status=input_.filing_status,
        state_tax=tax,
        state_effective_rate=ratio(tax, input_.gross_income),
        top_rate=top_rate,
        brackets=brackets,
        standard_deduction=standard_deduction,
        notable_credits=list(info.notable_credits),
    )


def calculate_state_tax(input_: StateTaxInput) -> StateTaxResult:
    """State income tax on wages under the state's regime.

    Raises :class:`~taxapp.core.states.registry.UnknownStateError` for codes
    missing from the table; nothing is defaulted.
    """
    info = get_state_info(input_.state_abbreviation)

    if info.tax_type is StateTaxType.NONE:
        return _result(info, input_, tax=ZERO, top_rate=ZERO, brackets=[], standard_deduction=ZERO)

    deduction = info.standard_deduction or ZERO
    taxable = max(ZERO, input_.gross_income - deduction)

    if info.tax_type is StateTaxType.FLAT:
        rate = info.flat_rate or ZERO
        tax = round_whole(taxable * rate)
        synthetic = BracketBreakdown(rate=rate, min=ZERO, max=taxable, taxable_amount=taxable, tax=tax)
        return _result(info, input_, tax=tax, top_rate=rate, brackets=[synthetic], standard_deduction=deduction)

    walk = walk_brackets(info.brackets, taxable)
    tax = round_whole(sum((entry.tax for entry in walk.breakdown), ZERO))
    return _result(
        info,
        input_,
        tax=tax,
        top_rate=walk.top_rate,
        brackets=list(walk.breakdown),
        standard_deduction=deduction,
    )


__all__ = ["calculate_state_tax"]
