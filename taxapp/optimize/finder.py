"""Deduction and credit finder.

Each rule looks at the taxpayer profile and either proposes a change to the
deduction ledger (a :class:`RuleOutcome` with an ``override``) or explains
why it does not apply. The federal engine is then re-run on the merged
ledger and the savings are attributed back to the applicable deductions in
proportion to their dollar amounts. The child tax credit never enters the
ledger: it is netted off the recomputed tax and reported on its own channel.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal
from typing import Callable, Iterable

from taxapp.core.federal import calculate_federal_tax, pre_tax_contributions, take_home_pay
from taxapp.core.models import (
    Deduction,
    DeductionFinderInput,
    DeductionKind,
    DeductionResult,
    FilingStatus,
    FoundDeduction,
    TaxInput,
)
from taxapp.core.payroll import compute_fica
from taxapp.core.rounding import ZERO, ratio, round_whole
from taxapp.core.tax_years import TaxYearTables, get_tax_year_tables
from taxapp.optimize.ledger import DeductionLedger

D = Decimal

logger = logging.getLogger("taxapp").getChild("optimize")

STUDENT_LOAN_LABEL = "Student Loan Interest"
HSA_LABEL = "HSA Contribution"
IRA_LABEL = "Traditional IRA"
CHARITY_LABEL = "Charitable Donations"
LABEL_401K = "401(k) Contribution"
ALREADY_MAXED = "Already at maximum contribution"
CREDIT_NOTE = "This is a tax credit, not a deduction: it reduces your tax bill directly"


def _usd(amount: D) -> str:
    return f"${round_whole(amount):,}"


@dataclass(frozen=True)
class RuleOutcome:
    found: FoundDeduction
    override: Deduction | None = None
    drops: tuple[DeductionKind, ...] = ()


@dataclass(frozen=True)
class RuleContext:
    profile: DeductionFinderInput
    tables: TaxYearTables
    current: DeductionLedger

    @property
    def status(self) -> FilingStatus:
        return self.profile.filing_status


Rule = Callable[[RuleContext], "RuleOutcome | None"]


def _applicable(name: str, amount: D) -> FoundDeduction:
    return FoundDeduction(name=name, amount=amount, applicable=True)


def _rejected(name: str, amount: D, reason: str) -> FoundDeduction:
    return FoundDeduction(name=name, amount=amount, applicable=False, reason=reason)


def student_loan_rule(ctx: RuleContext) -> RuleOutcome | None:
    profile = ctx.profile
    if not (profile.has_student_loans and profile.loan_balance):
        return None
    limits = ctx.tables.contributions
    estimated = round_whole(
        min(profile.loan_balance * limits.student_loan_interest_rate, limits.student_loan_interest_cap)
    )
    ceiling = limits.student_loan_ceiling(ctx.status)
    if profile.gross_income > ceiling:
        return RuleOutcome(
            _rejected(STUDENT_LOAN_LABEL, ZERO, f"Income exceeds the {_usd(ceiling)} phase-out limit")
        )
    return RuleOutcome(
        _applicable(STUDENT_LOAN_LABEL, estimated),
        override=Deduction(label=STUDENT_LOAN_LABEL, amount=estimated, kind=DeductionKind.ITEMIZED),
    )


def hsa_rule(ctx: RuleContext) -> RuleOutcome | None:
    profile = ctx.profile
    if not profile.has_hsa:
        return None
    cap = ctx.tables.contributions.hsa_self_only
    additional = max(ZERO, cap - (profile.current_hsa_contribution or ZERO))
    if additional <= 0:
        return RuleOutcome(_rejected(HSA_LABEL, ZERO, ALREADY_MAXED))
    return RuleOutcome(
        _applicable(f"Max Out HSA ({_usd(cap)})", additional),
        override=Deduction(label=HSA_LABEL, amount=cap, kind=DeductionKind.PRE_TAX_HSA),
    )


def ira_rule(ctx: RuleContext) -> RuleOutcome | None:
    profile = ctx.profile
    if not profile.wants_ira:
        return None
    limits = ctx.tables.contributions
    additional = max(ZERO, limits.ira_limit - (profile.current_ira_contribution or ZERO))
    ceiling = limits.ira_ceiling(ctx.status)
    if profile.gross_income > ceiling:
        return RuleOutcome(
            _rejected(IRA_LABEL, ZERO, f"Income exceeds {_usd(ceiling)} deductibility phase-out")
        )
    if additional <= 0:
        return RuleOutcome(_rejected(IRA_LABEL, ZERO, ALREADY_MAXED))
    return RuleOutcome(
        _applicable(f"Traditional IRA ({_usd(limits.ira_limit)} max)", additional),
        override=Deduction(label=IRA_LABEL, amount=limits.ira_limit, kind=DeductionKind.ITEMIZED),
    )


def charity_rule(ctx: RuleContext) -> RuleOutcome | None:
    """Charity only helps once itemizing beats the standard deduction, which it then replaces."""
    profile = ctx.profile
    if not (profile.donates_charity and profile.charity_amount):
        return None
    standard = ctx.tables.standard_deductions[ctx.status]
    total_itemized = ctx.current.amount_for(DeductionKind.ITEMIZED) + profile.charity_amount
    if total_itemized <= standard:
        return RuleOutcome(
            _rejected(
                CHARITY_LABEL,
                profile.charity_amount,
                f"Total itemized deductions ({_usd(total_itemized)}) don't exceed "
                f"the standard deduction ({_usd(standard)})",
            )
        )
    # planned giving adds to donations already on the ledger
    already_given = ctx.current.amount_at((DeductionKind.ITEMIZED, CHARITY_LABEL))
    return RuleOutcome(
        _applicable(f"{CHARITY_LABEL} (Itemized)", profile.charity_amount),
        override=Deduction(
            label=CHARITY_LABEL,
            amount=already_given + profile.charity_amount,
            kind=DeductionKind.ITEMIZED,
        ),
        drops=(DeductionKind.STANDARD,),
    )


def retirement_401k_rule(ctx: RuleContext) -> RuleOutcome | None:
    if not ctx.profile.evaluate_401k:
        return None
    cap = ctx.tables.contributions.limit_401k
    additional = max(ZERO, cap - ctx.current.amount_for(DeductionKind.PRE_TAX_401K))
    if additional <= 0:
        return None
    return RuleOutcome(
        _applicable(f"Increase 401(k) to {_usd(cap)} max", additional),
        override=Deduction(label=LABEL_401K, amount=cap, kind=DeductionKind.PRE_TAX_401K),
    )


DEDUCTION_RULES: tuple[Rule, ...] = (
    student_loan_rule,
    hsa_rule,
    ira_rule,
    charity_rule,
    retirement_401k_rule,
)


def child_tax_credit(profile: DeductionFinderInput, tables: TaxYearTables) -> FoundDeduction | None:
    count = profile.dependent_count or 0
    if not (profile.has_dependents and count > 0):
        return None
    credit = tables.contributions.child_tax_credit * count
    plural = "s" if count > 1 else ""
    return FoundDeduction(
        name=f"Child Tax Credit ({count} dependent{plural})",
        amount=credit,
        annual_savings=credit,
        applicable=True,
        reason=CREDIT_NOTE,
        is_credit=True,
    )


def merge_outcomes(ledger: DeductionLedger, outcomes: Iterable[RuleOutcome]) -> DeductionLedger:
    for outcome in outcomes:
        for kind in outcome.drops:
            ledger = ledger.without_kind(kind)
        if outcome.override is not None:
            ledger = ledger.with_override(outcome.override)
    return ledger


def attribute_savings(found: list[FoundDeduction], pool: D) -> list[FoundDeduction]:
    """Split ``pool`` across applicable entries by their share of the applicable dollar total."""
    applicable_total = sum((f.amount for f in found if f.applicable), ZERO)
    if pool <= 0 or applicable_total <= 0:
        return found
    return [
        f.model_copy(update={"annual_savings": round_whole(f.amount / applicable_total * pool)})
        if f.applicable
        else f
        for f in found
    ]


def find_deductions(input_: DeductionFinderInput, tables: TaxYearTables | None = None) -> DeductionResult:
    tables = tables or get_tax_year_tables(input_.tax_year)
    current = DeductionLedger.from_deductions(input_.current_deductions)
    ctx = RuleContext(profile=input_, tables=tables, current=current)

    outcomes = [outcome for rule in DEDUCTION_RULES if (outcome := rule(ctx)) is not None]
    credit = child_tax_credit(input_, tables)
    credit_amount = credit.amount if credit is not None else ZERO

    proposed = merge_outcomes(current, outcomes)
    recomputed = calculate_federal_tax(
        TaxInput(
            gross_income=input_.gross_income,
            filing_status=input_.filing_status,
            deductions=proposed.to_list(),
        ),
        tables,
    )
    new_federal_tax = max(ZERO, recomputed.federal_tax - credit_amount)
    tax_savings = input_.current_federal_tax - new_federal_tax

    found = attribute_savings([o.found for o in outcomes], max(ZERO, tax_savings - credit_amount))
    if credit is not None:
        found.append(credit)

    total_annual = max(ZERO, round_whole(tax_savings))
    wages = max(ZERO, input_.gross_income)
    fica = compute_fica(wages, input_.filing_status, tables)

    logger.debug(
        "Deduction finder: rules=%s credit=%s current_tax=%s new_tax=%s savings=%s",
        len(outcomes),
        credit_amount,
        input_.current_federal_tax,
        new_federal_tax,
        total_annual,
    )

    return DeductionResult(
        deductions=found,
        credit_savings=credit_amount,
        total_annual_savings=total_annual,
        total_monthly_savings=round_whole(total_annual / 12),
        new_federal_tax=new_federal_tax,
        new_effective_rate=ratio(new_federal_tax + fica, wages),
        new_take_home=take_home_pay(wages, new_federal_tax, fica, pre_tax_contributions(proposed.to_list())),
    )


__all__ = [
    "DEDUCTION_RULES",
    "DeductionLedger",
    "RuleContext",
    "RuleOutcome",
    "attribute_savings",
    "child_tax_credit",
    "find_deductions",
    "merge_outcomes",
]
