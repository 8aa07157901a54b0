from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Iterable

from taxapp.core.brackets import walk_brackets
from taxapp.core.models import BracketBreakdown, Deduction, FilingStatus, TaxInput, TaxResult
from taxapp.core.payroll import compute_fica
from taxapp.core.rounding import ZERO, ratio, round_whole
from taxapp.core.tax_years import TaxYearTables, get_tax_year_tables

D = Decimal


@dataclass(frozen=True)
class FederalTaxComputation:
    tax: D
    marginal_rate: D
    breakdown: tuple[BracketBreakdown, ...]


def compute_federal_tax(
    taxable_income: D,
    filing_status: FilingStatus,
    tables: TaxYearTables | None = None,
) -> FederalTaxComputation:
    tables = tables or get_tax_year_tables()
    walk = walk_brackets(tables.federal_brackets[filing_status], taxable_income)
    return FederalTaxComputation(tax=walk.tax, marginal_rate=walk.top_rate, breakdown=walk.breakdown)


def total_deductions(deductions: Iterable[Deduction]) -> D:
    return sum((d.amount for d in deductions), ZERO)


def pre_tax_contributions(deductions: Iterable[Deduction]) -> D:
    """401(k) and HSA amounts, which come out of the paycheck before it is paid."""
    return sum((d.amount for d in deductions if d.kind.is_pre_tax), ZERO)


def take_home_pay(gross_income: D, federal_tax: D, fica_tax: D, pre_tax: D) -> D:
    return round_whole(max(ZERO, gross_income) - federal_tax - fica_tax - pre_tax)


def calculate_federal_tax(input_: TaxInput, tables: TaxYearTables | None = None) -> TaxResult:
    tables = tables or get_tax_year_tables(input_.tax_year)
    gross = input_.gross_income
    wages = max(ZERO, gross)

    deductions_total = total_deductions(input_.deductions)
    taxable_income = max(ZERO, gross - deductions_total)

    federal = compute_federal_tax(taxable_income, input_.filing_status, tables)
    fica = compute_fica(wages, input_.filing_status, tables)
    pre_tax = pre_tax_contributions(input_.deductions)

    return TaxResult(
        gross_income=gross,
        total_deductions=deductions_total,
        taxable_income=taxable_income,
        federal_tax=round_whole(federal.tax),
        fica_tax=round_whole(fica),
        effective_rate=ratio(federal.tax + fica, wages),
        marginal_rate=federal.marginal_rate,
        take_home=take_home_pay(wages, federal.tax, fica, pre_tax),
        bracket_breakdown=list(federal.breakdown),
    )


__all__ = [
    "FederalTaxComputation",
    "calculate_federal_tax",
    "compute_federal_tax",
    "pre_tax_contributions",
    "take_home_pay",
    "total_deductions",
]
