from __future__ import annotations

from decimal import Decimal

from taxapp.core.models import FilingStatus
from taxapp.core.rounding import ZERO, round_cents
from taxapp.core.tax_years import TaxYearTables, get_tax_year_tables

D = Decimal


def compute_fica(
    gross_income: D,
    filing_status: FilingStatus,
    tables: TaxYearTables | None = None,
) -> D:
    """Employee Social Security + Medicare, including the Additional Medicare Tax, in cents."""
    payroll = (tables or get_tax_year_tables()).payroll
    wages = max(ZERO, gross_income)
    social_security = min(wages, payroll.social_security_wage_base) * payroll.social_security_rate
    medicare = wages * payroll.medicare_rate
    threshold = payroll.additional_medicare_threshold[filing_status]
    surtax = ZERO
    if wages > threshold:
        surtax = (wages - threshold) * payroll.additional_medicare_rate
    return round_cents(social_security + medicare + surtax)


__all__ = ["compute_fica"]
