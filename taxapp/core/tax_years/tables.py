from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from typing import Mapping

from taxapp.core.brackets import TaxBracket
from taxapp.core.models import FilingStatus

D = Decimal


@dataclass(frozen=True)
class PayrollLimits:
    social_security_rate: D
    social_security_wage_base: D
    medicare_rate: D
    additional_medicare_rate: D
    additional_medicare_threshold: Mapping[FilingStatus, D]


@dataclass(frozen=True)
class ContributionLimits:
    hsa_self_only: D
    limit_401k: D
    ira_limit: D
    ira_deductible_ceiling_single: D
    ira_deductible_ceiling_joint: D
    student_loan_interest_cap: D
    student_loan_interest_rate: D
    student_loan_ceiling_single: D
    student_loan_ceiling_joint: D
    child_tax_credit: D

    def ira_ceiling(self, status: FilingStatus) -> D:
        if status is FilingStatus.MARRIED_JOINT:
            return self.ira_deductible_ceiling_joint
        return self.ira_deductible_ceiling_single

    def student_loan_ceiling(self, status: FilingStatus) -> D:
        if status is FilingStatus.MARRIED_JOINT:
            return self.student_loan_ceiling_joint
        return self.student_loan_ceiling_single


@dataclass(frozen=True)
class TaxYearTables:
    year: int
    federal_brackets: Mapping[FilingStatus, tuple[TaxBracket, ...]]
    standard_deductions: Mapping[FilingStatus, D]
    payroll: PayrollLimits
    contributions: ContributionLimits


__all__ = ["ContributionLimits", "PayrollLimits", "TaxYearTables"]
