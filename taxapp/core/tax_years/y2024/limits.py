from decimal import Decimal

from taxapp.core.models import FilingStatus
from taxapp.core.tax_years.tables import ContributionLimits, PayrollLimits

D = Decimal

SS_RATE = D("0.062")
SS_WAGE_BASE = D("168600")
MEDICARE_RATE = D("0.0145")
MEDICARE_SURTAX_RATE = D("0.009")
MEDICARE_SURTAX_THRESHOLD = {
    FilingStatus.SINGLE: D("200000"),
    FilingStatus.MARRIED_JOINT: D("250000"),
    FilingStatus.MARRIED_SEPARATE: D("125000"),
    FilingStatus.HEAD_OF_HOUSEHOLD: D("200000"),
}

# Self-only coverage; family coverage is not modelled.
HSA_LIMIT_SELF = D("4150")
LIMIT_401K = D("23000")
IRA_LIMIT = D("7000")
# MAGI where deductibility phase-out starts for filers covered by an employer plan.
IRA_INCOME_LIMIT_SINGLE = D("87000")
IRA_INCOME_LIMIT_JOINT = D("143000")

STUDENT_LOAN_INTEREST_CAP = D("2500")
# Annual interest is estimated as a flat share of the outstanding balance.
STUDENT_LOAN_INTEREST_RATE = D("0.05")
STUDENT_LOAN_LIMIT_SINGLE = D("90000")
STUDENT_LOAN_LIMIT_JOINT = D("185000")

CHILD_TAX_CREDIT_PER_CHILD = D("2000")

PAYROLL_2024 = PayrollLimits(
    social_security_rate=SS_RATE,
    social_security_wage_base=SS_WAGE_BASE,
    medicare_rate=MEDICARE_RATE,
    additional_medicare_rate=MEDICARE_SURTAX_RATE,
    additional_medicare_threshold=MEDICARE_SURTAX_THRESHOLD,
)

CONTRIBUTIONS_2024 = ContributionLimits(
    hsa_self_only=HSA_LIMIT_SELF,
    limit_401k=LIMIT_401K,
    ira_limit=IRA_LIMIT,
    ira_deductible_ceiling_single=IRA_INCOME_LIMIT_SINGLE,
    ira_deductible_ceiling_joint=IRA_INCOME_LIMIT_JOINT,
    student_loan_interest_cap=STUDENT_LOAN_INTEREST_CAP,
    student_loan_interest_rate=STUDENT_LOAN_INTEREST_RATE,
    student_loan_ceiling_single=STUDENT_LOAN_LIMIT_SINGLE,
    student_loan_ceiling_joint=STUDENT_LOAN_LIMIT_JOINT,
    child_tax_credit=CHILD_TAX_CREDIT_PER_CHILD,
)
