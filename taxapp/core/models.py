from __future__ import annotations

from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, model_validator


class FilingStatus(str, Enum):
    SINGLE = "single"
    MARRIED_JOINT = "married_joint"
    MARRIED_SEPARATE = "married_separate"
    HEAD_OF_HOUSEHOLD = "head_of_household"


class DeductionKind(str, Enum):
    PRE_TAX_401K = "pre_tax_401k"
    PRE_TAX_HSA = "pre_tax_hsa"
    STANDARD = "standard"
    ITEMIZED = "itemized"

    @property
    def is_pre_tax(self) -> bool:
        return self in (DeductionKind.PRE_TAX_401K, DeductionKind.PRE_TAX_HSA)


def classify_deduction_label(label: str) -> DeductionKind:
    """Infer a deduction kind from its free-text label.

    Legacy callers only send ``{"label", "amount"}`` pairs, so the kind is
    guessed by case-insensitive substring. This is fragile: a label such as
    "HSAccount Fees" is read as an HSA contribution. Send ``kind`` explicitly
    whenever the caller knows it.
    """
    lowered = label.lower()
    if "401k" in lowered or "401(k)" in lowered:
        return DeductionKind.PRE_TAX_401K
    if "hsa" in lowered:
        return DeductionKind.PRE_TAX_HSA
    if "standard" in lowered:
        return DeductionKind.STANDARD
    return DeductionKind.ITEMIZED


class Deduction(BaseModel):
    label: str
    amount: Decimal = Field(..., ge=0)
    kind: DeductionKind = DeductionKind.ITEMIZED

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _infer_kind(cls, data: Any) -> Any:
        if isinstance(data, dict) and data.get("kind") is None and "label" in data:
            return {**data, "kind": classify_deduction_label(str(data["label"]))}
        return data


class BracketBreakdown(BaseModel):
    rate: Decimal
    min: Decimal
    max: Decimal
    taxable_amount: Decimal
    tax: Decimal


class TaxInput(BaseModel):
    gross_income: Decimal = Field(
        ...,
        description="Annual gross wages",
        validation_alias=AliasChoices("gross_income", "grossIncome", "income"),
    )
    filing_status: FilingStatus = Field(
        FilingStatus.SINGLE,
        validation_alias=AliasChoices("filing_status", "filingStatus"),
    )
    deductions: list[Deduction] = Field(default_factory=list)
    tax_year: int | None = Field(
        None,
        description="Tax year tables to use; the default year when omitted",
        validation_alias=AliasChoices("tax_year", "taxYear"),
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class TaxResult(BaseModel):
    gross_income: Decimal
    total_deductions: Decimal
    taxable_income: Decimal
    federal_tax: Decimal
    fica_tax: Decimal
    effective_rate: Decimal
    marginal_rate: Decimal
    take_home: Decimal
    bracket_breakdown: list[BracketBreakdown]


class StateTaxType(str, Enum):
    NONE = "none"
    FLAT = "flat"
    PROGRESSIVE = "progressive"


class StateTaxInput(BaseModel):
    state_abbreviation: str = Field(
        ...,
        description="Two-letter USPS code, case-insensitive",
        validation_alias=AliasChoices("state_abbreviation", "stateAbbreviation", "state"),
    )
    gross_income: Decimal = Field(
        ...,
        validation_alias=AliasChoices("gross_income", "grossIncome", "income"),
    )
    filing_status: FilingStatus = Field(
        FilingStatus.SINGLE,
        validation_alias=AliasChoices("filing_status", "filingStatus"),
    )

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class StateTaxResult(BaseModel):
    state_name: str
    state_abbreviation: str
    tax_type: StateTaxType
    filing_status: FilingStatus
    state_tax: Decimal
    state_effective_rate: Decimal
    top_rate: Decimal
    brackets: list[BracketBreakdown]
    standard_deduction: Decimal
    notable_credits: list[str]


class FoundDeduction(BaseModel):
    name: str
    amount: Decimal
    annual_savings: Decimal = Decimal("0")
    applicable: bool
    reason: str | None = None
    is_credit: bool = False


class DeductionFinderInput(BaseModel):
    gross_income: Decimal = Field(
        ...,
        validation_alias=AliasChoices("gross_income", "grossIncome"),
    )
    filing_status: FilingStatus = Field(
        FilingStatus.SINGLE,
        validation_alias=AliasChoices("filing_status", "filingStatus"),
    )
    current_federal_tax: Decimal = Field(
        ...,
        description="Federal tax under the current deductions",
        validation_alias=AliasChoices("current_federal_tax", "currentFederalTax"),
    )
    current_deductions: list[Deduction] = Field(
        default_factory=list,
        validation_alias=AliasChoices("current_deductions", "currentDeductions"),
    )
    has_student_loans: bool = Field(False, validation_alias=AliasChoices("has_student_loans", "hasStudentLoans"))
    loan_balance: Decimal | None = Field(None, ge=0, validation_alias=AliasChoices("loan_balance", "loanBalance"))
    has_hsa: bool = Field(False, validation_alias=AliasChoices("has_hsa", "hasHSA"))
    current_hsa_contribution: Decimal | None = Field(
        None,
        ge=0,
        validation_alias=AliasChoices("current_hsa_contribution", "currentHSAContribution"),
    )
    wants_ira: bool = Field(False, validation_alias=AliasChoices("wants_ira", "wantsIRA"))
    current_ira_contribution: Decimal | None = Field(
        None,
        ge=0,
        validation_alias=AliasChoices("current_ira_contribution", "currentIRAContribution"),
    )
    donates_charity: bool = Field(False, validation_alias=AliasChoices("donates_charity", "donatesCharity"))
    charity_amount: Decimal | None = Field(None, ge=0, validation_alias=AliasChoices("charity_amount", "charityAmount"))
    has_dependents: bool = Field(False, validation_alias=AliasChoices("has_dependents", "hasDependents"))
    dependent_count: int | None = Field(None, ge=0, validation_alias=AliasChoices("dependent_count", "dependentCount"))
    evaluate_401k: bool = Field(
        True,
        description="Check whether raising the 401(k) deferral to the annual cap would save tax",
        validation_alias=AliasChoices("evaluate_401k", "evaluate401k"),
    )
    tax_year: int | None = Field(None, validation_alias=AliasChoices("tax_year", "taxYear"))

    model_config = ConfigDict(populate_by_name=True, extra="forbid")


class DeductionResult(BaseModel):
    deductions: list[FoundDeduction]
    credit_savings: Decimal
    total_annual_savings: Decimal
    total_monthly_savings: Decimal
    new_federal_tax: Decimal
    new_effective_rate: Decimal
    new_take_home: Decimal


class TaxRuleEntry(BaseModel):
    title: str
    content: str
    source: str

    model_config = ConfigDict(frozen=True)


class TaxRulesQuery(BaseModel):
    query: str


class TaxRulesResult(BaseModel):
    query: str
    results: list[TaxRuleEntry]
    tax_year: int


class LocationResult(BaseModel):
    state_name: str
    state_abbreviation: str
    city: str
