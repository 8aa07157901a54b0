from decimal import Decimal

import pytest
from pydantic import ValidationError

from taxapp.core.models import (
    Deduction,
    DeductionFinderInput,
    DeductionKind,
    FilingStatus,
    StateTaxInput,
    TaxInput,
    classify_deduction_label,
)


@pytest.mark.parametrize(
    ("label", "kind"),
    [
        ("401k", DeductionKind.PRE_TAX_401K),
        ("Roth 401K match", DeductionKind.PRE_TAX_401K),
        ("401(k) Contribution", DeductionKind.PRE_TAX_401K),
        ("HSA", DeductionKind.PRE_TAX_HSA),
        ("Standard Deduction", DeductionKind.STANDARD),
        ("Mortgage Interest", DeductionKind.ITEMIZED),
    ],
)
def test_label_classification(label: str, kind: DeductionKind) -> None:
    assert classify_deduction_label(label) is kind
    assert Deduction(label=label, amount=Decimal("1")).kind is kind


def test_substring_match_misreads_hsaccount_fees() -> None:
    # Known fragility of label guessing; callers should send ``kind``.
    assert classify_deduction_label("HSAccount Fees") is DeductionKind.PRE_TAX_HSA


def test_explicit_kind_wins() -> None:
    deduction = Deduction.model_validate({"label": "HSAccount Fees", "amount": 10, "kind": "itemized"})
    assert deduction.kind is DeductionKind.ITEMIZED


def test_negative_deduction_rejected() -> None:
    with pytest.raises(ValidationError):
        Deduction(label="Gifts", amount=Decimal("-1"))


def test_tax_input_accepts_camel_case() -> None:
    payload = TaxInput.model_validate(
        {
            "grossIncome": "85000",
            "filingStatus": "head_of_household",
            "deductions": [{"label": "401k", "amount": 1000}],
        }
    )

    assert payload.gross_income == Decimal("85000")
    assert payload.filing_status is FilingStatus.HEAD_OF_HOUSEHOLD
    assert payload.deductions[0].kind is DeductionKind.PRE_TAX_401K
    assert payload.tax_year is None


def test_tax_input_rejects_unknown_fields_and_statuses() -> None:
    with pytest.raises(ValidationError):
        TaxInput.model_validate({"gross_income": 1, "bonus": 2})
    with pytest.raises(ValidationError):
        TaxInput.model_validate({"gross_income": 1, "filing_status": "widowed"})


def test_state_input_aliases() -> None:
    payload = StateTaxInput.model_validate({"state": "ca", "income": 1000})
    assert payload.state_abbreviation == "ca"
    assert payload.filing_status is FilingStatus.SINGLE


def test_finder_input_defaults() -> None:
    payload = DeductionFinderInput.model_validate({"grossIncome": 50000, "currentFederalTax": 4000, "hasHSA": True})

    assert payload.has_hsa is True
    assert payload.current_hsa_contribution is None
    assert payload.evaluate_401k is True
    assert payload.current_deductions == []
