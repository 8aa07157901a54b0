from decimal import Decimal

from taxapp.core.models import (
    Deduction,
    DeductionFinderInput,
    DeductionKind,
    FilingStatus,
    TaxInput,
)

STANDARD_SINGLE_2024 = Decimal("14600")


def standard_deduction(amount: Decimal = STANDARD_SINGLE_2024) -> Deduction:
    return Deduction(label="Standard Deduction", amount=amount, kind=DeductionKind.STANDARD)


def make_tax_input(
    gross: int | str = 60000,
    status: FilingStatus = FilingStatus.SINGLE,
    deductions: list[Deduction] | None = None,
) -> TaxInput:
    return TaxInput(
        gross_income=Decimal(str(gross)),
        filing_status=status,
        deductions=deductions or [],
    )


def make_finder_input(
    gross: int | str = 60000,
    current_tax: int | str = 0,
    deductions: list[Deduction] | None = None,
    **toggles,
) -> DeductionFinderInput:
    """Finder profile with every toggle off unless ``toggles`` turns it on."""
    payload = {
        "gross_income": Decimal(str(gross)),
        "filing_status": FilingStatus.SINGLE,
        "current_federal_tax": Decimal(str(current_tax)),
        "current_deductions": deductions or [],
        "evaluate_401k": False,
    }
    payload.update(toggles)
    return DeductionFinderInput(**payload)


def scenario_hsa_and_401k() -> DeductionFinderInput:
    return make_finder_input(
        gross=80000,
        current_tax=7241,
        deductions=[
            standard_deduction(),
            Deduction(label="401(k)", amount=Decimal("10000")),
        ],
        has_hsa=True,
        current_hsa_contribution=Decimal("0"),
        evaluate_401k=True,
    )


def scenario_two_children() -> DeductionFinderInput:
    return make_finder_input(
        gross=60000,
        current_tax=5216,
        deductions=[standard_deduction()],
        has_dependents=True,
        dependent_count=2,
    )
