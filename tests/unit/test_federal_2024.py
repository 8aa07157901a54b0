from decimal import Decimal

import pytest

from taxapp.core.federal import calculate_federal_tax, pre_tax_contributions, take_home_pay
from taxapp.core.models import Deduction, DeductionKind, FilingStatus
from taxapp.core.tax_years import UnsupportedTaxYearError, get_tax_year_tables
from tests.fixtures.profiles import make_tax_input, standard_deduction


def test_single_60k_known_values() -> None:
    result = calculate_federal_tax(make_tax_input(60000))

    assert result.taxable_income == Decimal("60000")
    assert result.federal_tax == Decimal("8253")
    assert result.fica_tax == Decimal("4590")
    assert result.marginal_rate == Decimal("0.22")
    assert result.effective_rate == Decimal("0.2141")
    assert result.take_home == Decimal("47157")
    assert [b.tax for b in result.bracket_breakdown] == [
        Decimal("1160.00"),
        Decimal("4266.00"),
        Decimal("2827.00"),
    ]


def test_zero_income_is_all_zero() -> None:
    result = calculate_federal_tax(make_tax_input(0))

    assert result.federal_tax == 0
    assert result.fica_tax == 0
    assert result.effective_rate == 0
    assert result.take_home == 0
    assert result.marginal_rate == 0
    assert result.bracket_breakdown == []


def test_negative_income_is_clamped_but_echoed() -> None:
    result = calculate_federal_tax(make_tax_input(-5000))

    assert result.gross_income == Decimal("-5000")
    assert result.taxable_income == 0
    assert result.federal_tax == 0
    assert result.fica_tax == 0
    assert result.effective_rate == 0
    assert result.take_home == 0


def test_deductions_exceeding_gross_clamp_taxable_income() -> None:
    result = calculate_federal_tax(make_tax_input(10000, deductions=[standard_deduction()]))

    assert result.total_deductions == Decimal("14600")
    assert result.taxable_income == 0
    assert result.federal_tax == 0
    assert result.fica_tax == Decimal("765")


def test_pre_tax_contributions_reduce_take_home() -> None:
    deductions = [
        standard_deduction(),
        Deduction(label="401k", amount=Decimal("10000")),
        Deduction(label="HSA", amount=Decimal("2000")),
        Deduction(label="Mortgage Interest", amount=Decimal("3000")),
    ]
    result = calculate_federal_tax(make_tax_input(80000, deductions=deductions))

    assert pre_tax_contributions(deductions) == Decimal("12000")
    assert result.taxable_income == Decimal("50400")
    # 1160 + 4266 + 3250 * 0.22
    assert result.federal_tax == Decimal("6141")
    assert result.take_home == Decimal("80000") - Decimal("6141") - Decimal("6120") - Decimal("12000")


def test_take_home_rounds_to_whole_dollars() -> None:
    assert take_home_pay(Decimal("1000"), Decimal("100.40"), Decimal("76.50"), Decimal("0")) == Decimal("823")


@pytest.mark.parametrize(
    ("status", "gross", "expected_tax"),
    [
        # 2320 + (94300 - 23200) * 0.12
        (FilingStatus.MARRIED_JOINT, 94300, Decimal("10852")),
        (FilingStatus.MARRIED_SEPARATE, 60000, Decimal("8253")),
        # 17168.50 rounds half up
        (FilingStatus.SINGLE, 100525, Decimal("17169")),
    ],
)
def test_status_specific_brackets(status: FilingStatus, gross: int, expected_tax: Decimal) -> None:
    result = calculate_federal_tax(make_tax_input(gross, status))
    assert result.federal_tax == expected_tax


def test_head_of_household_marginal_rate() -> None:
    result = calculate_federal_tax(make_tax_input(50000, FilingStatus.HEAD_OF_HOUSEHOLD))
    # 16550 * 0.10 + (50000 - 16550) * 0.12
    assert result.federal_tax == Decimal("5669")
    assert result.marginal_rate == Decimal("0.12")


def test_explicit_kind_overrides_label_guess() -> None:
    deductions = [Deduction(label="HSAccount Fees", amount=Decimal("500"), kind=DeductionKind.ITEMIZED)]
    assert pre_tax_contributions(deductions) == 0


def test_unsupported_tax_year() -> None:
    with pytest.raises(UnsupportedTaxYearError) as excinfo:
        get_tax_year_tables(1999)
    assert excinfo.value.year == 1999
    assert "1999" in str(excinfo.value)


def test_tax_year_on_input_selects_tables() -> None:
    payload = make_tax_input(60000).model_copy(update={"tax_year": 1999})
    with pytest.raises(UnsupportedTaxYearError):
        calculate_federal_tax(payload)
