import argparse
import json
from decimal import Decimal

import pytest

from taxapp.core.models import DeductionKind
from taxapp.main import main, parse_amount, parse_deduction


def test_parse_amount_strips_formatting() -> None:
    assert parse_amount("$60,000.50") == Decimal("60000.50")
    with pytest.raises(argparse.ArgumentTypeError):
        parse_amount("lots")


def test_parse_deduction_with_and_without_kind() -> None:
    guessed = parse_deduction("401k=5000")
    explicit = parse_deduction("itemized:HSAccount Fees=120")

    assert guessed.kind is DeductionKind.PRE_TAX_401K
    assert guessed.amount == Decimal("5000")
    assert explicit.kind is DeductionKind.ITEMIZED
    assert explicit.label == "HSAccount Fees"


def test_parse_deduction_requires_amount() -> None:
    with pytest.raises(argparse.ArgumentTypeError):
        parse_deduction("Mortgage")


def test_federal_json_output(capsys) -> None:
    assert main(["--color", "never", "--json", "federal", "--income", "60000"]) == 0
    body = json.loads(capsys.readouterr().out)
    assert Decimal(body["federal_tax"]) == Decimal("8253")
    assert Decimal(body["take_home"]) == Decimal("47157")


def test_federal_table_output(capsys) -> None:
    assert main(["--color", "never", "federal", "--income", "60000", "--standard"]) == 0
    out = capsys.readouterr().out
    assert "Federal summary" in out
    assert "$45,400.00" in out


def test_deductions_computes_current_tax_when_missing(capsys) -> None:
    code = main(
        [
            "--color",
            "never",
            "--json",
            "deductions",
            "--income",
            "60000",
            "--standard",
            "--dependents",
            "2",
            "--skip-401k",
        ]
    )
    assert code == 0
    body = json.loads(capsys.readouterr().out)
    assert Decimal(body["new_federal_tax"]) == Decimal("1216")
    assert Decimal(body["total_annual_savings"]) == Decimal("4000")


def test_unknown_state_exit_code(capsys) -> None:
    assert main(["--color", "never", "state", "--state", "ZZ", "--income", "1000"]) == 2
    assert "Unknown state abbreviation: ZZ" in capsys.readouterr().out


def test_rules_lookup(capsys) -> None:
    assert main(["--color", "never", "rules", "estate", "tax"]) == 0
    assert "Estate" in capsys.readouterr().out
