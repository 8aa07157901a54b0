from decimal import Decimal

from taxapp.core.models import Deduction, DeductionKind
from taxapp.optimize.ledger import DeductionLedger, ledger_key
from tests.fixtures.profiles import standard_deduction


def test_single_slot_kinds_share_a_key() -> None:
    a = Deduction(label="401k", amount=Decimal("1"))
    b = Deduction(label="My 401(k) plan", amount=Decimal("2"))
    assert ledger_key(a) == ledger_key(b) == (DeductionKind.PRE_TAX_401K, None)


def test_itemized_entries_keyed_by_label() -> None:
    ledger = DeductionLedger.from_deductions(
        [
            Deduction(label="Mortgage Interest", amount=Decimal("9000")),
            Deduction(label="State Taxes", amount=Decimal("4000")),
        ]
    )

    assert len(ledger) == 2
    assert ledger.amount_for(DeductionKind.ITEMIZED) == Decimal("13000")


def test_duplicate_kinds_are_summed() -> None:
    ledger = DeductionLedger.from_deductions(
        [
            Deduction(label="401k", amount=Decimal("5000")),
            Deduction(label="401k catch-up", amount=Decimal("3000")),
        ]
    )

    assert len(ledger) == 1
    assert ledger.amount_for(DeductionKind.PRE_TAX_401K) == Decimal("8000")


def test_override_beats_existing_entry_and_leaves_original_untouched() -> None:
    original = DeductionLedger.from_deductions([standard_deduction(), Deduction(label="401k", amount=Decimal("5000"))])

    updated = original.with_override(Deduction(label="401(k) Contribution", amount=Decimal("23000")))

    assert updated.amount_for(DeductionKind.PRE_TAX_401K) == Decimal("23000")
    assert original.amount_for(DeductionKind.PRE_TAX_401K) == Decimal("5000")
    assert len(updated) == 2


def test_without_kind_drops_every_entry_of_that_kind() -> None:
    ledger = DeductionLedger.from_deductions([standard_deduction(), Deduction(label="Gifts", amount=Decimal("100"))])

    trimmed = ledger.without_kind(DeductionKind.STANDARD)

    assert (DeductionKind.STANDARD, None) in ledger
    assert (DeductionKind.STANDARD, None) not in trimmed
    assert [d.label for d in trimmed.to_list()] == ["Gifts"]


def test_amount_at_reads_one_slot() -> None:
    ledger = DeductionLedger.from_deductions([Deduction(label="Charitable Donations", amount=Decimal("250"))])

    assert ledger.amount_at((DeductionKind.ITEMIZED, "Charitable Donations")) == Decimal("250")
    assert ledger.amount_at((DeductionKind.ITEMIZED, "Gifts")) == 0
