from __future__ import annotations

from decimal import Decimal
from types import MappingProxyType
from typing import Iterable, Mapping

from taxapp.core.models import Deduction, DeductionKind
from taxapp.core.rounding import ZERO

D = Decimal

LedgerKey = tuple[DeductionKind, str | None]


def ledger_key(deduction: Deduction) -> LedgerKey:
    """401(k), HSA and standard collapse to one slot each; itemized entries are keyed by label."""
    if deduction.kind is DeductionKind.ITEMIZED:
        return (deduction.kind, deduction.label)
    return (deduction.kind, None)


class DeductionLedger:
    """Read-only set of deductions where an override always beats the existing entry."""

    __slots__ = ("_entries",)

    def __init__(self, entries: Mapping[LedgerKey, Deduction] | None = None) -> None:
        self._entries: Mapping[LedgerKey, Deduction] = MappingProxyType(dict(entries or {}))

    @classmethod
    def from_deductions(cls, deductions: Iterable[Deduction]) -> "DeductionLedger":
        merged: dict[LedgerKey, Deduction] = {}
        for deduction in deductions:
            key = ledger_key(deduction)
            existing = merged.get(key)
            if existing is None:
                merged[key] = deduction
            else:
                merged[key] = existing.model_copy(update={"amount": existing.amount + deduction.amount})
        return cls(merged)

    def with_override(self, deduction: Deduction) -> "DeductionLedger":
        entries = dict(self._entries)
        entries[ledger_key(deduction)] = deduction
        return DeductionLedger(entries)

    def without_kind(self, kind: DeductionKind) -> "DeductionLedger":
        return DeductionLedger({key: d for key, d in self._entries.items() if key[0] is not kind})

    def amount_for(self, kind: DeductionKind) -> D:
        return sum((d.amount for key, d in self._entries.items() if key[0] is kind), ZERO)

    def amount_at(self, key: LedgerKey) -> D:
        entry = self._entries.get(key)
        return entry.amount if entry is not None else ZERO

    def to_list(self) -> list[Deduction]:
        return list(self._entries.values())

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries


__all__ = ["DeductionLedger", "LedgerKey", "ledger_key"]
