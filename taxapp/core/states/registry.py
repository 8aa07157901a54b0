from __future__ import annotations

from typing import Mapping

from taxapp.core.states.info import StateTaxInfo
from taxapp.core.states.table_2024 import STATE_TAX_2024

_STATE_TABLES: Mapping[str, StateTaxInfo] = STATE_TAX_2024


class UnknownStateError(KeyError):
    def __init__(self, abbreviation: str) -> None:
        super().__init__(f"Unknown state abbreviation: {abbreviation}")
        self.abbreviation = abbreviation

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


def get_state_info(abbreviation: str) -> StateTaxInfo:
    code = (abbreviation or "").strip().upper()
    try:
        return _STATE_TABLES[code]
    except KeyError as exc:
        raise UnknownStateError(code) from exc


def list_supported_states() -> list[str]:
    return sorted(_STATE_TABLES)


__all__ = ["UnknownStateError", "get_state_info", "list_supported_states"]
