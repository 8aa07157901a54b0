"""Tax-year tables behind a single lookup.

Rolling forward means adding a ``yNNNN`` package and registering it here;
calculation code only ever asks :func:`get_tax_year_tables`.
"""
from __future__ import annotations

from taxapp.core.tax_years.tables import ContributionLimits, PayrollLimits, TaxYearTables
from taxapp.core.tax_years.y2024 import TABLES_2024

DEFAULT_TAX_YEAR = 2024

_TABLES_BY_YEAR: dict[int, TaxYearTables] = {
    2024: TABLES_2024,
}

SUPPORTED_YEARS: tuple[int, ...] = tuple(sorted(_TABLES_BY_YEAR))


class UnsupportedTaxYearError(ValueError):
    def __init__(self, year: int) -> None:
        super().__init__(f"Unsupported tax year {year}; available: {', '.join(map(str, SUPPORTED_YEARS))}")
        self.year = year


def get_tax_year_tables(year: int | None = None) -> TaxYearTables:
    resolved = DEFAULT_TAX_YEAR if year is None else year
    try:
        return _TABLES_BY_YEAR[resolved]
    except KeyError as exc:
        raise UnsupportedTaxYearError(resolved) from exc


__all__ = [
    "ContributionLimits",
    "DEFAULT_TAX_YEAR",
    "PayrollLimits",
    "SUPPORTED_YEARS",
    "TaxYearTables",
    "UnsupportedTaxYearError",
    "get_tax_year_tables",
]
