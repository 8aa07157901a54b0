from __future__ import annotations

from decimal import Decimal

from taxapp.core.brackets import TaxBracket
from taxapp.core.models import FilingStatus

D = Decimal

# IRS Revenue Procedure 2023-34
BRACKETS_2024: dict[FilingStatus, tuple[TaxBracket, ...]] = {
    FilingStatus.SINGLE: (
        TaxBracket(D("0"),       D("11600"),  D("0.10")),
        TaxBracket(D("11600"),   D("47150"),  D("0.12")),
        TaxBracket(D("47150"),   D("100525"), D("0.22")),
        TaxBracket(D("100525"),  D("191950"), D("0.24")),
        TaxBracket(D("191950"),  D("243725"), D("0.32")),
        TaxBracket(D("243725"),  D("609350"), D("0.35")),
        TaxBracket(D("609350"),  None,        D("0.37")),
    ),
    FilingStatus.MARRIED_JOINT: (
        TaxBracket(D("0"),       D("23200"),  D("0.10")),
        TaxBracket(D("23200"),   D("94300"),  D("0.12")),
        TaxBracket(D("94300"),   D("201050"), D("0.22")),
        TaxBracket(D("201050"),  D("383900"), D("0.24")),
        TaxBracket(D("383900"),  D("487450"), D("0.32")),
        TaxBracket(D("487450"),  D("731200"), D("0.35")),
        TaxBracket(D("731200"),  None,        D("0.37")),
    ),
    FilingStatus.MARRIED_SEPARATE: (
        TaxBracket(D("0"),       D("11600"),  D("0.10")),
        TaxBracket(D("11600"),   D("47150"),  D("0.12")),
        TaxBracket(D("47150"),   D("100525"), D("0.22")),
        TaxBracket(D("100525"),  D("191950"), D("0.24")),
        TaxBracket(D("191950"),  D("243725"), D("0.32")),
        TaxBracket(D("243725"),  D("365600"), D("0.35")),
        TaxBracket(D("365600"),  None,        D("0.37")),
    ),
    FilingStatus.HEAD_OF_HOUSEHOLD: (
        TaxBracket(D("0"),       D("16550"),  D("0.10")),
        TaxBracket(D("16550"),   D("63100"),  D("0.12")),
        TaxBracket(D("63100"),   D("100500"), D("0.22")),
        TaxBracket(D("100500"),  D("191950"), D("0.24")),
        TaxBracket(D("191950"),  D("243700"), D("0.32")),
        TaxBracket(D("243700"),  D("609350"), D("0.35")),
        TaxBracket(D("609350"),  None,        D("0.37")),
    ),
}

STANDARD_DEDUCTIONS_2024: dict[FilingStatus, D] = {
    FilingStatus.SINGLE: D("14600"),
    FilingStatus.MARRIED_JOINT: D("29200"),
    FilingStatus.MARRIED_SEPARATE: D("14600"),
    FilingStatus.HEAD_OF_HOUSEHOLD: D("21900"),
}
