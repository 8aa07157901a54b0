from decimal import Decimal

import pytest

from taxapp.core.models import FilingStatus
from taxapp.core.payroll import compute_fica


def test_fica_below_wage_base() -> None:
    assert compute_fica(Decimal("60000"), FilingStatus.SINGLE) == Decimal("4590.00")


def test_social_security_stops_at_wage_base() -> None:
    # 168600 * 0.062 + 180000 * 0.0145
    assert compute_fica(Decimal("180000"), FilingStatus.SINGLE) == Decimal("13063.20")


@pytest.mark.parametrize(
    ("status", "expected"),
    [
        # 10453.20 + 3625 + 50000 * 0.009
        (FilingStatus.SINGLE, Decimal("14528.20")),
        (FilingStatus.HEAD_OF_HOUSEHOLD, Decimal("14528.20")),
        # threshold 250000 is not exceeded
        (FilingStatus.MARRIED_JOINT, Decimal("14078.20")),
        # 125000 threshold: 125000 * 0.009
        (FilingStatus.MARRIED_SEPARATE, Decimal("15203.20")),
    ],
)
def test_additional_medicare_threshold_by_status(status: FilingStatus, expected: Decimal) -> None:
    assert compute_fica(Decimal("250000"), status) == expected


def test_negative_wages_clamp_to_zero() -> None:
    assert compute_fica(Decimal("-100"), FilingStatus.SINGLE) == 0
