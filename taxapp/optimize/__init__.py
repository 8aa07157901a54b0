from taxapp.optimize.finder import find_deductions
from taxapp.optimize.ledger import DeductionLedger

__all__ = ["DeductionLedger", "find_deductions"]
