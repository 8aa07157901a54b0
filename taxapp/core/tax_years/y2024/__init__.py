from taxapp.core.tax_years.tables import TaxYearTables
from taxapp.core.tax_years.y2024.federal import BRACKETS_2024, STANDARD_DEDUCTIONS_2024
from taxapp.core.tax_years.y2024.limits import CONTRIBUTIONS_2024, PAYROLL_2024

TABLES_2024 = TaxYearTables(
    year=2024,
    federal_brackets=BRACKETS_2024,
    standard_deductions=STANDARD_DEDUCTIONS_2024,
    payroll=PAYROLL_2024,
    contributions=CONTRIBUTIONS_2024,
)

__all__ = ["TABLES_2024"]
