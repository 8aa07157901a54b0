from __future__ import annotations

from taxapp.core.models import TaxRuleEntry, TaxRulesQuery, TaxRulesResult
from taxapp.rules.catalog_2025 import DEFAULT_CATEGORIES, KEYWORD_MAP, RULES_TAX_YEAR, TAX_RULES_2025


def match_categories(query: str) -> list[str]:
    """Every category with a keyword contained in ``query``, in catalog order, no ranking."""
    lowered = query.lower()
    matched: list[str] = []
    for keywords, category in KEYWORD_MAP:
        if category in matched:
            continue
        if any(keyword in lowered for keyword in keywords):
            matched.append(category)
    return matched or list(DEFAULT_CATEGORIES)


def search_tax_rules(input_: TaxRulesQuery) -> TaxRulesResult:
    results: list[TaxRuleEntry] = []
    for category in match_categories(input_.query):
        results.extend(TAX_RULES_2025.get(category, ()))
    return TaxRulesResult(query=input_.query, results=results, tax_year=RULES_TAX_YEAR)


def list_rule_categories() -> list[str]:
    return list(TAX_RULES_2025)


__all__ = ["list_rule_categories", "match_categories", "search_tax_rules"]
