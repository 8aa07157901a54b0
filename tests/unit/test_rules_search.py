from taxapp.core.models import TaxRulesQuery
from taxapp.rules import list_rule_categories, match_categories, search_tax_rules
from taxapp.rules.catalog_2025 import DEFAULT_CATEGORIES, TAX_RULES_2025


def test_unmatched_query_falls_back_to_defaults() -> None:
    assert match_categories("xyzzy") == list(DEFAULT_CATEGORIES)

    result = search_tax_rules(TaxRulesQuery(query="xyzzy"))

    expected = [entry for category in DEFAULT_CATEGORIES for entry in TAX_RULES_2025[category]]
    assert result.results == expected
    assert result.tax_year == 2025
    assert result.query == "xyzzy"


def test_matches_follow_catalog_order_not_query_order() -> None:
    assert match_categories("HSA vs 401k") == ["401k", "hsa"]


def test_keywords_are_case_insensitive() -> None:
    assert match_categories("Social Security wage base") == ["fica"]


def test_category_reported_once() -> None:
    assert match_categories("medicare and payroll and fica") == ["fica"]


def test_search_concatenates_category_entries() -> None:
    result = search_tax_rules(TaxRulesQuery(query="estate gift tax"))

    assert result.results == list(TAX_RULES_2025["estate tax"])


def test_categories_listed() -> None:
    categories = list_rule_categories()
    assert len(categories) == 12
    assert categories[0] == "brackets"
