from taxapp.rules.search import list_rule_categories, match_categories, search_tax_rules

__all__ = ["list_rule_categories", "match_categories", "search_tax_rules"]
