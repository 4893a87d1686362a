"""
Category Classifier

Maps merchant + description to one of the fixed categories using the
ordered keyword rules of a RuleSet. Earlier rules shadow later ones.
"""
from ledger_ocr.common.models import OTHER
from ..config.defaults import DEFAULT_RULES
from ..config.ruleset import RuleSet


def classify_category(merchant: str, description: str, rules: RuleSet = DEFAULT_RULES) -> str:
    """Return the category of the first matching rule, or ``Other``."""
    text = f"{merchant or ''} {description or ''}".lower()
    for rule in rules.category_rules:
        if rule.matches(text):
            return rule.category
    return OTHER
