from .ruleset import BrandGroup, CategoryRule, RuleSet
from .defaults import DEFAULT_RULES
from .registry import RuleRegistry, merge_rules

__all__ = ['BrandGroup', 'CategoryRule', 'RuleSet', 'DEFAULT_RULES', 'RuleRegistry', 'merge_rules']
