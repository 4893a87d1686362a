"""
Rule Set Configuration

Defines the frozen dataclasses holding the brand, category and noise-word
vocabularies used by the merchant identifier and category classifier.
"""
import re
from dataclasses import dataclass, field
from typing import Optional, Pattern, Tuple

from ledger_ocr.common.exceptions import RuleSetError
from ledger_ocr.common.models import CATEGORIES


def compile_alternation(patterns, whole_word: bool = True) -> Optional[Pattern]:
    """
    Compile regex fragments into one case-insensitive alternation.

    Returns None for an empty pattern list (a group that never matches).
    """
    if not patterns:
        return None
    body = "|".join(f"(?:{p})" for p in patterns)
    if whole_word:
        body = rf"(?<!\w)(?:{body})(?!\w)"
    try:
        return re.compile(body, re.IGNORECASE)
    except re.error as e:
        raise RuleSetError(f"Invalid pattern in rule set: {e}")


@dataclass(frozen=True)
class BrandGroup:
    """
    Known merchant names of one domain (grocery chains, pharmacies, ...).

    Attributes:
        name: Group key, used to extend the group from rule files
        patterns: Regex fragments, one per brand, matched as whole words
    """
    name: str
    patterns: Tuple[str, ...]
    regex: Optional[Pattern] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'patterns', tuple(self.patterns))
        object.__setattr__(self, 'regex', compile_alternation(self.patterns))

    def search(self, text: str) -> Optional[str]:
        if self.regex is None:
            return None
        match = self.regex.search(text)
        return match.group(0) if match else None


@dataclass(frozen=True)
class CategoryRule:
    """
    Keyword patterns that put a transaction in one category.

    Attributes:
        category: One of the fixed categories
        patterns: Regex fragments, matched as whole words (use ``\\w*`` for stems)
    """
    category: str
    patterns: Tuple[str, ...]
    regex: Optional[Pattern] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        if self.category not in CATEGORIES:
            raise RuleSetError(f"Unknown category: {self.category}")
        object.__setattr__(self, 'patterns', tuple(self.patterns))
        object.__setattr__(self, 'regex', compile_alternation(self.patterns))

    def matches(self, text: str) -> bool:
        return self.regex is not None and self.regex.search(text) is not None


@dataclass(frozen=True)
class RuleSet:
    """
    Everything the merchant and category stages need, built once.

    Rule order is significant: earlier brand groups and category rules
    shadow later ones.
    """
    brand_groups: Tuple[BrandGroup, ...]
    category_rules: Tuple[CategoryRule, ...]
    noise_words: Tuple[str, ...] = ()
    noise_regex: Optional[Pattern] = field(init=False, repr=False, compare=False)

    def __post_init__(self):
        object.__setattr__(self, 'brand_groups', tuple(self.brand_groups))
        object.__setattr__(self, 'category_rules', tuple(self.category_rules))
        object.__setattr__(self, 'noise_words', tuple(self.noise_words))
        object.__setattr__(self, 'noise_regex', compile_alternation(self.noise_words, whole_word=False))

    def is_noise(self, word: str) -> bool:
        return self.noise_regex is not None and self.noise_regex.fullmatch(word) is not None
