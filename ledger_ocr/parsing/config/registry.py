"""
Rule Registry

Loads extra brand / category / noise-word vocabularies from JSON files and
merges them over the built-in defaults.

A rule file looks like::

    {
        "brand_groups": [{"name": "grocery", "patterns": ["Stokrotka"]}],
        "category_rules": [{"category": "Food", "patterns": ["Stokrotka"]}],
        "noise_words": ["saldo"]
    }
"""
import os
import json
from typing import Any, Dict, List, Optional

from ledger_ocr.common.exceptions import RuleSetError
from ledger_ocr.common.logging_config import get_logger
from .defaults import DEFAULT_RULES
from .ruleset import BrandGroup, CategoryRule, RuleSet

logger = get_logger(__name__)


def merge_rules(base: RuleSet, data: Dict[str, Any]) -> RuleSet:
    """
    Return a new RuleSet with ``data`` merged over ``base``.

    Brand groups and category rules with an existing name/category are
    extended in place (their position, and so their priority, is kept).
    New brand groups are appended. Category rules can only target the
    fixed categories.
    """
    if not isinstance(data, dict):
        raise RuleSetError("Rule file must contain a JSON object")

    groups = {g.name: list(g.patterns) for g in base.brand_groups}
    for entry in data.get('brand_groups', []):
        name, patterns = _entry(entry, 'name')
        groups.setdefault(name, []).extend(patterns)

    categories = {r.category: list(r.patterns) for r in base.category_rules}
    for entry in data.get('category_rules', []):
        category, patterns = _entry(entry, 'category')
        categories.setdefault(category, []).extend(patterns)

    extra_noise = data.get('noise_words', [])
    if isinstance(extra_noise, str) or not all(isinstance(w, str) for w in extra_noise):
        raise RuleSetError("'noise_words' must be a list of strings")
    noise = list(base.noise_words) + list(extra_noise)

    return RuleSet(
        brand_groups=[BrandGroup(name, patterns) for name, patterns in groups.items()],
        category_rules=[CategoryRule(category, patterns) for category, patterns in categories.items()],
        noise_words=noise,
    )


def _entry(entry: Dict[str, Any], key: str):
    if not isinstance(entry, dict) or key not in entry:
        raise RuleSetError(f"Rule entry is missing '{key}': {entry!r}")
    patterns = entry.get('patterns', [])
    if isinstance(patterns, str) or not all(isinstance(p, str) for p in patterns):
        raise RuleSetError(f"'patterns' must be a list of strings: {entry!r}")
    return entry[key], patterns


class RuleRegistry:
    """
    Registry of the vocabularies used by the parser.

    Scans ``rules_dir`` for ``.json`` files once, in file-name order, and
    exposes the merged result as ``rules``.
    """

    def __init__(self, rules_dir: Optional[str] = None, base: RuleSet = DEFAULT_RULES):
        """
        Initialize registry.

        Args:
            rules_dir: Directory containing .json rule files, or None for defaults only
            base: RuleSet the files are merged over
        """
        self.rules_dir = rules_dir
        self.loaded_files: List[str] = []
        self.rules = base
        self._load_rule_files()

    def _load_rule_files(self) -> None:
        """Scans the directory and merges all .json rule files."""
        if not self.rules_dir:
            return
        if not os.path.isdir(self.rules_dir):
            logger.warning(f"Rules directory not found: {self.rules_dir}")
            return

        for fname in sorted(os.listdir(self.rules_dir)):
            if not fname.endswith(".json"):
                continue
            fpath = os.path.join(self.rules_dir, fname)
            try:
                with open(fpath, 'r', encoding='utf-8') as f:
                    data = json.load(f)
                self.rules = merge_rules(self.rules, data)
                self.loaded_files.append(fname)
                logger.debug(f"Loaded rule file: {fname}")
            except (OSError, ValueError) as e:
                # RuleSetError and JSONDecodeError are both ValueErrors
                logger.error(f"Error loading rule file {fname}: {e}", filename=fname)

    def list_files(self) -> List[str]:
        """List the rule files merged into this registry."""
        return list(self.loaded_files)
