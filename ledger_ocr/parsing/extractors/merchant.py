"""
Merchant Identifier

Finds the counterparty of a transaction line. Stages, in priority order:

1. Known brand names (highest confidence)
2. Name at line start followed by an amount column ("Duży Ben   29,99 PLN")
3. Name at line start followed by a wide gap (5+ spaces)
4. First words left after removing amounts, dates and noise words

Returns ``UNKNOWN_MERCHANT`` when nothing usable is left.
"""
import re
from typing import Optional

from ledger_ocr.common.models import UNKNOWN_MERCHANT
from ..base import first_match
from ..config.defaults import DEFAULT_RULES
from ..config.ruleset import RuleSet
from .amount import AMOUNT_TOKEN, ANY_MARKER

# A run of letters with single spaces, apostrophes, ampersands, dots or hyphens.
_NAME_RUN = r"[^\W\d_](?:[^\W\d_]|[ '&.\-])*?"

AMOUNT_COLUMN_ROW = re.compile(
    rf"^(?P<name>{_NAME_RUN})\s+[-−]?\d+(?:[ \u00a0]\d{{3}})*(?:[,.]\d+)?\s*{ANY_MARKER}(?![^\W\d_])",
    re.IGNORECASE,
)
WIDE_GAP_ROW = re.compile(rf"^(?P<name>{_NAME_RUN})\s{{5,}}")

DATE_TOKEN = re.compile(r"\d+[.\-/]\d+[.\-/]\d+")
_PUNCTUATION = ",.:;!?()[]{}|\"'«»"


def _brand(text: str, rules: RuleSet) -> Optional[str]:
    for group in rules.brand_groups:
        found = group.search(text)
        if found:
            return found
    return None


def _layout_name(pattern, text: str) -> Optional[str]:
    match = pattern.match(text.strip())
    if not match:
        return None
    name = match.group('name').strip(" '&.-")
    if len(name) > 1 and name[0].isupper():
        return name
    return None


def _amount_column(text: str, rules: RuleSet) -> Optional[str]:
    return _layout_name(AMOUNT_COLUMN_ROW, text)


def _wide_gap(text: str, rules: RuleSet) -> Optional[str]:
    return _layout_name(WIDE_GAP_ROW, text)


def _leading_words(text: str, rules: RuleSet) -> Optional[str]:
    clean = AMOUNT_TOKEN.sub(' ', text)
    clean = DATE_TOKEN.sub(' ', clean)

    words = [w.strip(_PUNCTUATION) for w in clean.split()]
    words = [w for w in words if len(w) > 1 and any(c.isalpha() for c in w)]
    if not words:
        return None

    meaningful = [w for w in words if not rules.is_noise(w)]
    if meaningful:
        return " ".join(meaningful[:2])
    return words[0]


MERCHANT_STAGES = (_brand, _amount_column, _wide_gap, _leading_words)


def identify_merchant(text: str, rules: RuleSet = DEFAULT_RULES) -> str:
    """
    Return the merchant named in ``text``; never empty.

    Examples:
        "ROSSMANN      8,99 PLN"       -> "ROSSMANN"
        "Kwiaciarnia Róża  15,00 PLN"  -> "Kwiaciarnia Róża"
        "12,00 PLN"                    -> "unknown"
    """
    if not text or not text.strip():
        return UNKNOWN_MERCHANT
    return first_match(MERCHANT_STAGES, text, rules) or UNKNOWN_MERCHANT
