"""
Amount Extractor

Finds the spent amount in one line of OCR text. Every screenshot is a
spending ledger, so recognized amounts are always returned negative.
"""
import re
from typing import Optional

from ..base import first_match
from ..config.defaults import LOCAL_CURRENCY, OTHER_CURRENCY

LOCAL_MARKER = "(?:" + "|".join(LOCAL_CURRENCY) + ")"
ANY_MARKER = "(?:" + "|".join(LOCAL_CURRENCY + OTHER_CURRENCY) + ")"

# Not followed by a letter: "PLN" but not "PLNX", "EUR" but not "EURO".
_END = r"(?![^\W\d_])"

# 1 299,99 / 1.299,99 / 29,99 / 30
_COMMA_NUMBER = r"(?:\d{1,3}(?:[ .\u00a0]\d{3})+|\d+)(?:,\d{1,2})?"
# 1 299.99 / 29,99 / 29.99 / 30
_GENERIC_NUMBER = r"(?:\d{1,3}(?:[ \u00a0]\d{3})+|\d+)(?:[,.]\d{1,2})?"

LOCAL_AMOUNT = re.compile(
    rf"(?<![\d.,])(?P<value>{_COMMA_NUMBER})\s*{LOCAL_MARKER}{_END}", re.IGNORECASE
)
CURRENCY_AMOUNT = re.compile(
    rf"(?<![\d.,])[-−]?\s*(?P<value>{_GENERIC_NUMBER})\s*{ANY_MARKER}{_END}", re.IGNORECASE
)
# Last resort: "-12,50" with no marker. The sign must not sit inside a
# word or a date such as 2025-08-01.
NEGATIVE_NUMBER = re.compile(
    rf"(?<![\w.,\-−])[-−]\s*(?P<value>{_GENERIC_NUMBER})(?![\d.,/\-])"
)

# Used by the merchant stage to blank out amounts before picking words.
AMOUNT_TOKEN = re.compile(rf"[-−]?\d+[,.]?\d*\s*{ANY_MARKER}{_END}", re.IGNORECASE)


def _to_float(raw: str, decimal_comma: bool) -> Optional[float]:
    clean = re.sub(r"\s", "", raw)
    if decimal_comma:
        clean = clean.replace('.', '').replace(',', '.')
    else:
        clean = clean.replace(',', '.')
    try:
        return float(clean)
    except ValueError:
        return None


def _family(pattern, decimal_comma: bool):
    def matcher(text: str) -> Optional[float]:
        match = pattern.search(text)
        if not match:
            return None
        value = _to_float(match.group('value'), decimal_comma)
        # NaN fails the comparison as well
        if value is None or not value > 0:
            return None
        return -abs(value)
    return matcher


AMOUNT_FAMILIES = (
    _family(LOCAL_AMOUNT, decimal_comma=True),
    _family(CURRENCY_AMOUNT, decimal_comma=False),
    _family(NEGATIVE_NUMBER, decimal_comma=False),
)


def parse_amount(text: str) -> Optional[float]:
    """
    Return the negative amount found in ``text``, or None.

    Examples:
        "Duży Ben   29,99 PLN" -> -29.99
        "Такси 1 250 ₽"        -> -1250.0
        "Opłata -12,50"        -> -12.5
        "Операции"             -> None
    """
    if not text:
        return None
    return first_match(AMOUNT_FAMILIES, text)
