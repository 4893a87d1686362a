"""
List Parser

Primary parser for banking-app transaction lists: date heading lines
followed by "Merchant   Amount" rows. The date of the last heading is
carried forward to the rows below it.
"""
import time
from typing import List, Optional

from ledger_ocr.common.logging_config import get_logger
from ledger_ocr.common.models import UNKNOWN_MERCHANT, Transaction
from .base import split_lines
from .config.defaults import DEFAULT_RULES
from .config.ruleset import RuleSet
from .extractors.amount import parse_amount
from .extractors.category import classify_category
from .extractors.dates import match_heading, resolve_date
from .extractors.merchant import identify_merchant

logger = get_logger(__name__)


def make_id(prefix: str, counter: int) -> str:
    """``<prefix>-<epoch ms>-<counter>``; unique within one call as long as counter grows."""
    return f"{prefix}-{int(time.time() * 1000)}-{counter}"


def is_confident_merchant(merchant: str) -> bool:
    return bool(merchant) and merchant != UNKNOWN_MERCHANT and len(merchant) > 1


def parse_transactions_list(
    text: str,
    reference_year: Optional[int] = None,
    rules: RuleSet = DEFAULT_RULES,
) -> List[Transaction]:
    """
    Parse a transaction list screenshot.

    Args:
        text: Raw OCR text
        reference_year: Year for headings written without one
        rules: Brand / category vocabularies

    Returns:
        Records in top-to-bottom order. Rows without an amount, or whose
        merchant cannot be identified with confidence, are skipped.
    """
    transactions = []
    current_date = None
    counter = 1

    for line in split_lines(text):
        heading = match_heading(line, reference_year)
        if heading:
            current_date = heading
            continue

        amount = parse_amount(line)
        if amount is None:
            continue

        merchant = identify_merchant(line, rules)
        if not is_confident_merchant(merchant):
            logger.debug("Dropping row without a confident merchant", line=line[:100])
            continue

        transactions.append(Transaction(
            id=make_id('parsed', counter),
            date=current_date or resolve_date(line, reference_year),
            amount=amount,
            description=merchant[:100],
            category=classify_category(merchant, line, rules),
            merchant=merchant,
        ))
        counter += 1

    return transactions
