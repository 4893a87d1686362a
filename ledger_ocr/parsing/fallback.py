"""
Fallback Parsers

Used when the List Parser finds nothing. Each tier is more permissive than
the one before:

- ``smart_parse_transaction``: one record per text block (tiers 1-2)
- ``parse_lines``: one record per line holding an amount (tier 3)
- ``manual_review_transaction``: a placeholder row for the user to fix (tier 4)
"""
from dataclasses import replace
from typing import List, Optional

from ledger_ocr.common.models import (
    DESCRIPTION_LIMIT,
    IMAGE_MERCHANT,
    OTHER,
    REVIEW_MARKER,
    Transaction,
)
from ledger_ocr.common.settings import DEFAULT_PLACEHOLDER_AMOUNT, valid_placeholder
from .base import split_lines
from .config.defaults import DEFAULT_RULES
from .config.ruleset import RuleSet
from .extractors import dates
from .extractors.amount import parse_amount
from .extractors.category import classify_category
from .extractors.merchant import identify_merchant
from .list_parser import make_id, parse_transactions_list

MANUAL_REVIEW_ID = 'ocr-manual-edit'


def smart_parse_transaction(
    block: str,
    index: int = 0,
    reference_year: Optional[int] = None,
    rules: RuleSet = DEFAULT_RULES,
) -> Optional[Transaction]:
    """
    Extract at most one transaction from an undifferentiated block of text.

    The List Parser is tried first. Otherwise the first line with an amount
    (or the first line at all) is the "best line", and date and merchant
    are read from a window of one line before it and two after.

    Args:
        block: Text block (usually one blank-line separated chunk)
        index: Position of the block, used in the record id
        reference_year: Year for dates written without one
        rules: Brand / category vocabularies

    Returns:
        A Transaction, or None when no amount can be found.
    """
    listed = parse_transactions_list(block, reference_year, rules)
    if listed:
        return replace(listed[0], id=make_id('block', index))

    lines = split_lines(block)
    if not lines:
        return None

    best_line = None
    context_lines = []
    for i, line in enumerate(lines):
        if parse_amount(line) is not None:
            best_line = line
            context_lines = lines[max(0, i - 1):i + 3]
            break

    if best_line is None:
        best_line = lines[0]
        context_lines = lines[:3]

    context_text = " ".join(context_lines)
    amount = parse_amount(best_line) or parse_amount(context_text)
    if amount is None:
        return None

    merchant = identify_merchant(context_text, rules)
    return Transaction(
        id=make_id('block', index),
        date=dates.resolve_date(context_text, reference_year),
        amount=amount,
        description=best_line[:DESCRIPTION_LIMIT],
        category=classify_category(merchant, best_line, rules),
        merchant=merchant,
    )


def parse_lines(
    text: str,
    reference_year: Optional[int] = None,
    rules: RuleSet = DEFAULT_RULES,
) -> List[Transaction]:
    """One record for every line with an amount; neighbours supply the date."""
    lines = split_lines(text)
    transactions = []

    for i, line in enumerate(lines):
        amount = parse_amount(line)
        if amount is None:
            continue

        context_text = " ".join(lines[max(0, i - 1):i + 2])
        transactions.append(Transaction(
            id=f"ocr-line-{i + 1}",
            date=dates.resolve_date(context_text, reference_year),
            amount=amount,
            description=line[:DESCRIPTION_LIMIT],
            category=classify_category('', line, rules),
            merchant=identify_merchant(line, rules),
        ))

    return transactions


def manual_review_transaction(text: str, placeholder_amount: float = DEFAULT_PLACEHOLDER_AMOUNT) -> Transaction:
    """
    Placeholder row shown when nothing could be parsed.

    The description keeps the start of the raw text followed by the
    review marker, within the description limit.
    """
    room = DESCRIPTION_LIMIT - len(REVIEW_MARKER) - 1
    snippet = (text or '').strip()[:room]
    description = f"{snippet} {REVIEW_MARKER}" if snippet else REVIEW_MARKER

    return Transaction(
        id=MANUAL_REVIEW_ID,
        date=dates.resolve_date(''),
        amount=valid_placeholder(placeholder_amount) or DEFAULT_PLACEHOLDER_AMOUNT,
        description=description,
        category=OTHER,
        merchant=IMAGE_MERCHANT,
    )
