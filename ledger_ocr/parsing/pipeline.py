"""
OCR Text Pipeline

Orchestrates the parsing tiers over the text recognized from one screenshot:
List Parser, per-block parsing, line-by-line parsing and finally a
manual-review placeholder, so every non-empty OCR text yields at least one row.
"""
from typing import Any, Dict, List, Optional

from ledger_ocr.common.logging_config import get_logger
from ledger_ocr.common.models import Transaction
from ledger_ocr.common.settings import DEFAULT_PLACEHOLDER_AMOUNT
from .base import split_blocks
from .config.defaults import DEFAULT_RULES
from .config.registry import RuleRegistry
from .fallback import manual_review_transaction, parse_lines, smart_parse_transaction
from .list_parser import parse_transactions_list

logger = get_logger(__name__)

METHOD_EMPTY = 'empty'
METHOD_LIST = 'list'
METHOD_BLOCK = 'block'
METHOD_LINE = 'line'
METHOD_MANUAL = 'manual'


class OCRTextPipeline:
    """
    Main orchestrator for turning OCR text into transactions.

    Handles:
    - List parsing with carried-forward date headings
    - Per-block fallback for texts without list layout
    - Line-by-line fallback
    - Manual-review placeholder when nothing is recognized
    """

    def __init__(self, registry: Optional[RuleRegistry] = None, placeholder_amount: float = DEFAULT_PLACEHOLDER_AMOUNT):
        """
        Initialize pipeline.

        Args:
            registry: RuleRegistry supplying the vocabularies (defaults when None)
            placeholder_amount: Amount of the manual-review record
        """
        self.registry = registry
        self.rules = registry.rules if registry is not None else DEFAULT_RULES
        self.placeholder_amount = placeholder_amount

    def process_text(self, text: str, reference_year: Optional[int] = None) -> Dict[str, Any]:
        """
        Parse OCR text through every tier until one yields records.

        Args:
            text: Raw OCR output for one image
            reference_year: Year for dates written without one

        Returns:
            Dict with transactions, method, count, error
        """
        result = {
            'transactions': [],
            'method': METHOD_EMPTY,
            'count': 0,
            'error': None,
        }

        if not text or not text.strip():
            logger.warning("Empty OCR text, nothing to parse")
            result['error'] = "Empty OCR text."
            return result

        logger.debug("OCR text received", text_length=len(text))

        transactions, method = self._run_tiers(text, reference_year)
        result['transactions'] = transactions
        result['method'] = method
        result['count'] = len(transactions)
        return result

    def _run_tiers(self, text: str, reference_year: Optional[int]):
        # 1. Transaction list layout
        transactions = parse_transactions_list(text, reference_year, self.rules)
        if transactions:
            logger.info(f"Successfully parsed {len(transactions)} transactions", method=METHOD_LIST, count=len(transactions))
            return transactions, METHOD_LIST

        # 2. One transaction per blank-line separated block
        transactions = []
        for i, block in enumerate(split_blocks(text)):
            parsed = smart_parse_transaction(block, i, reference_year, self.rules)
            if parsed:
                transactions.append(parsed)
        if transactions:
            logger.info(f"Fallback parsed {len(transactions)} transactions", method=METHOD_BLOCK, count=len(transactions))
            return transactions, METHOD_BLOCK

        # 3. Every line holding an amount
        transactions = parse_lines(text, reference_year, self.rules)
        if transactions:
            logger.info(f"Line-by-line parsed {len(transactions)} transactions", method=METHOD_LINE, count=len(transactions))
            return transactions, METHOD_LINE

        # 4. Placeholder for manual editing
        logger.info("No transactions found, creating manual edit transaction", method=METHOD_MANUAL, count=1)
        return [manual_review_transaction(text, self.placeholder_amount)], METHOD_MANUAL


def parse_transactions_from_text(text: str, reference_year: Optional[int] = None) -> List[Transaction]:
    """Parse with the default vocabularies and return only the records."""
    return OCRTextPipeline().process_text(text, reference_year)['transactions']
