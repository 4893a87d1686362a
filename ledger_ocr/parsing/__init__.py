"""
Parsing Module for ledger-ocr

Turns OCR text from banking-app screenshots into transactions:
- Field extractors (amount, date, merchant, category)
- List parser with carried-forward date headings
- Fallback tiers (block, line-by-line, manual review)
- Pipeline orchestration and a pandas facade
"""

# Configuration
from .config import BrandGroup, CategoryRule, RuleSet, DEFAULT_RULES, RuleRegistry

# Extractors
from .extractors import (
    parse_amount,
    resolve_date,
    find_absolute_date,
    match_heading,
    identify_merchant,
    classify_category,
)

# Parsers
from .list_parser import parse_transactions_list
from .fallback import smart_parse_transaction, parse_lines, manual_review_transaction

# Pipeline & Facade
from .pipeline import OCRTextPipeline, parse_transactions_from_text
from .facade import ParserFacade

__all__ = [
    # Config
    'BrandGroup',
    'CategoryRule',
    'RuleSet',
    'DEFAULT_RULES',
    'RuleRegistry',
    # Extractors
    'parse_amount',
    'resolve_date',
    'find_absolute_date',
    'match_heading',
    'identify_merchant',
    'classify_category',
    # Parsers
    'parse_transactions_list',
    'smart_parse_transaction',
    'parse_lines',
    'manual_review_transaction',
    # Pipeline
    'OCRTextPipeline',
    'parse_transactions_from_text',
    'ParserFacade',
]
