from .amount import parse_amount
from .dates import find_absolute_date, match_heading, resolve_date
from .merchant import identify_merchant
from .category import classify_category

__all__ = [
    'parse_amount',
    'resolve_date',
    'find_absolute_date',
    'match_heading',
    'identify_merchant',
    'classify_category',
]
