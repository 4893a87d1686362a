import math
from dataclasses import dataclass, replace
from datetime import datetime
from typing import Any, Dict, List

from .exceptions import InvalidTransactionError

# Category taxonomy. ``Other`` is the catch-all.
FOOD = 'Food'
HEALTH = 'Health'
TRANSPORT = 'Transport'
ENTERTAINMENT = 'Entertainment'
HOME = 'Home'
OTHER = 'Other'

CATEGORIES = (FOOD, TRANSPORT, ENTERTAINMENT, HOME, HEALTH, OTHER)

UNKNOWN_MERCHANT = 'unknown'
IMAGE_MERCHANT = 'Распознано из изображения'
REVIEW_MARKER = '[требует редактирования]'

DESCRIPTION_LIMIT = 100
DATE_FORMAT = '%Y-%m-%d'


@dataclass(frozen=True)
class Transaction:
    """
    One spending record recovered from OCR text.

    Records are immutable: edits go through ``with_updates`` which returns a
    new, re-validated record.
    """
    id: str
    date: str  # YYYY-MM-DD
    amount: float  # negative = expense
    description: str
    category: str
    merchant: str

    def __post_init__(self):
        if not isinstance(self.amount, (int, float)) or isinstance(self.amount, bool):
            raise InvalidTransactionError("Amount must be a number", field='amount', value=self.amount)
        if math.isnan(self.amount) or self.amount == 0:
            raise InvalidTransactionError("Amount must be non-zero", field='amount', value=self.amount)
        if self.category not in CATEGORIES:
            raise InvalidTransactionError("Unknown category", field='category', value=self.category)
        if not self.merchant:
            raise InvalidTransactionError("Merchant must not be empty", field='merchant', value=self.merchant)
        try:
            datetime.strptime(self.date, DATE_FORMAT)
        except (TypeError, ValueError):
            raise InvalidTransactionError("Date must be YYYY-MM-DD", field='date', value=self.date)
        if len(self.description) > DESCRIPTION_LIMIT:
            raise InvalidTransactionError(
                f"Description longer than {DESCRIPTION_LIMIT} characters",
                field='description',
            )

    def with_updates(self, **changes) -> 'Transaction':
        """Return a copy with ``changes`` applied. The id cannot change."""
        changes.pop('id', None)
        return replace(self, **changes)

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'date': self.date,
            'amount': self.amount,
            'description': self.description,
            'category': self.category,
            'merchant': self.merchant,
        }


def update_transaction_in_list(
    transactions: List[Transaction], transaction_id: str, updates: Dict[str, Any]
) -> List[Transaction]:
    """
    Copy-on-write edit of one record in a list.

    Records with other ids are returned as-is; an unknown id leaves the list unchanged.
    """
    return [
        t.with_updates(**updates) if t.id == transaction_id else t
        for t in transactions
    ]
