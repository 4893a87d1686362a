"""
Environment-driven settings.

    LEDGER_OCR_RULES_DIR           directory of extra *.json rule files
    LEDGER_OCR_LOG_LEVEL           DEBUG / INFO / WARNING ...
    LEDGER_OCR_LOG_FILE            optional JSON log file path
    LEDGER_OCR_PLACEHOLDER_AMOUNT  amount of the manual-review record
"""
import math
import os
from dataclasses import dataclass
from typing import Optional

from .logging_config import get_logger

logger = get_logger(__name__)

DEFAULT_PLACEHOLDER_AMOUNT = -100.0


def valid_placeholder(value) -> Optional[float]:
    """Negated ``value``, or None when it cannot be a record amount (zero, NaN, inf)."""
    try:
        amount = -abs(float(value))
    except (TypeError, ValueError):
        return None
    if amount == 0 or not math.isfinite(amount):
        return None
    return amount


@dataclass(frozen=True)
class Settings:
    rules_dir: Optional[str] = None
    log_level: str = 'INFO'
    log_file: Optional[str] = None
    placeholder_amount: float = DEFAULT_PLACEHOLDER_AMOUNT

    @classmethod
    def from_env(cls) -> 'Settings':
        raw_amount = os.getenv('LEDGER_OCR_PLACEHOLDER_AMOUNT')
        placeholder = DEFAULT_PLACEHOLDER_AMOUNT
        if raw_amount:
            placeholder = valid_placeholder(raw_amount.replace(',', '.'))
            if placeholder is None:
                logger.warning(f"Ignoring invalid LEDGER_OCR_PLACEHOLDER_AMOUNT: {raw_amount}, using default")
                placeholder = DEFAULT_PLACEHOLDER_AMOUNT

        return cls(
            rules_dir=os.getenv('LEDGER_OCR_RULES_DIR') or None,
            log_level=os.getenv('LEDGER_OCR_LOG_LEVEL', 'INFO'),
            log_file=os.getenv('LEDGER_OCR_LOG_FILE') or None,
            placeholder_amount=placeholder,
        )
