from fastapi import APIRouter, HTTPException
from pydantic import BaseModel
from typing import Any, Dict, List, Optional

from ledger_ocr.common.exceptions import InvalidTransactionError
from ledger_ocr.common.logging_config import get_logger
from ledger_ocr.common.models import Transaction, update_transaction_in_list
from ledger_ocr.common.settings import Settings
from ledger_ocr.parsing.config.registry import RuleRegistry
from ledger_ocr.parsing.extractors.category import classify_category
from ledger_ocr.parsing.pipeline import OCRTextPipeline

router = APIRouter()
logger = get_logger(__name__)


class ParseRequest(BaseModel):
    text: str
    reference_year: Optional[int] = None


class CategorizeRequest(BaseModel):
    merchant: str = ""
    description: str = ""


class TransactionModel(BaseModel):
    id: str
    date: str
    amount: float
    description: str
    category: str
    merchant: str


class UpdateRequest(BaseModel):
    transactions: List[TransactionModel]
    id: str
    updates: Dict[str, Any]


# Rule files are read and compiled once, when the router is imported.
settings = Settings.from_env()
registry = RuleRegistry(settings.rules_dir)
pipeline = OCRTextPipeline(registry, placeholder_amount=settings.placeholder_amount)


@router.post("/")
def parse_text(req: ParseRequest):
    """
    Parse the OCR text of one screenshot into transactions.
    """
    result = pipeline.process_text(req.text, req.reference_year)

    return {
        "transactions": [t.to_dict() for t in result['transactions']],
        "method": result['method'],
        "count": result['count'],
    }


@router.post("/categorize")
def categorize(req: CategorizeRequest):
    category = classify_category(req.merchant, req.description, pipeline.rules)
    return {"category": category}


@router.post("/update")
def update_transaction(req: UpdateRequest):
    """
    Apply a user edit to one parsed transaction (copy-on-write).
    """
    try:
        transactions = [Transaction(**t.model_dump()) for t in req.transactions]
        updated = update_transaction_in_list(transactions, req.id, req.updates)
    except InvalidTransactionError as e:
        logger.warning(f"Rejected transaction edit: {e}", transaction_id=req.id, field=e.field)
        raise HTTPException(status_code=422, detail=str(e))
    except TypeError as e:
        # unknown field names in "updates"
        raise HTTPException(status_code=422, detail=str(e))

    return {"transactions": [t.to_dict() for t in updated]}
