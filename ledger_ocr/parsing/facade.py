import pandas as pd
from typing import Optional

from ledger_ocr.common.settings import Settings
from .config.registry import RuleRegistry
from .pipeline import OCRTextPipeline

COLUMNS = ['id', 'date', 'amount', 'description', 'category', 'merchant', 'source']


class ParserFacade:
    """
    Tabular view of the OCR text pipeline for callers working with pandas.
    """

    def __init__(self, registry: Optional[RuleRegistry] = None, settings: Optional[Settings] = None):
        settings = settings or Settings.from_env()
        if registry is None:
            registry = RuleRegistry(settings.rules_dir)
        self.registry = registry
        self.pipeline = OCRTextPipeline(registry, placeholder_amount=settings.placeholder_amount)

    def parse(self, text: str, reference_year: Optional[int] = None):
        """
        Parse OCR text.
        Returns: (pd.DataFrame, dict) -> (transactions, metadata)
        """
        result = self.pipeline.process_text(text, reference_year)
        metadata = {
            'method': result['method'],
            'count': result['count'],
        }

        txs = result['transactions']
        if not txs:
            return pd.DataFrame(columns=COLUMNS), metadata

        df = pd.DataFrame([t.to_dict() for t in txs])
        df['source'] = 'OCR'
        df['date'] = pd.to_datetime(df['date']).dt.date
        return df[COLUMNS], metadata

    @staticmethod
    def summarize(df: pd.DataFrame) -> pd.DataFrame:
        """
        Number of parsed records per category, for the "N transactions found" notice.
        """
        if df.empty:
            return pd.DataFrame(columns=['category', 'count'])
        return (
            df.groupby('category')
            .size()
            .reset_index(name='count')
            .sort_values(['count', 'category'], ascending=[False, True])
            .reset_index(drop=True)
        )
