"""
Integration tests for the OCR text pipeline and the pandas facade

Tests cover:
- Tier selection (list, block, line, manual) and the reported method
- Empty input handling
- Rule registries changing the results
- ParserFacade DataFrame output and category summary
"""
import json
from datetime import date
from unittest.mock import patch

import pandas as pd
import pytest

from ledger_ocr.common.models import IMAGE_MERCHANT
from ledger_ocr.common.settings import Settings
from ledger_ocr.parsing.config.registry import RuleRegistry
from ledger_ocr.parsing.facade import COLUMNS, ParserFacade
from ledger_ocr.parsing.pipeline import (
    METHOD_BLOCK,
    METHOD_EMPTY,
    METHOD_LINE,
    METHOD_LIST,
    METHOD_MANUAL,
    OCRTextPipeline,
    parse_transactions_from_text,
)


@pytest.fixture
def pipeline():
    return OCRTextPipeline()


# =============================================================================
# TEST: tier selection
# =============================================================================

class TestTierSelection:
    """Each tier is reached only when the previous ones found nothing."""

    def test_list_tier(self, pipeline, fixed_today, screenshot_text):
        result = pipeline.process_text(screenshot_text, reference_year=2025)

        assert result['method'] == METHOD_LIST
        assert result['count'] == 6
        assert result['error'] is None

    def test_block_tier(self, pipeline, fixed_today):
        result = pipeline.process_text("Kwiaciarnia Róża\n45,00 zł")

        assert result['method'] == METHOD_BLOCK
        assert result['count'] == 1
        assert result['transactions'][0].merchant == "Kwiaciarnia Róża"

    def test_one_record_per_block(self, pipeline, fixed_today):
        text = "Kwiaciarnia Róża\n45,00 zł\n\nNotatka\nbrak kwoty\n\nPiekarnia Kłos\n7,20 zł"
        result = pipeline.process_text(text)

        assert result['method'] == METHOD_BLOCK
        assert [t.merchant for t in result['transactions']] == ["Kwiaciarnia Róża", "Piekarnia Kłos"]
        ids = [t.id for t in result['transactions']]
        assert len(set(ids)) == 2

    def test_line_tier(self, pipeline, fixed_today):
        """Test that lines are parsed when the block tier finds nothing."""
        with patch('ledger_ocr.parsing.pipeline.smart_parse_transaction', return_value=None):
            result = pipeline.process_text("12,00 PLN\n45,50 zł")

        assert result['method'] == METHOD_LINE
        assert [t.amount for t in result['transactions']] == [-12.0, -45.5]

    def test_manual_tier(self, pipeline, fixed_today):
        result = pipeline.process_text("Lorem ipsum dolor sit amet")

        assert result['method'] == METHOD_MANUAL
        assert result['count'] == 1
        record = result['transactions'][0]
        assert record.merchant == IMAGE_MERCHANT
        assert record.amount == -100.0

    def test_placeholder_amount_is_configurable(self, fixed_today):
        result = OCRTextPipeline(placeholder_amount=-5.0).process_text("???")
        assert result['transactions'][0].amount == -5.0


# =============================================================================
# TEST: empty input
# =============================================================================

class TestEmptyInput:

    @pytest.mark.parametrize("text", ["", "   ", "\n\n", None])
    def test_empty_text(self, pipeline, text):
        result = pipeline.process_text(text)

        assert result['transactions'] == []
        assert result['method'] == METHOD_EMPTY
        assert result['count'] == 0
        assert result['error'] == "Empty OCR text."

    def test_convenience_function(self, fixed_today):
        assert parse_transactions_from_text("") == []
        assert len(parse_transactions_from_text("Uber 25,00 PLN")) == 1


# =============================================================================
# TEST: rule registries
# =============================================================================

class TestCustomRules:
    """Rule files extend the built-in vocabularies."""

    def test_extra_category_keyword(self, tmp_path, fixed_today):
        (tmp_path / "flowers.json").write_text(json.dumps({
            "category_rules": [{"category": "Home", "patterns": ["Kwiaciarni\\w*"]}],
        }), encoding='utf-8')

        default = OCRTextPipeline().process_text("Kwiaciarnia Róża 45,00 zł")
        custom = OCRTextPipeline(RuleRegistry(str(tmp_path))).process_text("Kwiaciarnia Róża 45,00 zł")

        assert default['transactions'][0].category == "Other"
        assert custom['transactions'][0].category == "Home"

    def test_extra_brand(self, tmp_path, fixed_today):
        (tmp_path / "brands.json").write_text(json.dumps({
            "brand_groups": [{"name": "local", "patterns": ["Kłos"]}],
        }), encoding='utf-8')

        result = OCRTextPipeline(RuleRegistry(str(tmp_path))).process_text("Piekarnia Kłos 7,20 zł")
        assert result['transactions'][0].merchant == "Kłos"


# =============================================================================
# TEST: facade
# =============================================================================

class TestParserFacade:
    """DataFrame view of the pipeline."""

    @pytest.fixture
    def facade(self):
        return ParserFacade(settings=Settings())

    def test_dataframe_columns(self, facade, fixed_today, screenshot_text):
        df, metadata = facade.parse(screenshot_text, reference_year=2025)

        assert list(df.columns) == COLUMNS
        assert len(df) == 6
        assert metadata == {'method': METHOD_LIST, 'count': 6}
        assert (df['source'] == 'OCR').all()
        assert df['date'].iloc[0] == date(2025, 8, 1)
        assert df['amount'].sum() == pytest.approx(-105.74)

    def test_empty_text(self, facade):
        df, metadata = facade.parse("")

        assert df.empty
        assert list(df.columns) == COLUMNS
        assert metadata['method'] == METHOD_EMPTY

    def test_summarize(self, facade, fixed_today, screenshot_text):
        df, _ = facade.parse(screenshot_text, reference_year=2025)
        summary = ParserFacade.summarize(df)

        assert summary.to_dict('records') == [
            {'category': 'Food', 'count': 3},
            {'category': 'Entertainment', 'count': 2},
            {'category': 'Health', 'count': 1},
        ]

    def test_summarize_empty(self):
        summary = ParserFacade.summarize(pd.DataFrame(columns=COLUMNS))
        assert summary.empty
        assert list(summary.columns) == ['category', 'count']

    def test_placeholder_from_settings(self, fixed_today):
        facade = ParserFacade(settings=Settings(placeholder_amount=-7.0))
        df, metadata = facade.parse("???")

        assert metadata['method'] == METHOD_MANUAL
        assert df['amount'].iloc[0] == -7.0
