"""
Shared fixtures.

``fixed_today`` pins the parser clock so date assertions do not depend on
when the suite runs.
"""
from datetime import date

import pytest

from ledger_ocr.parsing.extractors import dates

FIXED_TODAY = date(2025, 10, 18)


@pytest.fixture
def fixed_today(monkeypatch):
    """Freeze ``dates.today()`` at 2025-10-18."""
    monkeypatch.setattr(dates, "today", lambda: FIXED_TODAY)
    return FIXED_TODAY


@pytest.fixture
def screenshot_text():
    """OCR text of a Polish banking-app list rendered with a Russian UI."""
    return """
Операции

пятница, 1 августа

Duży Ben                    29,99 PLN

ROSSMANN                     8,99 PLN

четверг, 31 июля

Duży Ben                    19,99 PLN

среда, 30 июля

Żabka                       25,29 PLN

Żabka                        3,40 PLN

воскресенье, 27 июля

Żabka                       18,08 PLN
"""
