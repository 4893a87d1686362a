"""
Date Resolver

Turns relative ("вчера", "today") and absolute ("пятница, 1 августа",
"01.08.2025", "2025-08-01") date expressions into ``YYYY-MM-DD``.
``resolve_date`` never fails: without a recognizable date it returns today.
"""
import re
from datetime import date, timedelta
from typing import Optional

from ledger_ocr.common.logging_config import get_logger
from ledger_ocr.common.models import DATE_FORMAT
from ..base import first_match
from ..config.defaults import (
    EN_WEEKDAYS,
    MONTHS,
    PL_WEEKDAYS,
    RU_WEEKDAYS,
    TODAY_WORDS,
    YESTERDAY_WORDS,
)

logger = get_logger(__name__)


def today() -> date:
    """Current local date. Every "today" in the parser goes through here."""
    return date.today()


def _alternation(words) -> str:
    # Longest first so "poniedziałek" is not cut short by a shorter prefix.
    return "|".join(sorted((re.escape(w) for w in words), key=len, reverse=True))


_MONTH_NAMES = _alternation(MONTHS)

TODAY_RE = re.compile(rf"(?<!\w)(?:{_alternation(TODAY_WORDS)})(?!\w)", re.IGNORECASE)
YESTERDAY_RE = re.compile(rf"(?<!\w)(?:{_alternation(YESTERDAY_WORDS)})(?!\w)", re.IGNORECASE)

# "пятница, 1 августа" / "friday, 1 august" / "piątek, 1 sierpnia"
WEEKDAY_PATTERNS = tuple(
    re.compile(rf"(?<!\w)(?:{_alternation(weekdays)}),?\s*(\d{{1,2}})\s+({_MONTH_NAMES})(?!\w)")
    for weekdays in (RU_WEEKDAYS, EN_WEEKDAYS, PL_WEEKDAYS)
)
# DD.MM.YYYY, DD/MM/YY, DD-MM-YYYY
DMY_PATTERN = re.compile(r"(?<!\d)(\d{1,2})[.\-/](\d{1,2})[.\-/](\d{4}|\d{2})(?!\d)")
# YYYY-MM-DD
YMD_PATTERN = re.compile(r"(?<!\d)(\d{4})[.\-/](\d{1,2})[.\-/](\d{1,2})(?!\d)")

# A line that is nothing but a relative day, optionally followed by its date:
# "Сегодня", "Вчера, 17 октября", "Today:"
RELATIVE_HEADING = re.compile(
    rf"^(?:{_alternation(TODAY_WORDS + YESTERDAY_WORDS)})(?!\w)"
    r"(?:[\s,.:]+(\d{1,2})\s+([^\W\d_]+))?[\s.:]*$",
    re.IGNORECASE,
)


def _build(year, month, day) -> Optional[date]:
    try:
        return date(int(year), int(month), int(day))
    except ValueError:
        return None


def _format(value: date) -> str:
    return value.strftime(DATE_FORMAT)


def _weekday_date(text: str, reference_year: int) -> Optional[str]:
    current = today()
    for pattern in WEEKDAY_PATTERNS:
        for match in pattern.finditer(text):
            day, month_name = match.groups()
            month = MONTHS.get(month_name)
            if not month:
                continue
            found = _build(reference_year, month, day)
            # A December heading read in January belongs to last year.
            if found and found > current:
                found = _build(reference_year - 1, month, day)
            if found:
                return _format(found)
            logger.debug("Discarding impossible weekday date", match=match.group(0))
    return None


def _day_month_year(text: str, reference_year: int) -> Optional[str]:
    for match in DMY_PATTERN.finditer(text):
        day, month, year = match.groups()
        if len(year) == 2:
            year = '20' + year
        found = _build(year, month, day)
        if found:
            return _format(found)
    return None


def _year_month_day(text: str, reference_year: int) -> Optional[str]:
    for match in YMD_PATTERN.finditer(text):
        found = _build(*match.groups())
        if found:
            return _format(found)
    return None


ABSOLUTE_DATE_FAMILIES = (_weekday_date, _day_month_year, _year_month_day)


def find_absolute_date(text: str, reference_year: Optional[int] = None) -> Optional[str]:
    """Return the first absolute date in ``text`` as YYYY-MM-DD, or None."""
    if not text:
        return None
    if reference_year is None:
        reference_year = today().year
    return first_match(ABSOLUTE_DATE_FAMILIES, text.lower(), reference_year)


def _relative_date(text: str) -> Optional[str]:
    if TODAY_RE.search(text):
        return _format(today())
    if YESTERDAY_RE.search(text):
        return _format(today() - timedelta(days=1))
    return None


def resolve_date(text: str, reference_year: Optional[int] = None) -> str:
    """
    Resolve the date mentioned in ``text``.

    Args:
        text: A line or a joined window of lines
        reference_year: Year for dates written without one (default: this year)

    Returns:
        YYYY-MM-DD. Relative words win over absolute dates; today is the fallback.
    """
    text = text or ''
    return (
        _relative_date(text)
        or find_absolute_date(text, reference_year)
        or _format(today())
    )


def match_heading(line: str, reference_year: Optional[int] = None) -> Optional[str]:
    """
    Return the date if ``line`` is a date heading of a transaction list, else None.

    Headings are lines with an absolute date, or lines made only of a relative
    day word ("Вчера", "Сегодня, 18 октября").
    """
    found = find_absolute_date(line, reference_year)
    if found:
        return found
    match = RELATIVE_HEADING.match((line or '').strip())
    if match:
        month_name = match.group(2)
        if month_name is None or month_name.lower() in MONTHS:
            return _relative_date(line)
    return None
