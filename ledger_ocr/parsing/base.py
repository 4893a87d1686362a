"""
Shared helpers for the parsing stages.

Every stage is an ordered chain of matcher functions; each matcher returns
a result or None and the first non-None result wins.
"""
import re
from typing import Callable, Iterable, List, Optional, TypeVar

T = TypeVar('T')

Matcher = Callable[..., Optional[T]]


def first_match(matchers: Iterable[Matcher], *args, **kwargs) -> Optional[T]:
    """Run ``matchers`` in order and return the first non-None result."""
    for matcher in matchers:
        result = matcher(*args, **kwargs)
        if result is not None:
            return result
    return None


def split_lines(text: str) -> List[str]:
    """Split OCR text on newlines, stripping each line and dropping blanks."""
    if not text:
        return []
    lines = (line.strip() for line in text.split('\n'))
    return [line for line in lines if line]


def split_blocks(text: str) -> List[str]:
    """Split OCR text on blank lines. Falls back to the whole text as one block."""
    blocks = [b.strip() for b in re.split(r"\n\s*\n", text or '') if b.strip()]
    if not blocks and text and text.strip():
        blocks = [text.strip()]
    return blocks
