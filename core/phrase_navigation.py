# -*- coding: utf-8 -*-
"""
Search and untranslated-phrase navigation inside a group.

Both scans start after the current row, run to the end of the group and
then wrap around to the beginning, including the current row itself.
"""

from typing import Callable, Dict, List, Optional, Tuple

from langedit_logger import get_logger
from models.phrase_store import is_untranslated

logger = get_logger("core.phrase_navigation")


def _wrapped_rows(row_count: int, start: int) -> List[int]:
    first = start + 1
    if first < 0 or first > row_count:
        first = 0
    return list(range(first, row_count)) + list(range(0, min(first, row_count)))


def _scan(phrases: Dict[str, str], start: int,
          match: Callable[[str, str], bool]) -> Optional[int]:
    pairs: List[Tuple[str, str]] = list(phrases.items())
    for row in _wrapped_rows(len(pairs), start):
        eng, alt = pairs[row]
        if match(eng, alt):
            return row
    return None


def find_phrase(phrases: Dict[str, str], query: str, start: int = -1) -> Optional[int]:
    """
    Find the next pair whose English or alternative text contains ``query``,
    ignoring case.

    Args:
        phrases: Group mapping English -> alternative
        query: Text to look for
        start: Current row; the scan begins at start + 1

    Returns:
        Row index of the match, or None
    """
    if not query:
        return None
    needle = query.lower()
    row = _scan(phrases, start, lambda eng, alt: needle in eng.lower() or needle in alt.lower())
    logger.debug(f"Search '{query}' from row {start}: {row}")
    return row


def next_untranslated(phrases: Dict[str, str], start: int = -1) -> Optional[int]:
    """Row index of the next untranslated pair after ``start``, wrapping around."""
    return _scan(phrases, start, is_untranslated)
