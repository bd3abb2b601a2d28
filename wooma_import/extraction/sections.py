"""Locate report sections between known headings.

HelloReport repeats its headings: once in the contents list near the top of
the document and again above the real section. ``locate_section`` walks every
occurrence of the start heading and keeps the first slice whose content looks
like the section it is meant to be, so callers never have to know which
occurrence is the real one.
"""

from __future__ import annotations

import logging
import re
from typing import List, Optional, Union

logger = logging.getLogger(__name__)

ContentPattern = Union[str, re.Pattern[str]]


def require_text(text: object) -> str:
    if not isinstance(text, str):
        raise TypeError(f"Expected report text as str, got {type(text).__name__}")
    return text


def _heading(marker: str) -> re.Pattern[str]:
    return re.compile(re.escape(marker), re.IGNORECASE)


def _content_pattern(pattern: Optional[ContentPattern]) -> Optional[re.Pattern[str]]:
    if pattern is None or isinstance(pattern, re.Pattern):
        return pattern
    return re.compile(pattern, re.IGNORECASE)


def locate_section(
    text: str,
    start: str,
    end: str,
    required: Optional[ContentPattern] = None,
) -> Optional[str]:
    """Return the first non-empty slice between ``start`` and ``end`` that matches ``required``."""
    require_text(text)
    start_pattern = _heading(start)
    end_pattern = _heading(end)
    content_pattern = _content_pattern(required)

    offset = 0
    while True:
        start_match = start_pattern.search(text, offset)
        if start_match is None:
            return None
        body_start = start_match.end()
        offset = body_start

        end_match = end_pattern.search(text, body_start)
        if end_match is None:
            continue
        candidate = text[body_start:end_match.start()].strip()
        if not candidate:
            continue
        if content_pattern is None or content_pattern.search(candidate):
            return candidate
        logger.debug("Skipping %r occurrence at %s without expected content", start, start_match.start())


def slice_between(text: str, start: str, end: str) -> Optional[str]:
    """Slice from the first ``start`` to the next ``end``, or to the end of text."""
    require_text(text)
    start_match = _heading(start).search(text)
    if start_match is None:
        return None
    end_match = _heading(end).search(text, start_match.end())
    if end_match is None:
        return text[start_match.end():].strip()
    return text[start_match.end():end_match.start()].strip()


def slice_after(text: str, start: str) -> Optional[str]:
    require_text(text)
    start_match = _heading(start).search(text)
    if start_match is None:
        return None
    return text[start_match.end():].strip()


def match_one(text: str, pattern: re.Pattern[str]) -> Optional[str]:
    """First capture group of ``pattern`` in ``text``, trimmed."""
    match = pattern.search(text)
    if match:
        return match.group(1).strip()
    return None


def block_lines(block: str) -> List[str]:
    """Trimmed, non-empty lines of a section block."""
    return [line.strip() for line in block.split("\n") if line.strip()]
