"""Regular expressions and token normalizers shared by the extractors."""

from __future__ import annotations

import re
from typing import Optional

from wooma_import.models.parsed import Rating

RATING_WORDS = r"(Excellent|Good|Fair|Poor|Unacceptable)"
DATE_WORDS = r"([0-9]{1,2}\s+[A-Za-z]+\s+[0-9]{4})"

PAGE_FOOTER_PATTERN = re.compile(r"page\s+\d+\s+of\s+\d+", re.IGNORECASE)
UK_POSTCODE_PATTERN = re.compile(r"[A-Z]{1,2}\d{1,2}[A-Z]?\s*\d[A-Z]{2}", re.IGNORECASE)


def normalize_rating(value: Optional[str]) -> Optional[Rating]:
    """Map a rating word in any case to its canonical token; anything else is None."""
    if value is None:
        return None
    return Rating.__members__.get(value.strip().upper())


def is_page_footer(line: str) -> bool:
    return PAGE_FOOTER_PATTERN.search(line) is not None
