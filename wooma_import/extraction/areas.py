"""Free-text areas: the external areas block and each inspected room."""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from wooma_import.extraction.patterns import RATING_WORDS, normalize_rating
from wooma_import.extraction.sections import (
    match_one,
    require_text,
    slice_after,
    slice_between,
)
from wooma_import.models.parsed import ExternalAreas, Room

logger = logging.getLogger(__name__)

DESCRIPTION_PATTERN = re.compile(r"Description\s*\n\s*([\s\S]+)")
ROOM_HEADING_PATTERN = re.compile(r"^\d+:[ \t]+\S[^\n]*$", re.MULTILINE)
ROOM_NUMBER_PREFIX = re.compile(r"^\d+:\s*")
RATING_PAIR_PATTERN = re.compile(
    r"\b" + RATING_WORDS + r"\b\s+\b" + RATING_WORDS + r"\b",
    re.IGNORECASE,
)


def _text_or_none(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_external_areas(text: str) -> ExternalAreas:
    require_text(text)
    block = slice_between(text, "External Areas", "Inspection Areas")
    if block is None:
        logger.debug("External areas section not found")
        return ExternalAreas(description=None)
    return ExternalAreas(description=_text_or_none(match_one(block, DESCRIPTION_PATTERN)))


def parse_room(chunk: str) -> Room:
    """Read one ``N: Room name`` chunk up to the next room heading."""
    title = chunk.split("\n", 1)[0].strip()
    name = ROOM_NUMBER_PREFIX.sub("", title)

    condition = None
    cleanliness = None
    ratings = RATING_PAIR_PATTERN.search(chunk)
    if ratings:
        condition = normalize_rating(ratings.group(1))
        cleanliness = normalize_rating(ratings.group(2))

    return Room(
        name=name,
        condition=condition,
        cleanliness=cleanliness,
        description=_text_or_none(slice_between(chunk, "Description", "Defects")),
        defects=_text_or_none(slice_after(chunk, "Defects")),
    )


def parse_inspection_areas(text: str) -> List[Room]:
    require_text(text)
    match = re.search("Inspection Areas", text, re.IGNORECASE)
    if match is None:
        logger.debug("Inspection areas section not found")
        return []
    inspection = text[match.start():]

    starts = [heading.start() for heading in ROOM_HEADING_PATTERN.finditer(inspection)]
    if not starts:
        logger.debug("No numbered rooms under inspection areas")
        return []

    ends = starts[1:] + [len(inspection)]
    return [parse_room(inspection[start:end]) for start, end in zip(starts, ends)]
