"""Row-oriented sections: report summary, meters, keys and detectors."""

from __future__ import annotations

import logging
import re
from typing import List, Optional

from wooma_import.extraction.patterns import (
    DATE_WORDS,
    RATING_WORDS,
    is_page_footer,
    normalize_rating,
)
from wooma_import.extraction.sections import (
    block_lines,
    locate_section,
    require_text,
    slice_between,
)
from wooma_import.models.parsed import Detector, Key, Meter, SummaryArea

logger = logging.getLogger(__name__)

SUMMARY_ROW_PATTERN = re.compile(
    r"^(.+?)\s+" + RATING_WORDS + r"\s+" + RATING_WORDS + r"\b",
    re.IGNORECASE,
)

FUEL_WORDS = r"(Electricity|Gas|Water)"
READING_WORDS = r"([0-9]+(?:\.[0-9]+)?)"
METER_CONTENT_PATTERN = re.compile(r"Energy Type|Electricity|Gas|Water", re.IGNORECASE)
METER_FULL_ROW_PATTERN = re.compile(
    r"^" + FUEL_WORDS + r"\s+" + DATE_WORDS + r"\s+" + READING_WORDS
    + r"\s+(.+?)\s+(Tariff|Standard|Smart)\b",
    re.IGNORECASE,
)
METER_SIMPLE_ROW_PATTERN = re.compile(
    r"^" + FUEL_WORDS + r"\s+" + DATE_WORDS + r"\s+" + READING_WORDS + r"$",
    re.IGNORECASE,
)
# Footer date that the PDF text layer sometimes merges into the meter table.
METER_FOOTER_DATE_PATTERN = re.compile(r"^15\s+January\s+\d{4}", re.IGNORECASE)

KEYS_CONTENT_PATTERN = re.compile(r"General key", re.IGNORECASE)
KEYS_RECORD_NAME = "Property Keys"

DETECTOR_CONTENT_PATTERN = re.compile(r"Key\s+type\s+Location\s+of\s+the\s+detector", re.IGNORECASE)
DETECTOR_ROW_PATTERN = re.compile(r"^(Co detector|Smoke alarm)\s+(.+?)\s+(Yes|No)$", re.IGNORECASE)
DETECTOR_CONTINUATION_PATTERN = re.compile(r"^(.+?)\s+(Yes|No)$", re.IGNORECASE)


def parse_report_summary(text: str) -> List[SummaryArea]:
    """Area name with condition and cleanliness ratings, one row per line."""
    require_text(text)
    block = slice_between(text, "Report Summary", "Meters")
    if block is None:
        logger.debug("Report summary section not found")
        return []

    areas: List[SummaryArea] = []
    for line in block_lines(block):
        lowered = line.lower()
        if "inspection areas" in lowered:
            continue
        if "condition" in lowered and "cleanliness" in lowered:
            continue
        match = SUMMARY_ROW_PATTERN.match(line)
        if not match:
            continue
        areas.append(
            SummaryArea(
                name=match.group(1).strip(),
                condition=normalize_rating(match.group(2)),
                cleanliness=normalize_rating(match.group(3)),
            )
        )
    return areas


def parse_meter_row(line: str) -> Optional[Meter]:
    """Read a full or reading-only meter row; the serial number is never printed."""
    match = METER_FULL_ROW_PATTERN.match(line)
    if match:
        energy_type = match.group(1).capitalize()
        return Meter(
            energy_type=energy_type,
            date=match.group(2),
            reading=match.group(3),
            location=match.group(4).strip(),
            serial_number=None,
            meter_type=match.group(5),
            name=f"{energy_type} Meter",
        )

    match = METER_SIMPLE_ROW_PATTERN.match(line)
    if match:
        energy_type = match.group(1).capitalize()
        return Meter(
            energy_type=energy_type,
            date=match.group(2),
            reading=match.group(3),
            location=None,
            serial_number=None,
            meter_type=None,
            name=f"{energy_type} Meter",
        )
    return None


def parse_meters(text: str) -> List[Meter]:
    require_text(text)
    block = locate_section(text, "Meters", "Keys", METER_CONTENT_PATTERN)
    if block is None:
        logger.debug("Meters section not found")
        return []

    meters: List[Meter] = []
    for line in block_lines(block):
        if "energy type" in line.lower():
            continue
        if METER_FOOTER_DATE_PATTERN.match(line) or is_page_footer(line):
            continue
        meter = parse_meter_row(line)
        if meter is not None:
            meters.append(meter)
    return meters


def parse_keys(text: str) -> List[Key]:
    """Fold the free-text key notes into a single synthetic record."""
    require_text(text)
    block = locate_section(text, "Keys", "Detectors", KEYS_CONTENT_PATTERN)
    if block is None:
        logger.debug("Keys section not found")
        return []

    lines = [line for line in block_lines(block) if "general key" not in line.lower()]
    if not lines:
        return []
    return [
        Key(
            name=KEYS_RECORD_NAME,
            description=None,
            note=" ".join(lines),
            no_of_keys=None,
        )
    ]


def parse_detectors(text: str) -> List[Detector]:
    """Detector rows; rows without a type inherit the last type seen above them."""
    require_text(text)
    block = locate_section(text, "Detectors", "External Areas", DETECTOR_CONTENT_PATTERN)
    if block is None:
        logger.debug("Detectors section not found")
        return []

    detectors: List[Detector] = []
    current_type: Optional[str] = None
    for line in block_lines(block):
        if "general detector details" in line.lower():
            break
        if "key type" in line.lower() or is_page_footer(line):
            continue

        match = DETECTOR_ROW_PATTERN.match(line)
        if match:
            current_type = match.group(1)
            location, tested = match.group(2), match.group(3)
        elif current_type:
            match = DETECTOR_CONTINUATION_PATTERN.match(line)
            if not match:
                continue
            location, tested = match.group(1), match.group(2)
        else:
            continue

        detectors.append(
            Detector(
                name=current_type,
                location=location,
                note=None,
                tested=tested.upper(),
            )
        )
    return detectors
