"""Run every HelloReport extractor over one normalized document."""

from __future__ import annotations

import logging

from wooma_import.extraction.areas import parse_external_areas, parse_inspection_areas
from wooma_import.extraction.checklist import parse_checklist
from wooma_import.extraction.header import parse_property_header
from wooma_import.extraction.normalize import strip_links
from wooma_import.extraction.sections import require_text
from wooma_import.extraction.tables import (
    parse_detectors,
    parse_keys,
    parse_meters,
    parse_report_summary,
)
from wooma_import.models.parsed import ParsedReport

logger = logging.getLogger(__name__)


def parse_report(text: str) -> ParsedReport:
    """Extract only what is literally present; anything unmatched stays None."""
    text = strip_links(require_text(text))
    parsed = ParsedReport(
        property=parse_property_header(text),
        checklist=parse_checklist(text),
        report_summary=parse_report_summary(text),
        meters=parse_meters(text),
        keys=parse_keys(text),
        detectors=parse_detectors(text),
        external_areas=parse_external_areas(text),
        rooms=parse_inspection_areas(text),
    )
    logger.debug(
        "Parsed %s rooms, %s meters, %s keys, %s detectors",
        len(parsed.rooms),
        len(parsed.meters),
        len(parsed.keys),
        len(parsed.detectors),
    )
    return parsed
