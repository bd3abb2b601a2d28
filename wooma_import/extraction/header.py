"""Cover-page fields: address, appointment date and assessor."""

from __future__ import annotations

import logging
import re
from typing import Optional, Tuple

from wooma_import.extraction.patterns import DATE_WORDS, UK_POSTCODE_PATTERN
from wooma_import.extraction.sections import match_one, require_text
from wooma_import.models.parsed import PropertyHeader

logger = logging.getLogger(__name__)

APPOINTMENT_DATE_PATTERN = re.compile(r"Appointment Date\s*\n\s*" + DATE_WORDS)
ASSESSOR_PATTERN = re.compile(r"Assessor\s*\n\s*([^\n]+)")
# "Inventory / Check In" then "for" on its own line, then the address line.
ADDRESS_LINE_PATTERN = re.compile(r"Inventory\s*/\s*Check In\s*\n\s*for\s*\n\s*([^\n]+)")


def split_uk_address(line: Optional[str]) -> Tuple[Optional[str], Optional[str], Optional[str]]:
    """Split ``"street, city, postcode"`` into ``(address, city, postcode)``.

    The last comma segment is taken as the postcode only when it is one, and
    the segment before it as the city only when something is left after it.
    A line without commas is all address.
    """
    if line is None:
        return None, None, None
    parts = [part.strip() for part in line.split(",")]
    if len(parts) == 1:
        return parts[0] or None, None, None

    postcode = None
    if UK_POSTCODE_PATTERN.fullmatch(parts[-1]):
        postcode = parts.pop().upper()

    city = None
    if len(parts) >= 2:
        city = parts.pop() or None

    address = ", ".join(parts)
    return address or None, city, postcode


def parse_property_header(text: str) -> PropertyHeader:
    require_text(text)
    address_line = match_one(text, ADDRESS_LINE_PATTERN)
    if address_line is None:
        logger.debug("No address line after the 'Inventory / Check In for' label")
    address, city, postcode = split_uk_address(address_line)
    return PropertyHeader(
        address=address,
        city=city,
        postcode=postcode,
        appointment_date=match_one(text, APPOINTMENT_DATE_PATTERN),
        assessor=match_one(text, ASSESSOR_PATTERN),
    )
