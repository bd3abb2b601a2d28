"""Template-driven extraction of HelloReport text."""

from .normalize import normalize_text, strip_links
from .parser import parse_report
from .sections import locate_section, slice_after, slice_between

__all__ = [
    "locate_section",
    "normalize_text",
    "parse_report",
    "slice_after",
    "slice_between",
    "strip_links",
]
