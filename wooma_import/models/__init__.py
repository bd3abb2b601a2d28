"""Typed models shared across the application."""

from .api import ParseRequest
from .parsed import (
    Checklist,
    Detector,
    ExternalAreas,
    FieldAnswer,
    Key,
    Meter,
    ParsedReport,
    PropertyHeader,
    QuestionAnswer,
    Rating,
    Room,
    SummaryArea,
)
from .source import ReportSource
from .wooma import (
    WoomaChecklist,
    WoomaDetector,
    WoomaDocument,
    WoomaFieldAnswer,
    WoomaKey,
    WoomaMeter,
    WoomaProperty,
    WoomaQuestionAnswer,
    WoomaReport,
    WoomaRoom,
    WoomaRoomItem,
)

__all__ = [
    "Checklist",
    "Detector",
    "ExternalAreas",
    "FieldAnswer",
    "Key",
    "Meter",
    "ParseRequest",
    "ParsedReport",
    "PropertyHeader",
    "QuestionAnswer",
    "Rating",
    "ReportSource",
    "Room",
    "SummaryArea",
    "WoomaChecklist",
    "WoomaDetector",
    "WoomaDocument",
    "WoomaFieldAnswer",
    "WoomaKey",
    "WoomaMeter",
    "WoomaProperty",
    "WoomaQuestionAnswer",
    "WoomaReport",
    "WoomaRoom",
    "WoomaRoomItem",
]
