"""Intermediate records produced by the HelloReport extractors."""

from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, Field


class Rating(str, Enum):
    """Condition / cleanliness grade used throughout HelloReport."""

    EXCELLENT = "EXCELLENT"
    GOOD = "GOOD"
    FAIR = "FAIR"
    POOR = "POOR"
    UNACCEPTABLE = "UNACCEPTABLE"


class PropertyHeader(BaseModel):
    """Address block and appointment details from the report cover."""

    address: Optional[str] = None
    city: Optional[str] = None
    postcode: Optional[str] = None
    appointment_date: Optional[str] = None
    assessor: Optional[str] = None


class QuestionAnswer(BaseModel):
    question_text: str
    answer_option: Optional[str] = None
    answer_text: Optional[str] = None


class FieldAnswer(BaseModel):
    field_label: str
    answer_text: Optional[str] = None


class Checklist(BaseModel):
    """Yes/no answers plus free-text field answers."""

    question_answers: List[QuestionAnswer] = Field(default_factory=list)
    field_answers: List[FieldAnswer] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.question_answers and not self.field_answers


class SummaryArea(BaseModel):
    """One row of the report summary ratings table."""

    name: str
    condition: Optional[Rating] = None
    cleanliness: Optional[Rating] = None


class Meter(BaseModel):
    energy_type: Optional[str] = None
    date: Optional[str] = None
    reading: Optional[str] = None
    location: Optional[str] = None
    serial_number: Optional[str] = None
    meter_type: Optional[str] = None
    name: Optional[str] = None


class Key(BaseModel):
    name: Optional[str] = None
    description: Optional[str] = None
    note: Optional[str] = None
    no_of_keys: Optional[int] = None


class Detector(BaseModel):
    name: Optional[str] = None
    location: Optional[str] = None
    note: Optional[str] = None
    tested: Optional[str] = None


class ExternalAreas(BaseModel):
    description: Optional[str] = None


class Room(BaseModel):
    """An inspection area and its general overview."""

    name: str
    condition: Optional[Rating] = None
    cleanliness: Optional[Rating] = None
    description: Optional[str] = None
    defects: Optional[str] = None


class ParsedReport(BaseModel):
    """Everything read from one report, before mapping to Wooma."""

    property: PropertyHeader = Field(default_factory=PropertyHeader)
    checklist: Checklist = Field(default_factory=Checklist)
    report_summary: List[SummaryArea] = Field(default_factory=list)
    meters: List[Meter] = Field(default_factory=list)
    keys: List[Key] = Field(default_factory=list)
    detectors: List[Detector] = Field(default_factory=list)
    external_areas: ExternalAreas = Field(default_factory=ExternalAreas)
    rooms: List[Room] = Field(default_factory=list)
