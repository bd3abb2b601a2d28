"""Output records matching the Wooma import schema."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .parsed import Rating


class WoomaRoomItem(BaseModel):
    room_id: str
    name: str
    general_condition: Optional[Rating] = None
    general_cleanliness: Optional[Rating] = None
    description: Optional[str] = None
    note: Optional[str] = None


class WoomaRoom(BaseModel):
    report_id: str
    name: Optional[str] = None
    items: List[WoomaRoomItem] = Field(default_factory=list)


class WoomaMeter(BaseModel):
    report_id: str
    name: Optional[str] = None
    reading: Optional[str] = None
    location: Optional[str] = None
    serial_number: Optional[str] = None


class WoomaKey(BaseModel):
    report_id: str
    name: Optional[str] = None
    description: Optional[str] = None
    note: Optional[str] = None
    no_of_keys: Optional[int] = None


class WoomaDetector(BaseModel):
    report_id: str
    name: Optional[str] = None
    location: Optional[str] = None
    note: Optional[str] = None
    tested: Optional[str] = None


class WoomaQuestionAnswer(BaseModel):
    report_checklist_id: str
    checklist_question_id: Optional[str] = None
    answer_option: Optional[str] = None
    answer_text: Optional[str] = None


class WoomaFieldAnswer(BaseModel):
    report_checklist_id: str
    checklist_field_id: Optional[str] = None
    answer_text: Optional[str] = None


class WoomaChecklist(BaseModel):
    report_id: str
    checklist_id: Optional[str] = None
    question_answers: List[WoomaQuestionAnswer] = Field(default_factory=list)
    field_answers: List[WoomaFieldAnswer] = Field(default_factory=list)


class WoomaReport(BaseModel):
    """A freshly imported report; payment and completion are never inferred."""

    id: str
    property_id: str
    report_type_id: str
    status: str = "IN_PROGRESS"
    completion_percentage: Optional[float] = None
    completion_date: Optional[str] = None
    pdf_url: Optional[str] = None
    pdf_generated_at: Optional[str] = None
    is_paid: bool = False
    payment_date: Optional[str] = None
    rooms: List[WoomaRoom] = Field(default_factory=list)
    meters: List[WoomaMeter] = Field(default_factory=list)
    keys: List[WoomaKey] = Field(default_factory=list)
    detectors: List[WoomaDetector] = Field(default_factory=list)
    report_checklists: List[WoomaChecklist] = Field(default_factory=list)


class WoomaProperty(BaseModel):
    user_id: str
    address: Optional[str] = None
    postcode: Optional[str] = None
    city: Optional[str] = None
    reports: List[WoomaReport] = Field(default_factory=list)


class WoomaDocument(BaseModel):
    """Top-level document emitted for one HelloReport PDF."""

    property: WoomaProperty
