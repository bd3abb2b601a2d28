"""Request models for the public API."""

from __future__ import annotations

from pydantic import BaseModel, Field


class ParseRequest(BaseModel):
    """Report text plus the Wooma identifiers it belongs to."""

    text: str = Field(..., min_length=1)
    user_id: str = Field(..., min_length=1)
    property_id: str = Field(..., min_length=1)
    report_type_id: str = Field(..., min_length=1)
