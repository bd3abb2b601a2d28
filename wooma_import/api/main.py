"""FastAPI application entry point."""

from __future__ import annotations

import logging

from fastapi import FastAPI, HTTPException

from wooma_import.errors import IdentifierGenerationError
from wooma_import.ingestion.parse_reports import convert_text
from wooma_import.models.api import ParseRequest
from wooma_import.models.wooma import WoomaDocument

logger = logging.getLogger(__name__)

app = FastAPI(
    title="WoomaImport",
    description="HelloReport inspection text to Wooma JSON",
    version="0.1.0",
)


@app.get("/health")
def health() -> dict[str, str]:
    """Simple readiness probe."""
    return {"status": "ok"}


@app.post("/parse", response_model=WoomaDocument)
def parse(payload: ParseRequest) -> WoomaDocument:
    """Map already-extracted report text onto the Wooma schema."""
    try:
        return convert_text(
            payload.text,
            payload.user_id,
            payload.property_id,
            payload.report_type_id,
        )
    except IdentifierGenerationError as exc:
        logger.error("Identifier generation failed: %s", exc)
        raise HTTPException(status_code=500, detail="Identifier generation failed.") from exc
