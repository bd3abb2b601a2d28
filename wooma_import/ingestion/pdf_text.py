"""Read the embedded text layer of HelloReport PDFs (no OCR)."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Union

import fitz

from wooma_import.errors import InputUnavailableError

logger = logging.getLogger(__name__)


def extract_pdf_text(path: Union[str, Path]) -> str:
    """Return the text of every page in order, joined by newlines."""
    pdf_path = Path(path)
    if not pdf_path.is_file():
        raise InputUnavailableError(f"PDF not found: {pdf_path}")

    try:
        doc = fitz.open(pdf_path)
    except (RuntimeError, ValueError) as exc:
        raise InputUnavailableError(f"Unable to open {pdf_path}: {exc}") from exc

    pages: List[str] = []
    try:
        if doc.needs_pass:
            raise InputUnavailableError(f"{pdf_path} is password protected")
        if doc.page_count == 0:
            raise InputUnavailableError(f"No pages in {pdf_path}")
        for page_index in range(doc.page_count):
            pages.append(doc[page_index].get_text("text"))
    except (RuntimeError, ValueError) as exc:
        raise InputUnavailableError(f"Unable to read text from {pdf_path}: {exc}") from exc
    finally:
        doc.close()
    logger.debug("Read %s pages from %s", len(pages), pdf_path)
    return "\n".join(pages)
