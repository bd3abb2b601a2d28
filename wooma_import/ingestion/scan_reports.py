"""Scan the reports directory for HelloReport PDFs."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

from wooma_import.config import settings
from wooma_import.models.source import ReportSource

logger = logging.getLogger(__name__)


def discover_reports(root: Optional[Path] = None) -> List[ReportSource]:
    """Return every PDF below the reports root, sorted by path."""
    root_path = root or settings.reports_root_path
    if not root_path.exists():
        logger.warning("Reports root %s does not exist", root_path)
        return []

    sources = [
        ReportSource(name=pdf.stem, source_path=str(pdf.resolve()))
        for pdf in sorted(root_path.rglob("*.pdf"))
    ]
    logger.info("Discovered %s report PDFs under %s", len(sources), root_path)
    return sources
