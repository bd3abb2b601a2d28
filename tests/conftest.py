from __future__ import annotations

import itertools
from pathlib import Path

import pytest

from wooma_import.extraction.normalize import normalize_text

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture
def raw_report_text() -> str:
    return (DATA_DIR / "sample_report.txt").read_text(encoding="utf-8")


@pytest.fixture
def report_text(raw_report_text: str) -> str:
    return normalize_text(raw_report_text)


@pytest.fixture
def sequential_ids():
    """Deterministic id factory: id-1, id-2, ..."""
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"
