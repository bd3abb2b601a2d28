"""Whitespace and link clean-up applied before any section is parsed."""

from __future__ import annotations

import re

HORIZONTAL_SPACE_PATTERN = re.compile(r"[ \t]+")
# Two or more blank lines, counting lines that hold only spaces or tabs.
BLANK_RUN_PATTERN = re.compile(r"\n(?:[ \t]*\n){2,}")
# Scheme is alphanumeric and may not begin inside a word, so "Crack-https://..." keeps "Crack-".
LINK_PATTERN = re.compile(r"(?<![a-z0-9])[a-z][a-z0-9]*://\S+", re.IGNORECASE)


def normalize_text(raw: str) -> str:
    """Collapse whitespace so every extractor sees the same line structure."""
    if not isinstance(raw, str):
        raise TypeError(f"Expected document text as str, got {type(raw).__name__}")
    text = raw.replace("\r\n", "\n").replace("\r", "\n")
    text = HORIZONTAL_SPACE_PATTERN.sub(" ", text)
    text = BLANK_RUN_PATTERN.sub("\n\n", text)
    return text.strip()


def strip_links(text: str) -> str:
    """Remove absolute resource links (photo URLs and the like)."""
    return LINK_PATTERN.sub("", text)
