"""Identifier generation for records created during import."""

from __future__ import annotations

import uuid
from typing import Callable

from wooma_import.errors import IdentifierGenerationError

IdFactory = Callable[[], str]


def generate_id() -> str:
    """Return a fresh random UUID4 string."""
    return str(uuid.uuid4())


def next_id(factory: IdFactory) -> str:
    """Call the factory and reject anything that is not a usable token."""
    try:
        value = factory()
    except Exception as exc:
        raise IdentifierGenerationError(f"Identifier generation failed: {exc}") from exc
    if not isinstance(value, str) or not value:
        raise IdentifierGenerationError(f"Identifier generator returned {value!r}")
    return value
