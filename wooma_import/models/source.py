"""Models describing report inputs."""

from __future__ import annotations

from pydantic import BaseModel


class ReportSource(BaseModel):
    """A HelloReport PDF discovered on disk."""

    name: str
    source_path: str
