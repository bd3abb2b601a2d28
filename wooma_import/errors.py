"""Exceptions raised around the report import pipeline."""


class ReportImportError(Exception):
    """Base class for all report import failures."""


class InputUnavailableError(ReportImportError):
    """The source document is missing or cannot be read."""


class MalformedOutputError(ReportImportError):
    """The mapped document could not be serialized or written."""


class IdentifierGenerationError(ReportImportError):
    """The identifier service failed to produce a usable token."""
