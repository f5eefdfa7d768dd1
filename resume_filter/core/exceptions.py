"""Intake failure types."""
from typing import Optional


class IntakeFailure(Exception):
    """Base class for per-file intake failures."""

    def __init__(self, message: str = "", reason: Optional[str] = None):
        super().__init__(message or reason or "")
        self.reason = reason or message


class ReadError(IntakeFailure):
    """Raw file could not be read into bytes."""


class ExtractionError(IntakeFailure):
    """Extractor rejected the bytes (corrupt, encrypted, unsupported)."""
