"""Domain models."""
from .document import (
    Document,
    DocumentStore,
    IngestResult,
    IntakeError,
    ScoredDocument,
)
from .files import InMemoryFile, LocalFile, RawFile, filter_pdf

__all__ = [
    "Document",
    "DocumentStore",
    "IngestResult",
    "IntakeError",
    "ScoredDocument",
    "RawFile",
    "LocalFile",
    "InMemoryFile",
    "filter_pdf",
]
