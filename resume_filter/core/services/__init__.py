"""Core business services."""
from .ingest_service import IngestService, summarize_errors
from .search_service import SearchService, SearchView

__all__ = [
    "IngestService",
    "SearchService",
    "SearchView",
    "summarize_errors",
]
