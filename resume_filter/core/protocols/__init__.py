"""Protocol interfaces for dependency injection."""
from .extractor import TextExtractorProtocol

__all__ = [
    "TextExtractorProtocol",
]
