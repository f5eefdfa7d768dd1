"""Text extractor protocol for dependency injection."""
from typing import Protocol, runtime_checkable


@runtime_checkable
class TextExtractorProtocol(Protocol):
    """Protocol for document text extraction."""

    async def extract(self, data: bytes) -> str:
        """Extract the full text of a document.

        Pages are separated by a newline, text fragments within a page
        by a single space.

        Args:
            data: Raw document bytes.

        Returns:
            Extracted text.

        Raises:
            ExtractionError: On malformed, encrypted or unreadable input.
        """
        ...
