"""Text extractor implementations."""
from .pdf_extractor import PDFTextExtractor

__all__ = ["PDFTextExtractor"]
