from abc import ABC, abstractmethod
from typing import Iterable

from ..models.document import Document


class ScoringStrategy(ABC):
    """Base class for scoring strategies."""

    @abstractmethod
    def score(self, terms: Iterable[str], document: Document) -> int:
        """Score a document against normalized search terms."""
        ...


class DistinctTermStrategy(ScoringStrategy):
    """Count distinct terms found as substrings of the document text."""

    def score(self, terms: Iterable[str], document: Document) -> int:
        """Score document.

        Args:
            terms: Lower-cased search terms.
            document: Document to score.

        Returns:
            Number of distinct terms contained in the content.
        """
        content = document.content.lower()
        matched = {term for term in set(terms) if term in content}
        return len(matched)
