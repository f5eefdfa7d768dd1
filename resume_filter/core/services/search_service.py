"""Search service - keyword ranking over the document store."""

import logging
from dataclasses import dataclass

from ..models.document import DocumentStore, ScoredDocument
from ..query import parse_query
from ..strategies.scoring import DistinctTermStrategy, ScoringStrategy

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SearchView:
    """What the presentation layer shows for a raw query."""
    results: list[ScoredDocument]
    filtered: bool

    @property
    def title(self) -> str:
        if self.filtered:
            return f"Matching Resumes ({len(self.results)})"
        return f"All Uploaded Resumes ({len(self.results)})"


class SearchService:
    """Ranks documents by the number of distinct keywords they contain."""

    def __init__(self, strategy: ScoringStrategy | None = None):
        """Initialize search service.

        Args:
            strategy: Custom scoring strategy.
        """
        self._strategy = strategy or DistinctTermStrategy()

    def rank(self, store: DocumentStore, query: str) -> list[ScoredDocument]:
        """Score, filter and order documents for a query.

        A query without terms returns the whole store with score 0.
        Otherwise documents matching no term are dropped and the rest are
        sorted by score, highest first; ties keep store order.

        Args:
            store: Documents to rank.
            query: Raw comma-separated query.

        Returns:
            Scored documents.
        """
        terms = parse_query(query)

        if not terms:
            return [ScoredDocument(document=doc, score=0) for doc in store]

        scored = [
            ScoredDocument(document=doc, score=self._strategy.score(terms, doc))
            for doc in store
        ]
        matched = [s for s in scored if s.score > 0]
        # sorted() is stable
        matched = sorted(matched, key=lambda s: s.score, reverse=True)

        logger.debug(f"Rank: {len(matched)}/{len(store)} docs match {list(terms)}")
        return matched

    def view(self, store: DocumentStore, raw_query: str) -> SearchView:
        """Pick between the unfiltered store and the ranked view.

        Only an empty raw query shows every document unfiltered; any other
        input, including one without terms such as ",,,", goes through rank().
        """
        if not raw_query:
            return SearchView(
                results=[ScoredDocument(document=doc, score=0) for doc in store],
                filtered=False,
            )
        return SearchView(results=self.rank(store, raw_query), filtered=True)
