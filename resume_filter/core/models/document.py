"""Document domain models."""
from dataclasses import dataclass, field
from typing import Iterable, Iterator, Optional


@dataclass(frozen=True)
class Document:
    """Extracted document, immutable once created."""
    id: str
    name: str
    content: str


@dataclass(frozen=True)
class DocumentStore:
    """Ordered collection of documents with unique names.

    Insertion order is the default display order and the tiebreak for
    equal scores. Stores never change in place: ``extend`` returns a new one.
    """
    documents: tuple[Document, ...] = ()

    def __post_init__(self) -> None:
        object.__setattr__(self, "documents", tuple(self.documents))
        seen: set[str] = set()
        for doc in self.documents:
            if doc.name in seen:
                raise ValueError(f"Duplicate document name in store: {doc.name}")
            seen.add(doc.name)

    def __len__(self) -> int:
        return len(self.documents)

    def __iter__(self) -> Iterator[Document]:
        return iter(self.documents)

    def __getitem__(self, index: int) -> Document:
        return self.documents[index]

    def names(self) -> set[str]:
        """Names already committed to the store."""
        return {doc.name for doc in self.documents}

    def by_name(self, name: str) -> Optional[Document]:
        """Look up a document by file name."""
        for doc in self.documents:
            if doc.name == name:
                return doc
        return None

    def extend(self, documents: Iterable[Document]) -> "DocumentStore":
        """Return a new store with documents appended."""
        return DocumentStore(self.documents + tuple(documents))


@dataclass(frozen=True)
class IntakeError:
    """Per-file failure reported after a batch."""
    name: str
    reason: str


@dataclass
class IngestResult:
    """Outcome of one intake batch."""
    store: DocumentStore
    errors: list[IntakeError] = field(default_factory=list)
    added: list[Document] = field(default_factory=list)

    def __iter__(self):
        # unpacks as (store, errors)
        yield self.store
        yield self.errors


@dataclass(frozen=True)
class ScoredDocument:
    """Read-only projection of a document with its match score."""
    document: Document
    score: int = 0

    @property
    def name(self) -> str:
        return self.document.name

    def preview(self, length: int = 150) -> str:
        """Leading slice of the content for listings."""
        return self.document.content[:length]
