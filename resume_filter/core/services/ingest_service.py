"""Ingest service - document intake pipeline."""

import logging
import uuid
from typing import Iterable, Optional, Sequence

from ..exceptions import ExtractionError, IntakeFailure, ReadError
from ..models.document import Document, DocumentStore, IngestResult, IntakeError
from ..models.files import RawFile
from ..protocols.extractor import TextExtractorProtocol

logger = logging.getLogger(__name__)

READ_FAILURE_REASON = "Error reading file."


def extraction_failure_reason(name: str) -> str:
    return f"Could not parse {name}. It might be corrupted or protected."


def summarize_errors(errors: Sequence[IntakeError]) -> Optional[str]:
    """Aggregate batch errors into a single notice.

    Returns:
        Notice text, or None when the batch had no errors.
    """
    if not errors:
        return None
    if len(errors) == 1:
        return f"Failed to process {errors[0].name}: {errors[0].reason}"
    lines = [f"Failed to process {len(errors)} files:"]
    lines.extend(f"- {e.name}: {e.reason}" for e in errors)
    return "\n".join(lines)


class IngestService:
    """Service for extracting a batch of files into a document store."""

    def __init__(self, extractor: TextExtractorProtocol):
        """Initialize ingest service.

        Args:
            extractor: Text extraction backend.
        """
        self._extractor = extractor

    async def _extract(self, file: RawFile) -> str:
        try:
            data = file.read()
        except ReadError:
            raise
        except OSError as e:
            raise ReadError(str(e), reason=READ_FAILURE_REASON) from e

        try:
            return await self._extractor.extract(data)
        except ExtractionError as e:
            raise ExtractionError(
                str(e), reason=extraction_failure_reason(file.name)
            ) from e

    async def ingest(
        self, files: Iterable[RawFile], store: DocumentStore
    ) -> IngestResult:
        """Extract files one at a time and merge new documents into the store.

        Files are processed in input order; each extraction settles before
        the next one starts. A failing file is reported and skipped, never
        aborting the batch. The merge runs once, after every file settled:
        candidates whose name is already in the store, or already taken by
        an earlier candidate of the same batch, are dropped.

        Args:
            files: PDF files, already filtered by media type.
            store: Current document store. It is not modified.

        Returns:
            New store, per-file errors and the documents added.
        """
        staged: list[Document] = []
        errors: list[IntakeError] = []

        for file in files:
            try:
                text = await self._extract(file)
            except IntakeFailure as e:
                reason = e.reason or READ_FAILURE_REASON
                logger.warning(f"Failed to process {file.name}: {e}")
                errors.append(IntakeError(name=file.name, reason=reason))
                continue
            except Exception:
                logger.exception(f"Unexpected error while processing {file.name}")
                errors.append(
                    IntakeError(
                        name=file.name, reason=extraction_failure_reason(file.name)
                    )
                )
                continue

            staged.append(Document(id=uuid.uuid4().hex, name=file.name, content=text))

        taken = store.names()
        kept: list[Document] = []
        for doc in staged:
            if doc.name in taken:
                logger.info(f"Skip duplicate: {doc.name}")
                continue
            taken.add(doc.name)
            kept.append(doc)

        new_store = store.extend(kept)

        logger.info(
            f"Intake complete: {len(kept)} added, {len(staged) - len(kept)} duplicates, "
            f"{len(errors)} failed ({len(new_store)} in store)"
        )
        return IngestResult(store=new_store, errors=errors, added=kept)
