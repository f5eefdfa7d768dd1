"""Raw file handles submitted for intake."""
import logging
import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Protocol, runtime_checkable

from ..exceptions import ReadError

logger = logging.getLogger(__name__)

PDF_MEDIA_TYPE = "application/pdf"


@runtime_checkable
class RawFile(Protocol):
    """File handle as selected by the user."""

    name: str
    media_type: str

    def read(self) -> bytes:
        """Read the whole file.

        Raises:
            ReadError: If the bytes cannot be read.
        """
        ...


class LocalFile:
    """File on the local filesystem."""

    def __init__(self, path: str | Path):
        self._path = Path(path)
        self.name = self._path.name
        guessed, _ = mimetypes.guess_type(self._path.name)
        self.media_type = guessed or "application/octet-stream"

    @property
    def path(self) -> Path:
        return self._path

    def read(self) -> bytes:
        try:
            return self._path.read_bytes()
        except OSError as e:
            raise ReadError(str(e), reason="Error reading file.") from e

    def __repr__(self) -> str:
        return f"LocalFile({str(self._path)!r})"


@dataclass
class InMemoryFile:
    """File whose bytes are already in memory."""
    name: str
    data: bytes
    media_type: str = PDF_MEDIA_TYPE

    def read(self) -> bytes:
        return self.data


def filter_pdf(
    files: Iterable[RawFile], accepted: Iterable[str] = (PDF_MEDIA_TYPE,)
) -> list[RawFile]:
    """Keep files whose declared media type is accepted.

    Other files are dropped silently; they are not intake errors.
    """
    accepted_types = {t.lower() for t in accepted}
    kept = []
    for f in files:
        if (f.media_type or "").lower() in accepted_types:
            kept.append(f)
        else:
            logger.debug(f"Skip non-PDF file: {f.name} ({f.media_type})")
    return kept
