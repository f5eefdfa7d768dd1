import asyncio
import logging
from concurrent.futures import Future, ThreadPoolExecutor
from io import BytesIO
from typing import Optional

from pypdf import PasswordType, PdfReader
from pypdf.errors import DependencyError, PyPdfError

from resume_filter.core.exceptions import ExtractionError

logger = logging.getLogger(__name__)

PAGE_SEPARATOR = "\n"
FRAGMENT_SEPARATOR = " "


class PDFTextExtractor:
    """Text extractor backed by pypdf.

    Parsing runs on a single worker thread. A timed-out parse keeps the
    worker busy, and the next extraction waits for it to finish before
    starting, so at most one document is parsed at any time.
    """

    def __init__(self, timeout: Optional[float] = None):
        """Initialize extractor.

        Args:
            timeout: Seconds to wait for one document, None for no limit.
        """
        self._timeout = timeout
        self._executor = ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="pdf-extract"
        )
        self._running: Optional[Future] = None

    async def extract(self, data: bytes) -> str:
        if self._running is not None and not self._running.done():
            logger.debug("Waiting for a timed-out extraction to finish")
            await asyncio.wait([asyncio.wrap_future(self._running)])

        self._running = self._executor.submit(self._extract_sync, data)
        work = asyncio.wrap_future(self._running)
        try:
            if self._timeout is None:
                return await work
            return await asyncio.wait_for(work, timeout=self._timeout)
        except asyncio.TimeoutError as e:
            raise ExtractionError(
                f"extraction timed out after {self._timeout}s"
            ) from e

    def _extract_sync(self, data: bytes) -> str:
        try:
            reader = PdfReader(BytesIO(data))
            if reader.is_encrypted:
                if reader.decrypt("") == PasswordType.NOT_DECRYPTED:
                    raise ExtractionError("document is encrypted")

            parts = []
            for page in reader.pages:
                parts.append(self._page_text(page) + PAGE_SEPARATOR)
        except ExtractionError:
            raise
        except (
            PyPdfError,
            DependencyError,
            ValueError,
            KeyError,
            TypeError,
            OSError,
        ) as e:
            raise ExtractionError(f"invalid PDF: {e}") from e

        logger.debug(f"Extracted {len(parts)} pages")
        return "".join(parts)

    @staticmethod
    def _page_text(page) -> str:
        fragments: list[str] = []

        def visit(text, cm, tm, font_dict, font_size):
            text = text.strip()
            if text:
                fragments.append(text)

        page.extract_text(visitor_text=visit)
        return FRAGMENT_SEPARATOR.join(fragments)
