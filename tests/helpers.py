from resume_filter.core.exceptions import ExtractionError
from resume_filter.core.models.document import Document, DocumentStore
from resume_filter.core.models.files import InMemoryFile


class FakeExtractor:
    """Decodes bytes as UTF-8; payloads starting with b"BAD" are rejected."""

    def __init__(self) -> None:
        self.calls: list[bytes] = []

    async def extract(self, data: bytes) -> str:
        self.calls.append(data)
        if data.startswith(b"BAD"):
            raise ExtractionError("corrupt document")
        return data.decode("utf-8")


def make_file(name: str, text: str) -> InMemoryFile:
    return InMemoryFile(name=name, data=text.encode("utf-8"))


def make_store(*pairs: tuple[str, str]) -> DocumentStore:
    return DocumentStore(
        tuple(Document(id=f"id-{i}", name=name, content=content) for i, (name, content) in enumerate(pairs))
    )


def build_pdf(pages: list[str]) -> bytes:
    """Minimal PDF with one Helvetica text line per page."""
    font_id = 3 + 2 * len(pages)
    objects: list[bytes] = [
        b"<< /Type /Catalog /Pages 2 0 R >>",
        b"<< /Type /Pages /Kids ["
        + b" ".join(f"{3 + 2 * i} 0 R".encode() for i in range(len(pages)))
        + f"] /Count {len(pages)} >>".encode(),
    ]
    for i, text in enumerate(pages):
        content_id = 4 + 2 * i
        objects.append(
            (
                "<< /Type /Page /Parent 2 0 R /MediaBox [0 0 612 792] "
                f"/Resources << /Font << /F1 {font_id} 0 R >> >> "
                f"/Contents {content_id} 0 R >>"
            ).encode()
        )
        escaped = text.replace("\\", "\\\\").replace("(", "\\(").replace(")", "\\)")
        stream = f"BT /F1 12 Tf 72 720 Td ({escaped}) Tj ET".encode("latin-1")
        objects.append(
            f"<< /Length {len(stream)} >>\nstream\n".encode()
            + stream
            + b"\nendstream"
        )
    objects.append(b"<< /Type /Font /Subtype /Type1 /BaseFont /Helvetica >>")

    out = bytearray(b"%PDF-1.4\n")
    offsets = []
    for number, body in enumerate(objects, start=1):
        offsets.append(len(out))
        out += f"{number} 0 obj\n".encode() + body + b"\nendobj\n"
    xref_at = len(out)
    out += f"xref\n0 {len(objects) + 1}\n".encode()
    out += b"0000000000 65535 f \n"
    for offset in offsets:
        out += f"{offset:010d} 00000 n \n".encode()
    out += (
        f"trailer\n<< /Size {len(objects) + 1} /Root 1 0 R >>\n"
        f"startxref\n{xref_at}\n%%EOF\n"
    ).encode()
    return bytes(out)
