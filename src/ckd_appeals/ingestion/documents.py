"""Text extraction for uploaded PDF and plain-text documents."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from io import BytesIO

from ckd_appeals.exceptions import DocumentError

log = logging.getLogger(__name__)

PDF_CONTENT_TYPE = "application/pdf"
TEXT_CONTENT_TYPE = "text/plain"
DEFAULT_MAX_BYTES = 10 * 1024 * 1024


@dataclass(frozen=True)
class ExtractedDocument:
    """Raw text recovered from an uploaded document."""

    filename: str
    content_type: str
    size: int
    text: str

    def preview(self, chars: int = 500) -> str:
        """First ``chars`` characters, with ``...`` appended when truncated."""
        if len(self.text) <= chars:
            return self.text
        return self.text[:chars] + "..."


def _base_content_type(content_type: str | None) -> str:
    # "text/plain; charset=utf-8" -> "text/plain"
    return (content_type or "").split(";", 1)[0].strip().lower()


def _pdf_text(content: bytes) -> str:
    import pdfplumber

    try:
        with pdfplumber.open(BytesIO(content)) as pdf:
            pages = [page.extract_text() or "" for page in pdf.pages]
    except Exception as e:
        raise DocumentError(f"Could not read PDF: {e}") from e
    return "\n".join(pages)


def extract_document_text(
    content: bytes,
    content_type: str | None,
    filename: str = "",
    *,
    max_bytes: int = DEFAULT_MAX_BYTES,
    allowed_content_types: Sequence[str] = (PDF_CONTENT_TYPE, TEXT_CONTENT_TYPE),
) -> ExtractedDocument:
    """Recover the text of one uploaded document.

    PDFs are read page by page with pdfplumber; plain text is decoded as
    UTF-8 with undecodable bytes replaced.

    Raises:
        DocumentError: If the type is not allowed, the payload exceeds
            ``max_bytes``, or no text content is found.
    """
    media_type = _base_content_type(content_type)
    if media_type not in allowed_content_types:
        raise DocumentError("Invalid file type. Only PDF and text files are allowed.")
    if len(content) > max_bytes:
        raise DocumentError(f"File too large: exceeds limit of {max_bytes} bytes")

    if media_type == PDF_CONTENT_TYPE:
        text = _pdf_text(content)
    else:
        text = content.decode("utf-8", errors="replace")

    if not text.strip():
        raise DocumentError("No text content found in the uploaded file")

    log.info("Extracted %d chars from %s (%s, %d bytes)", len(text), filename or "<unnamed>", media_type, len(content))
    return ExtractedDocument(filename=filename, content_type=media_type, size=len(content), text=text)
