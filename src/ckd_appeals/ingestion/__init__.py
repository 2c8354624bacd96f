"""Document ingestion: uploaded bytes to raw text."""

from __future__ import annotations

from ckd_appeals.ingestion.documents import ExtractedDocument, extract_document_text

__all__ = ["ExtractedDocument", "extract_document_text"]
