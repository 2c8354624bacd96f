"""Tests for uploaded-document text extraction."""

from __future__ import annotations

from unittest.mock import MagicMock, patch

import pytest

from ckd_appeals.exceptions import DocumentError
from ckd_appeals.ingestion import ExtractedDocument, extract_document_text


def _fake_pdf(*page_texts: str | None) -> MagicMock:
    pdf = MagicMock()
    pdf.pages = [MagicMock(**{"extract_text.return_value": text}) for text in page_texts]
    pdf.__enter__.return_value = pdf
    return pdf


class TestPlainText:
    def test_decodes_utf8(self) -> None:
        doc = extract_document_text("GFR: 12 mL/min/1.73m²".encode(), "text/plain", "note.txt")
        assert doc.text == "GFR: 12 mL/min/1.73m²"
        assert doc.filename == "note.txt"
        assert doc.content_type == "text/plain"
        assert doc.size == len("GFR: 12 mL/min/1.73m²".encode())

    def test_content_type_parameters_ignored(self) -> None:
        doc = extract_document_text(b"CKD", "text/plain; charset=utf-8")
        assert doc.content_type == "text/plain"

    def test_invalid_bytes_replaced(self) -> None:
        assert "CKD" in extract_document_text(b"CKD \xff", "text/plain").text


class TestPdf:
    def test_pages_joined(self) -> None:
        with patch("pdfplumber.open", return_value=_fake_pdf("Page one", None, "Page three")):
            doc = extract_document_text(b"%PDF-1.4", "application/pdf", "record.pdf")
        assert doc.text == "Page one\n\nPage three"

    def test_unreadable_pdf(self) -> None:
        with pytest.raises(DocumentError, match="Could not read PDF"):
            extract_document_text(b"definitely not a pdf", "application/pdf")

    def test_image_only_pdf_has_no_text(self) -> None:
        with patch("pdfplumber.open", return_value=_fake_pdf(None, "  ")):
            with pytest.raises(DocumentError, match="No text content"):
                extract_document_text(b"%PDF-1.4", "application/pdf")


class TestRejections:
    @pytest.mark.parametrize("content_type", ["image/png", "application/msword", None])
    def test_unsupported_type(self, content_type: str | None) -> None:
        with pytest.raises(DocumentError, match="Invalid file type"):
            extract_document_text(b"CKD", content_type)

    def test_too_large(self) -> None:
        with pytest.raises(DocumentError, match="File too large"):
            extract_document_text(b"x" * 11, "text/plain", max_bytes=10)

    def test_whitespace_only(self) -> None:
        with pytest.raises(DocumentError, match="No text content"):
            extract_document_text(b" \n\t ", "text/plain")

    def test_allowed_types_configurable(self) -> None:
        with pytest.raises(DocumentError):
            extract_document_text(b"CKD", "text/plain", allowed_content_types=["application/pdf"])


class TestPreview:
    def test_short_text_unchanged(self) -> None:
        assert ExtractedDocument("a", "text/plain", 3, "abc").preview(5) == "abc"

    def test_long_text_truncated_with_ellipsis(self) -> None:
        doc = ExtractedDocument("a", "text/plain", 600, "x" * 600)
        preview = doc.preview(500)
        assert preview == "x" * 500 + "..."
