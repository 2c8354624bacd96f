"""Document upload endpoint: text extraction, term expansion, clinical extraction."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, File, Request, UploadFile
from pydantic import BaseModel

from ckd_appeals.audit import upload_audit_entry
from ckd_appeals.exceptions import DocumentError
from ckd_appeals.extraction import expand_terms, extract_clinical_data
from ckd_appeals.ingestion import extract_document_text

log = logging.getLogger(__name__)

router = APIRouter(tags=["documents"])


class UploadResponse(BaseModel):
    """Result of processing one uploaded document."""

    message: str = "Document processed successfully"
    filename: str
    extracted_text: str
    expanded_data: dict[str, Any]
    clinical_data: dict[str, Any]
    audit_entry: dict[str, Any]


@router.post("/upload", response_model=UploadResponse)
async def upload_document(req: Request, document: UploadFile | None = File(default=None)) -> UploadResponse:
    """Accept a PDF or plain-text document and return its extracted clinical data.

    ``extracted_text`` is a preview of the document; clients send the full
    text back to ``/analyze``.
    """
    if document is None:
        raise DocumentError("No file uploaded")

    upload_config = req.app.state.settings.upload
    # One byte past the limit is enough for the size check to reject.
    content = await document.read(upload_config.max_bytes + 1)
    extracted = extract_document_text(
        content,
        document.content_type,
        document.filename or "",
        max_bytes=upload_config.max_bytes,
        allowed_content_types=upload_config.allowed_content_types,
    )

    kb = req.app.state.knowledge_base.get()
    expansion = expand_terms(extracted.text, kb.abbreviations)
    clinical = extract_clinical_data(extracted.text, kb.complication_descriptions())

    audit = upload_audit_entry(extracted, expansion, clinical)
    log.info("Document uploaded", extra={"audit": audit})

    return UploadResponse(
        filename=extracted.filename,
        extracted_text=extracted.preview(upload_config.preview_chars),
        expanded_data=expansion.to_dict(),
        clinical_data=clinical.to_dict(),
        audit_entry=audit,
    )
