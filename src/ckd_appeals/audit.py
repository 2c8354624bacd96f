"""Audit summaries attached to upload and analysis responses.

Entries are returned to the caller and written to the log; nothing here
persists them.
"""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any

from ckd_appeals.ingestion.documents import ExtractedDocument
from ckd_appeals.models import ClinicalData, Decision, ExpansionResult

DOCUMENT_UPLOAD = "document_upload"
MODEL_DECISION = "ai_decision_generated"
RULE_DECISION = "rule_based_decision_generated"


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def upload_audit_entry(
    document: ExtractedDocument,
    expansion: ExpansionResult,
    clinical: ClinicalData,
) -> dict[str, Any]:
    return {
        "timestamp": _now(),
        "action": DOCUMENT_UPLOAD,
        "filename": document.filename,
        "file_size": document.size,
        "extracted_text_length": len(document.text),
        "expansions_found": len(expansion.expansions),
        "clinical_data_extracted": len(clinical.found_fields()),
    }


def decision_audit_entry(decision: Decision, clinical: ClinicalData) -> dict[str, Any]:
    """Audit summary for one decision; fallback entries carry the model error."""
    entry: dict[str, Any] = {
        "timestamp": _now(),
        "action": RULE_DECISION if decision.is_fallback else MODEL_DECISION,
        "decision": decision.outcome.value,
        "confidence": decision.confidence,
        "rationale": list(decision.rationale),
        "source": decision.source.value,
        "clinical_data": clinical.to_dict(),
        "model": decision.model,
    }
    if decision.is_fallback:
        entry["error"] = decision.error
    return entry
