"""Appeal analysis endpoint."""

from __future__ import annotations

import logging
from typing import Any

from fastapi import APIRouter, Request
from pydantic import BaseModel, Field, field_validator

from ckd_appeals.audit import decision_audit_entry
from ckd_appeals.exceptions import DocumentError
from ckd_appeals.models import BloodPressure, ClinicalData, Complication

log = logging.getLogger(__name__)

router = APIRouter(tags=["analysis"])


class ComplicationIn(BaseModel):
    name: str
    description: str = ""


class ClinicalDataIn(BaseModel):
    """Clinical values as returned by ``/upload``."""

    gfr: float | None = None
    creatinine: float | None = None
    bun: float | None = None
    proteinuria: float | None = None
    blood_pressure: str | None = None
    diabetes: bool | None = None
    complications: list[ComplicationIn] = Field(default_factory=list)

    @field_validator("complications", mode="before")
    @classmethod
    def _names_as_complications(cls, v: Any) -> Any:
        if v is None:
            return []
        if isinstance(v, list):
            return [{"name": item} if isinstance(item, str) else item for item in v]
        return v

    def to_domain(self) -> ClinicalData:
        blood_pressure = None
        if self.blood_pressure:
            try:
                blood_pressure = BloodPressure.parse(self.blood_pressure)
            except ValueError:
                log.warning("Ignoring malformed blood pressure %r", self.blood_pressure)
        return ClinicalData(
            gfr=self.gfr,
            creatinine=self.creatinine,
            bun=self.bun,
            proteinuria=self.proteinuria,
            blood_pressure=blood_pressure,
            diabetes=self.diabetes,
            complications=tuple(Complication(c.name, c.description) for c in self.complications),
        )


class AnalyzeRequest(BaseModel):
    """Clinical data from an upload plus the full extracted text."""

    clinical_data: ClinicalDataIn = Field(default_factory=ClinicalDataIn)
    extracted_text: str = ""


class AnalyzeResponse(BaseModel):
    message: str = "Analysis completed successfully"
    decision: dict[str, Any]
    audit_entry: dict[str, Any]


@router.post("/analyze", response_model=AnalyzeResponse)
async def analyze(request: AnalyzeRequest, req: Request) -> AnalyzeResponse:
    """Produce a tri-state decision.

    The external model is tried once; any failure yields a rule-based
    decision with ``source == "fallback-rules"`` rather than an error.
    """
    if not request.extracted_text.strip():
        raise DocumentError("Clinical data and extracted text are required")

    clinical = request.clinical_data.to_domain()
    decision = await req.app.state.decision_engine.decide(clinical, request.extracted_text)

    audit = decision_audit_entry(decision, clinical)
    log.info("Decision generated", extra={"audit": audit})

    return AnalyzeResponse(
        decision={**decision.to_dict(), "clinical_data": clinical.to_dict()},
        audit_entry=audit,
    )
