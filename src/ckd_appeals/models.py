"""Domain models: clinical data, term expansions and appeal decisions.

ClinicalData and TermExpansion are produced once per uploaded document and
never mutated. Decisions are built fresh per analysis request.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any

# ── Clinical data ────────────────────────────────────────────────────


@dataclass(frozen=True)
class BloodPressure:
    """Systolic/diastolic pair, rendered as ``"145/95"``."""

    systolic: int
    diastolic: int

    def __str__(self) -> str:
        return f"{self.systolic}/{self.diastolic}"

    @classmethod
    def parse(cls, value: str) -> BloodPressure:
        """Parse ``"145/95"`` into a pair. Raises ValueError on malformed input."""
        systolic, _, diastolic = value.partition("/")
        return cls(systolic=int(systolic), diastolic=int(diastolic))


@dataclass(frozen=True)
class Complication:
    """A complication named in the text, with its canonical description."""

    name: str
    description: str = ""


@dataclass(frozen=True)
class ClinicalData:
    """Structured clinical values pulled from free text.

    ``None`` means the value was not found; zero is a valid lab value.
    """

    gfr: float | None = None
    creatinine: float | None = None
    bun: float | None = None
    proteinuria: float | None = None
    blood_pressure: BloodPressure | None = None
    diabetes: bool | None = None
    complications: tuple[Complication, ...] = ()

    def found_fields(self) -> list[str]:
        """Names of fields that carry a value (``diabetes=False`` counts as absent)."""
        found = [
            name
            for name in ("gfr", "creatinine", "bun", "proteinuria", "blood_pressure")
            if getattr(self, name) is not None
        ]
        if self.diabetes:
            found.append("diabetes")
        if self.complications:
            found.append("complications")
        return found

    def to_dict(self) -> dict[str, Any]:
        return {
            "gfr": self.gfr,
            "creatinine": self.creatinine,
            "bun": self.bun,
            "proteinuria": self.proteinuria,
            "blood_pressure": str(self.blood_pressure) if self.blood_pressure else None,
            "diabetes": self.diabetes,
            "complications": [
                {"name": c.name, "description": c.description} for c in self.complications
            ],
        }


# ── Term expansion ───────────────────────────────────────────────────


@dataclass(frozen=True)
class TermExpansion:
    """One abbreviation found in the text."""

    abbreviation: str
    full_name: str
    matched_text: str


@dataclass(frozen=True)
class ExpansionResult:
    """Output of term expansion. ``expanded_text`` is the input, unchanged."""

    original_text: str
    expanded_text: str
    expansions: tuple[TermExpansion, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {
            "original_text": self.original_text,
            "expanded_text": self.expanded_text,
            "expansions": [
                {
                    "abbreviation": e.abbreviation,
                    "full_name": e.full_name,
                    "matched_text": e.matched_text,
                }
                for e in self.expansions
            ],
        }


# ── Decisions ────────────────────────────────────────────────────────


class Outcome(str, Enum):
    """Tri-state appeal outcome."""

    APPROVE = "APPROVE"
    REJECT = "REJECT"
    REVIEW = "REVIEW"


class DecisionSource(str, Enum):
    """Which path produced a decision."""

    EXTERNAL_MODEL = "external-model"
    FALLBACK_RULES = "fallback-rules"


FALLBACK_MODEL_NAME = "rule-based-fallback"


@dataclass
class Decision:
    """A tri-state appeal decision with rationale and provenance."""

    outcome: Outcome
    confidence: float
    source: DecisionSource
    rationale: list[str] = field(default_factory=list)
    key_factors: list[str] = field(default_factory=list)
    recommendations: list[str] = field(default_factory=list)
    model: str = FALLBACK_MODEL_NAME
    extracted_text_length: int = 0
    error: str = ""
    timestamp: str = field(
        default_factory=lambda: datetime.now(timezone.utc).isoformat()
    )

    @property
    def is_fallback(self) -> bool:
        return self.source == DecisionSource.FALLBACK_RULES

    def to_dict(self) -> dict[str, Any]:
        return {
            "decision": self.outcome.value,
            "confidence": self.confidence,
            "rationale": list(self.rationale),
            "key_factors": list(self.key_factors),
            "recommendations": list(self.recommendations),
            "source": self.source.value,
            "model": self.model,
            "extracted_text_length": self.extracted_text_length,
            "error": self.error,
            "timestamp": self.timestamp,
        }
