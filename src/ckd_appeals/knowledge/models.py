"""Knowledge-base snapshot model."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any

_TABLES = ("abbreviations", "complications", "stages", "guidelines", "appeal_criteria")


@dataclass(frozen=True)
class KnowledgeBase:
    """Read-only reference data consulted by extraction and decisioning.

    ``complications`` maps a complication name to its details dict (at
    least a ``description`` key). Snapshots are replaced wholesale on reload;
    the top-level tables and complication details are read-only views.
    """

    abbreviations: Mapping[str, str] = field(default_factory=dict)
    complications: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    stages: Mapping[str, Any] = field(default_factory=dict)
    guidelines: Mapping[str, Any] = field(default_factory=dict)
    appeal_criteria: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        for name in _TABLES:
            object.__setattr__(self, name, MappingProxyType(dict(getattr(self, name))))
        details = {
            key: MappingProxyType(dict(value)) if isinstance(value, Mapping) else value
            for key, value in self.complications.items()
        }
        object.__setattr__(self, "complications", MappingProxyType(details))

    @classmethod
    def from_dict(cls, raw: dict[str, Any]) -> KnowledgeBase:
        """Build from the on-disk layout (``ckd_terminology`` / ``clinical_guidelines`` / ``appeal_criteria``)."""
        terminology = raw.get("ckd_terminology", {})
        return cls(
            abbreviations=dict(terminology.get("abbreviations", {})),
            complications=dict(terminology.get("complications", {})),
            stages=dict(terminology.get("stages", {})),
            guidelines=dict(raw.get("clinical_guidelines", {})),
            appeal_criteria=dict(raw.get("appeal_criteria", {})),
        )

    @property
    def is_empty(self) -> bool:
        return not (self.abbreviations or self.complications or self.stages)

    def complication_descriptions(self) -> dict[str, str]:
        """Complication name → description, in table order."""
        return {
            name: str(details.get("description", "")) if isinstance(details, Mapping) else str(details)
            for name, details in self.complications.items()
        }

    def summary(self) -> dict[str, dict[str, int]]:
        """Table counts for the knowledge-base endpoint."""

        def _count(section: Mapping[str, Any], key: str) -> int:
            value = section.get(key, {})
            return len(value) if isinstance(value, (Mapping, list)) else 0

        return {
            "terminology": {
                "abbreviation_count": len(self.abbreviations),
                "stage_count": len(self.stages),
                "complication_count": len(self.complications),
            },
            "guidelines": {
                "monitoring_frequency": _count(self.guidelines, "monitoring_frequency"),
                "treatment_targets": _count(self.guidelines, "treatment_targets"),
                "medication_adjustments": _count(self.guidelines, "medication_adjustments"),
            },
            "appeal_criteria": {
                "approval_indicators": _count(self.appeal_criteria, "approval_indicators"),
                "rejection_indicators": _count(self.appeal_criteria, "rejection_indicators"),
                "review_required": _count(self.appeal_criteria, "review_required"),
            },
        }
