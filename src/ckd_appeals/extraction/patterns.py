"""Regex patterns for clinical value extraction.

Each ``FieldPattern`` pairs a label, a value and a unit. The extractor runs
them uniformly: the first match wins and the value group is handed to the
parser. All patterns are case-insensitive.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from functools import cached_property
from typing import Any, Callable, Pattern

from ckd_appeals.models import BloodPressure

_NUMBER = r"([0-9]+(?:\.[0-9]+)?)"
_LABEL_SEPARATOR = r"[:\s]*"


@dataclass(frozen=True)
class FieldPattern:
    """One declarative extraction rule for a ``ClinicalData`` field."""

    field: str
    label_pattern: str
    value_pattern: str
    unit_pattern: str
    parser: Callable[[str], Any]

    @cached_property
    def regex(self) -> Pattern[str]:
        return re.compile(
            rf"{self.label_pattern}{_LABEL_SEPARATOR}{self.value_pattern}\s*{self.unit_pattern}",
            re.IGNORECASE,
        )


def _parse_blood_pressure(value: str) -> BloodPressure:
    return BloodPressure.parse(value)


FIELD_PATTERNS: tuple[FieldPattern, ...] = (
    FieldPattern(
        field="gfr",
        label_pattern=r"(?:GFR|eGFR|glomerular filtration rate)",
        value_pattern=_NUMBER,
        unit_pattern=r"(?:mL/min/1\.73m²|ml/min/1\.73m2)",
        parser=float,
    ),
    FieldPattern(
        field="creatinine",
        label_pattern=r"(?:creatinine|Cr)",
        value_pattern=_NUMBER,
        unit_pattern=r"(?:mg/dL)",
        parser=float,
    ),
    FieldPattern(
        field="bun",
        label_pattern=r"(?:BUN|blood urea nitrogen)",
        value_pattern=_NUMBER,
        unit_pattern=r"(?:mg/dL)",
        parser=float,
    ),
    FieldPattern(
        field="proteinuria",
        label_pattern=r"(?:proteinuria|protein)",
        value_pattern=_NUMBER,
        unit_pattern=r"(?:g/day|g/24h)",
        parser=float,
    ),
    FieldPattern(
        field="blood_pressure",
        label_pattern=r"(?:blood pressure|BP)",
        value_pattern=r"([0-9]+/[0-9]+)",
        unit_pattern=r"(?:mmHg|mm Hg)",
        parser=_parse_blood_pressure,
    ),
)

DIABETES_PATTERN: Pattern[str] = re.compile(r"\b(?:diabetes|DM|T1DM|T2DM)\b", re.IGNORECASE)
