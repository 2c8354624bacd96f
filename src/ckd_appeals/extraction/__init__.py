"""Regex-driven extraction: abbreviation expansion and clinical values."""

from __future__ import annotations

from ckd_appeals.extraction.clinical import extract_clinical_data, find_complications
from ckd_appeals.extraction.patterns import FIELD_PATTERNS, FieldPattern
from ckd_appeals.extraction.terms import expand_terms

__all__ = [
    "FIELD_PATTERNS",
    "FieldPattern",
    "expand_terms",
    "extract_clinical_data",
    "find_complications",
]
