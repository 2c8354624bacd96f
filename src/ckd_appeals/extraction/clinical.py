"""Clinical value extraction from free text.

Every field is an independent pattern search over the raw text. A missing
pattern leaves the field ``None``; a pattern whose value fails to parse is
treated the same way.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping
from typing import Any

from ckd_appeals.extraction.patterns import DIABETES_PATTERN, FIELD_PATTERNS, FieldPattern
from ckd_appeals.models import ClinicalData, Complication

log = logging.getLogger(__name__)


def extract_clinical_data(
    text: str,
    complications: Mapping[str, str] | None = None,
    *,
    patterns: Iterable[FieldPattern] = FIELD_PATTERNS,
) -> ClinicalData:
    """Parse structured clinical values out of ``text``.

    Args:
        text: Raw document text.
        complications: Complication name → description, in table order.
        patterns: Field pattern table; defaults to the built-in CKD table.
    """
    values: dict[str, Any] = {}
    for entry in patterns:
        value = _search_field(entry, text)
        if value is not None:
            values[entry.field] = value

    if DIABETES_PATTERN.search(text):
        values["diabetes"] = True

    found = find_complications(text, complications or {})
    if found:
        values["complications"] = found

    return ClinicalData(**values)


def find_complications(text: str, complications: Mapping[str, str]) -> tuple[Complication, ...]:
    """Case-insensitive substring test of every complication name against ``text``."""
    lowered = text.lower()
    return tuple(
        Complication(name=name, description=description)
        for name, description in complications.items()
        if name.lower() in lowered
    )


def _search_field(entry: FieldPattern, text: str) -> Any | None:
    match = entry.regex.search(text)
    if match is None:
        return None
    try:
        return entry.parser(match.group(1))
    except ValueError:
        log.debug("Unparsable %s value %r", entry.field, match.group(1))
        return None
