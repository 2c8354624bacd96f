"""Abbreviation expansion against the knowledge-base terminology table."""

from __future__ import annotations

import re
from collections.abc import Mapping

from ckd_appeals.models import ExpansionResult, TermExpansion


def expand_terms(text: str, abbreviations: Mapping[str, str]) -> ExpansionResult:
    """Report every abbreviation that occurs in ``text`` as a whole word.

    Matching is case-insensitive and only the first occurrence of each
    abbreviation is reported. Expansions follow table order, not position
    in the text. The text itself is returned unchanged.
    """
    expansions: list[TermExpansion] = []
    for abbreviation, full_name in abbreviations.items():
        match = re.search(rf"\b{re.escape(abbreviation)}\b", text, re.IGNORECASE)
        if match:
            expansions.append(
                TermExpansion(
                    abbreviation=abbreviation,
                    full_name=full_name,
                    matched_text=match.group(0),
                )
            )

    return ExpansionResult(
        original_text=text,
        expanded_text=text,
        expansions=tuple(expansions),
    )
