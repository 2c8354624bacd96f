"""Decision prompt templates.

Prompts are stored in ``_PROMPT_DATA`` and exposed as module attributes.
"""

from __future__ import annotations

import json

from ckd_appeals.models import ClinicalData

_PROMPT_DATA: dict[str, str] = {
    "APPEAL_DECISION_PROMPT": """
You are an expert medical reviewer specializing in Chronic Kidney Disease (CKD) insurance appeals. Your task is to analyze the provided clinical data and make a tri-state decision for a CKD appeal.

CLINICAL DATA:
{clinical_context}

EXTRACTED TEXT (first {excerpt_chars} characters):
{excerpt}

CKD APPEAL DECISION CRITERIA:
- APPROVE: GFR < 15 mL/min/1.73m², significant proteinuria (>3.5 g/day), severe complications, or clear progression despite optimal management
- REJECT: GFR > 60 mL/min/1.73m² without complications, reversible causes, insufficient documentation, or adequate response to therapy
- REVIEW: GFR 15-59 mL/min/1.73m², moderate proteinuria (1-3.5 g/day), incomplete records, or conflicting findings

Please provide your analysis in the following JSON format:
{{
  "decision": "APPROVE|REJECT|REVIEW",
  "confidence": 0.0-1.0,
  "rationale": ["reason1", "reason2", "reason3"],
  "key_factors": ["factor1", "factor2"],
  "recommendations": ["recommendation1", "recommendation2"]
}}

Focus on evidence-based decision making and provide clear rationale for your classification.
""",
}

_PROMPT_NAMES = frozenset(_PROMPT_DATA.keys())


def __getattr__(name: str) -> str:
    if name in _PROMPT_NAMES:
        return _PROMPT_DATA[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


def build_decision_prompt(data: ClinicalData, text: str, *, excerpt_chars: int = 500) -> str:
    """Render the appeal decision prompt for one case."""
    context = {
        "gfr": data.gfr,
        "creatinine": data.creatinine,
        "bun": data.bun,
        "proteinuria": data.proteinuria,
        "blood_pressure": str(data.blood_pressure) if data.blood_pressure else None,
        "diabetes": data.diabetes,
        "complications": [c.name for c in data.complications],
    }
    return _PROMPT_DATA["APPEAL_DECISION_PROMPT"].format(
        clinical_context=json.dumps(context, indent=2),
        excerpt_chars=excerpt_chars,
        excerpt=text[:excerpt_chars],
    )
