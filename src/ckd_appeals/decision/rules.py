"""Deterministic fallback rules for the appeal decision.

The fallback is a left fold of ``DECISION_RULES`` over an initial
``REVIEW / 0.5`` state. Each rule is a pure ``(state, data) -> state``
function; later rules may override the outcome of earlier ones.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from functools import reduce
from typing import Callable

from ckd_appeals.models import ClinicalData, Outcome

# GFR thresholds, mL/min/1.73m²
END_STAGE_GFR = 15.0
PRESERVED_GFR = 60.0

# Proteinuria thresholds, g/day
NEPHROTIC_PROTEINURIA = 3.5
MILD_PROTEINURIA = 1.0


@dataclass(frozen=True)
class DecisionState:
    """Intermediate decision carried through the rule fold."""

    outcome: Outcome = Outcome.REVIEW
    confidence: float = 0.5
    rationale: tuple[str, ...] = ()

    def with_reason(self, reason: str, **changes: object) -> DecisionState:
        return replace(self, rationale=(*self.rationale, reason), **changes)


DecisionRule = Callable[[DecisionState, ClinicalData], DecisionState]


def gfr_rule(state: DecisionState, data: ClinicalData) -> DecisionState:
    """Classify on kidney function alone."""
    gfr = data.gfr
    if gfr is None:
        return state
    if gfr < END_STAGE_GFR:
        return state.with_reason(
            f"GFR of {gfr:g} mL/min/1.73m² indicates end-stage renal disease",
            outcome=Outcome.APPROVE,
            confidence=0.9,
        )
    if gfr >= PRESERVED_GFR:
        return state.with_reason(
            f"GFR of {gfr:g} mL/min/1.73m² indicates normal or mildly reduced kidney function",
            outcome=Outcome.REJECT,
            confidence=0.8,
        )
    return state.with_reason(
        f"GFR of {gfr:g} mL/min/1.73m² requires additional clinical context",
        outcome=Outcome.REVIEW,
        confidence=0.6,
    )


def proteinuria_rule(state: DecisionState, data: ClinicalData) -> DecisionState:
    """Escalate on nephrotic-range proteinuria; soften an APPROVE on mild proteinuria."""
    proteinuria = data.proteinuria
    if proteinuria is None:
        return state
    if proteinuria > NEPHROTIC_PROTEINURIA:
        return state.with_reason(
            f"Significant proteinuria of {proteinuria:g} g/day indicates severe kidney damage",
            outcome=Outcome.APPROVE,
            confidence=max(state.confidence, 0.85),
        )
    if proteinuria < MILD_PROTEINURIA:
        reason = f"Mild proteinuria of {proteinuria:g} g/day may not require immediate intervention"
        # Only an APPROVE is downgraded; REJECT and REVIEW stand.
        if state.outcome == Outcome.APPROVE:
            return state.with_reason(reason, outcome=Outcome.REVIEW, confidence=0.7)
        return state.with_reason(reason)
    return state


def complications_rule(state: DecisionState, data: ClinicalData) -> DecisionState:
    """Any documented complication forces an APPROVE."""
    if not data.complications:
        return state
    names = ", ".join(c.name for c in data.complications)
    return state.with_reason(
        f"Presence of complications: {names}",
        outcome=Outcome.APPROVE,
        confidence=max(state.confidence, 0.8),
    )


DECISION_RULES: tuple[DecisionRule, ...] = (gfr_rule, proteinuria_rule, complications_rule)


def apply_rules(
    data: ClinicalData,
    rules: tuple[DecisionRule, ...] = DECISION_RULES,
    initial: DecisionState | None = None,
) -> DecisionState:
    """Fold ``rules`` over ``data`` in order."""
    return reduce(lambda state, rule: rule(state, data), rules, initial or DecisionState())
