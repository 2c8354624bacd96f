"""Tri-state appeal decisioning: engine, fallback rules, reply parsing."""

from __future__ import annotations

from ckd_appeals.decision.engine import DecisionEngine
from ckd_appeals.decision.parser import DecisionPayload, parse_decision_payload
from ckd_appeals.decision.prompts import build_decision_prompt
from ckd_appeals.decision.rules import (
    DECISION_RULES,
    DecisionState,
    apply_rules,
    complications_rule,
    gfr_rule,
    proteinuria_rule,
)

__all__ = [
    "DECISION_RULES",
    "DecisionEngine",
    "DecisionPayload",
    "DecisionState",
    "apply_rules",
    "build_decision_prompt",
    "complications_rule",
    "gfr_rule",
    "parse_decision_payload",
    "proteinuria_rule",
]
