"""Appeal decision engine: external model first, deterministic rules on failure."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from ckd_appeals.decision.prompts import build_decision_prompt
from ckd_appeals.decision.rules import DECISION_RULES, DecisionRule, apply_rules
from ckd_appeals.exceptions import DecisionModelError, DecisionParseError
from ckd_appeals.models import ClinicalData, Decision, DecisionSource

if TYPE_CHECKING:
    from ckd_appeals.inference.protocols import IDecisionModel

log = logging.getLogger(__name__)

FALLBACK_KEY_FACTORS = ("Rule-based fallback due to AI API error",)
FALLBACK_RECOMMENDATIONS = ("Consider manual review",)
MODEL_DISABLED = "decision model disabled"


class DecisionEngine:
    """Produces a tri-state ``Decision`` for one case.

    The model gets exactly one attempt. Any ``DecisionModelError`` (call
    failure or unusable reply) switches to the rule fold and is recorded on
    the decision, never raised to the caller. With no model configured every
    decision comes from the rules.

    Args:
        model: External decision model, or ``None`` to run rules only.
        excerpt_chars: Characters of source text embedded in the prompt.
        rules: Ordered fallback rules.
    """

    def __init__(
        self,
        model: IDecisionModel | None = None,
        *,
        excerpt_chars: int = 500,
        rules: tuple[DecisionRule, ...] = DECISION_RULES,
    ) -> None:
        self._model = model
        self._excerpt_chars = excerpt_chars
        self._rules = rules

    @property
    def model_enabled(self) -> bool:
        return self._model is not None

    async def decide(self, data: ClinicalData, text: str) -> Decision:
        """Classify the case as APPROVE, REJECT or REVIEW."""
        if self._model is None:
            return self.fallback(data, text, error=MODEL_DISABLED)

        prompt = build_decision_prompt(data, text, excerpt_chars=self._excerpt_chars)
        try:
            payload = await self._model.decide(prompt)
        except DecisionModelError as exc:
            if isinstance(exc, DecisionParseError):
                log.error(
                    "Decision model reply unparsable, using fallback rules: %s",
                    exc,
                    extra={"response_preview": exc.raw_response[:200]},
                )
            else:
                log.error("Decision model failed, using fallback rules: %s", exc)
            return self.fallback(data, text, error=str(exc))

        decision = Decision(
            outcome=payload.decision,
            confidence=payload.confidence,
            source=DecisionSource.EXTERNAL_MODEL,
            rationale=list(payload.rationale),
            key_factors=list(payload.key_factors),
            recommendations=list(payload.recommendations),
            model=self._model.name,
            extracted_text_length=len(text),
        )
        log.info(
            "Decision %s (confidence=%.2f) from %s",
            decision.outcome.value,
            decision.confidence,
            decision.model,
        )
        return decision

    def fallback(self, data: ClinicalData, text: str = "", *, error: str = "") -> Decision:
        """Rule-based decision, independent of any model."""
        state = apply_rules(data, self._rules)
        decision = Decision(
            outcome=state.outcome,
            confidence=state.confidence,
            source=DecisionSource.FALLBACK_RULES,
            rationale=list(state.rationale),
            key_factors=list(FALLBACK_KEY_FACTORS),
            recommendations=list(FALLBACK_RECOMMENDATIONS),
            extracted_text_length=len(text),
            error=error,
        )
        log.info(
            "Fallback decision %s (confidence=%.2f, %d rationale line(s))",
            decision.outcome.value,
            decision.confidence,
            len(decision.rationale),
        )
        return decision
