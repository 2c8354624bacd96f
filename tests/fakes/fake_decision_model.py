"""Deterministic decision model for testing: no real LLM calls.

Usage::

    model = FakeDecisionModel(replies=['{"decision": "APPROVE", "confidence": 0.9}'])
    engine = DecisionEngine(model)
    decision = await engine.decide(data, text)

    assert model.prompts[0]  # inspect what was sent
"""

from __future__ import annotations

from ckd_appeals.decision.parser import DecisionPayload, parse_decision_payload
from ckd_appeals.exceptions import ModelCallError


class FakeDecisionModel:
    """Replays canned replies through the real parser, or fails on demand.

    Args:
        replies: Ordered raw reply strings. Each ``decide()`` call consumes
            the next one; when exhausted ``default_reply`` is used.
        error: If set, every call raises ``ModelCallError`` with this message.
    """

    def __init__(
        self,
        replies: list[str] | None = None,
        *,
        default_reply: str = '{"decision": "REVIEW", "confidence": 0.5}',
        error: str | None = None,
        name: str = "fake/decision-model",
    ) -> None:
        self._replies = list(replies or [])
        self._default = default_reply
        self._error = error
        self._name = name
        self.prompts: list[str] = []

    @property
    def name(self) -> str:
        return self._name

    @property
    def call_count(self) -> int:
        return len(self.prompts)

    async def decide(self, prompt: str) -> DecisionPayload:
        self.prompts.append(prompt)
        if self._error is not None:
            raise ModelCallError(self._error)
        reply = self._replies.pop(0) if self._replies else self._default
        return parse_decision_payload(reply)
