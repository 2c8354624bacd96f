"""Decision model protocol: the narrow contract in front of the external AI call."""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from ckd_appeals.decision.parser import DecisionPayload


@runtime_checkable
class IDecisionModel(Protocol):
    """Protocol for external decision models.

    Implementations make exactly one attempt and raise only
    ``DecisionModelError`` subclasses, so callers need a single error branch.
    """

    @property
    def name(self) -> str:
        """Model identifier recorded on decisions."""
        ...

    async def decide(self, prompt: str) -> DecisionPayload:
        """Run the prompt and return the parsed payload.

        Raises:
            ModelCallError: The call itself failed.
            DecisionParseError: The reply was not a usable decision.
        """
        ...
