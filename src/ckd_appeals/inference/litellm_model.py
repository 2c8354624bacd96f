"""Decision model routed through LiteLLM for multi-provider support.

``model`` accepts LiteLLM prefixes (``gemini/``, ``openai/``, ``anthropic/``,
``ollama/``). A single attempt is made per request; retries, backoff and
timeouts are left to the caller.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from ckd_appeals.decision.parser import DecisionPayload, parse_decision_payload
from ckd_appeals.exceptions import ModelCallError

if TYPE_CHECKING:
    from ckd_appeals.core.config import LLMConfig

log = logging.getLogger(__name__)


class LiteLLMDecisionModel:
    """Async decision model backed by ``litellm.acompletion``."""

    def __init__(self, config: LLMConfig) -> None:
        self._config = config

    @property
    def name(self) -> str:
        return self._config.model

    async def complete(self, prompt: str) -> str:
        """Single completion, returns the content string.

        Raises:
            ModelCallError: On any provider, network or auth failure.
        """
        from litellm import acompletion

        kwargs: dict[str, Any] = {
            "model": self._config.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": self._config.temperature,
            "num_retries": 0,
        }
        if self._config.api_key:
            kwargs["api_key"] = self._config.api_key
        if self._config.base_url:
            kwargs["api_base"] = self._config.base_url
        if self._config.timeout is not None:
            kwargs["timeout"] = self._config.timeout

        try:
            response = await acompletion(**kwargs)
        except Exception as e:
            raise ModelCallError(f"Decision model call failed ({self.name}): {e}") from e

        try:
            content = response.choices[0].message.content or ""
        except (AttributeError, IndexError, KeyError, TypeError) as e:
            raise ModelCallError(f"Decision model returned a malformed response ({self.name}): {e!r}") from e
        log.debug("Decision model replied with %d chars", len(content))
        return content

    async def decide(self, prompt: str) -> DecisionPayload:
        content = await self.complete(prompt)
        return parse_decision_payload(content)
