"""External decision model: protocol and LiteLLM implementation."""

from __future__ import annotations

from ckd_appeals.inference.litellm_model import LiteLLMDecisionModel
from ckd_appeals.inference.protocols import IDecisionModel

__all__ = ["IDecisionModel", "LiteLLMDecisionModel"]
