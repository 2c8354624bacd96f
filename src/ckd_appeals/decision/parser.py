"""Tolerant parsing of the decision model's reply into a validated payload."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from pydantic import BaseModel, Field, ValidationError, field_validator

from ckd_appeals.exceptions import DecisionParseError
from ckd_appeals.models import Outcome

log = logging.getLogger(__name__)

_FENCE_OPEN = re.compile(r"```\s*json\s*", re.IGNORECASE)
_JSON_BLOCK = re.compile(r"```json([\s\S]*?)```", re.IGNORECASE)


class DecisionPayload(BaseModel):
    """The JSON object the decision model is asked to return."""

    decision: Outcome
    confidence: float = Field(ge=0.0, le=1.0)
    rationale: list[str] = Field(default_factory=list)
    key_factors: list[str] = Field(default_factory=list)
    recommendations: list[str] = Field(default_factory=list)

    @field_validator("decision", mode="before")
    @classmethod
    def _normalize_decision(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.strip().upper()
        return value

    @field_validator("rationale", "key_factors", "recommendations", mode="before")
    @classmethod
    def _coerce_list(cls, value: Any) -> Any:
        if value is None:
            return []
        if isinstance(value, str):
            return [value]
        return value


def parse_decision_payload(content: str) -> DecisionPayload:
    """Parse and validate a model reply.

    Strategies, in order:

    1. Strip markdown code fences and parse the first balanced ``{...}`` span.
    2. Parse the body of a fenced ```json block in the raw reply.

    Raises:
        DecisionParseError: When no strategy yields a valid payload.
    """
    if not isinstance(content, str) or not content.strip():
        raise DecisionParseError("Model reply is empty", raw_response=content or "")

    errors: list[str] = []
    for candidate in _candidates(content):
        try:
            return DecisionPayload.model_validate(json.loads(candidate))
        except json.JSONDecodeError as exc:
            errors.append(f"invalid JSON: {exc.msg}")
        except ValidationError as exc:
            errors.append(f"invalid payload: {exc.error_count()} error(s)")

    detail = "; ".join(errors) if errors else "no JSON object found"
    raise DecisionParseError(f"Unable to parse decision from model reply ({detail})", raw_response=content)


def _candidates(content: str) -> list[str]:
    candidates: list[str] = []

    cleaned = _FENCE_OPEN.sub("", content).replace("```", "").strip()
    span = first_balanced_object(cleaned)
    if span is not None:
        candidates.append(span)

    block = _JSON_BLOCK.search(content)
    if block:
        inner = block.group(1).strip()
        if inner and inner not in candidates:
            candidates.append(inner)

    return candidates


def first_balanced_object(content: str) -> str | None:
    """Return the first balanced ``{...}`` span, skipping braces inside strings."""
    start = content.find("{")
    if start == -1:
        return None

    depth = 0
    in_string = False
    escape = False
    for i in range(start, len(content)):
        ch = content[i]
        if escape:
            escape = False
            continue
        if ch == "\\":
            escape = True
            continue
        if ch == '"':
            in_string = not in_string
            continue
        if in_string:
            continue
        if ch == "{":
            depth += 1
        elif ch == "}":
            depth -= 1
            if depth == 0:
                return content[start : i + 1]
    return None
