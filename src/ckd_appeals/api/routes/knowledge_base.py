"""Knowledge-base summary endpoint."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request
from pydantic import BaseModel

router = APIRouter(tags=["knowledge-base"])


class KnowledgeBaseSummaryResponse(BaseModel):
    """Table counts plus cache state."""

    message: str = "Knowledge base information"
    summary: dict[str, dict[str, int]]
    cache: dict[str, Any]


@router.get("/knowledge-base", response_model=KnowledgeBaseSummaryResponse)
async def knowledge_base_summary(req: Request) -> KnowledgeBaseSummaryResponse:
    cache = req.app.state.knowledge_base
    kb = cache.get()
    return KnowledgeBaseSummaryResponse(summary=kb.summary(), cache=cache.status())
