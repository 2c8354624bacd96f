"""Service banner and health check endpoints."""

from __future__ import annotations

from typing import Any

from fastapi import APIRouter, Request

router = APIRouter(tags=["health"])


@router.get("/")
async def root(req: Request) -> dict[str, str]:
    return {"message": f"{req.app.title} backend is running"}


@router.get("/health")
async def health(req: Request) -> dict[str, Any]:
    """Liveness probe with knowledge-base cache state."""
    status = req.app.state.knowledge_base.status()
    return {
        "status": "ok",
        "knowledge_base": {
            "loaded": status["loaded"],
            "cache_valid": status["cache_valid"],
            "last_load_time": status["last_load_time"],
        },
    }


@router.get("/ready")
async def ready() -> dict[str, str]:
    """Readiness probe: confirms the app can serve requests."""
    return {"status": "ready"}
