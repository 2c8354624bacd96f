"""FastAPI application with lifespan management."""

from __future__ import annotations

import importlib.metadata
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import Depends, FastAPI

from ckd_appeals.api.auth import require_auth
from ckd_appeals.api.middleware.error_handler import register_error_handlers
from ckd_appeals.api.routes import analyze, documents, health, knowledge_base, tasks
from ckd_appeals.core.config import APIConfig, AppSettings
from ckd_appeals.core.startup_checks import validate_settings
from ckd_appeals.decision import DecisionEngine
from ckd_appeals.hooks import setup_logging
from ckd_appeals.inference import LiteLLMDecisionModel
from ckd_appeals.knowledge import FileKnowledgeBaseProvider, KnowledgeBaseCache
from ckd_appeals.persistence import create_persistence_backend
from ckd_appeals.tasks import TaskStore


def _get_version() -> str:
    """Read package version from installed metadata, with dev fallback."""
    try:
        return importlib.metadata.version("ckd-appeals")
    except importlib.metadata.PackageNotFoundError:
        return "0.0.0-dev"


def build_decision_engine(settings: AppSettings) -> DecisionEngine:
    """Decision engine for the configured model; rules only when the model is disabled."""
    model = LiteLLMDecisionModel(settings.llm) if settings.llm.enabled else None
    return DecisionEngine(model, excerpt_chars=settings.decision.excerpt_chars)


def build_knowledge_base(settings: AppSettings) -> KnowledgeBaseCache:
    provider = FileKnowledgeBaseProvider(settings.knowledge_base.path)
    return KnowledgeBaseCache(provider, ttl_seconds=settings.knowledge_base.ttl_seconds)


def configure_state(app: FastAPI, settings: AppSettings) -> None:
    """Attach settings and per-process services to ``app.state``."""
    app.state.settings = settings
    app.state.knowledge_base = build_knowledge_base(settings)
    app.state.decision_engine = build_decision_engine(settings)
    app.state.task_store = TaskStore(create_persistence_backend(settings.persistence))


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application startup/shutdown lifecycle."""
    settings = AppSettings()
    validate_settings(settings)
    setup_logging(settings.observability)

    configure_state(app, settings)
    # First load happens at startup rather than on the first upload.
    app.state.knowledge_base.get()
    yield


_api_config = APIConfig()

app = FastAPI(
    title=_api_config.title,
    description=_api_config.description,
    version=_get_version(),
    lifespan=lifespan,
)

register_error_handlers(app)

app.include_router(health.router)
app.include_router(knowledge_base.router, prefix="/api", dependencies=[Depends(require_auth)])
app.include_router(documents.router, prefix="/api", dependencies=[Depends(require_auth)])
app.include_router(analyze.router, prefix="/api", dependencies=[Depends(require_auth)])
app.include_router(tasks.router, prefix="/api", dependencies=[Depends(require_auth)])
