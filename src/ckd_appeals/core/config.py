"""Nested pydantic-settings configuration for the application.

Each group reads its own ``CKD_<GROUP>_*`` env vars::

    export CKD_LLM_MODEL=gemini/gemini-2.0-flash-lite
    export CKD_LLM_API_KEY=...
    export CKD_KB_TTL_SECONDS=300
"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_KNOWLEDGE_BASE_PATH = Path(__file__).resolve().parent.parent / "knowledge" / "data" / "knowledge-base.json"


class LLMConfig(BaseSettings):
    """Decision model configuration.

    ``model`` uses LiteLLM provider prefixes (``gemini/``, ``openai/``,
    ``anthropic/``, ``ollama/``).
    """

    model_config = {"env_prefix": "CKD_LLM_"}

    enabled: bool = True
    provider: Literal["gemini", "openai", "anthropic", "ollama"] = "gemini"
    model: str = "gemini/gemini-2.0-flash-lite"
    api_key: str = ""
    base_url: str | None = None
    temperature: float = 0.0
    timeout: float | None = None


class DecisionConfig(BaseSettings):
    """Decision prompt configuration.

    Env vars use ``CKD_DECISION_`` prefix.
    """

    model_config = {"env_prefix": "CKD_DECISION_"}

    excerpt_chars: int = Field(default=500, ge=0)


class KnowledgeBaseConfig(BaseSettings):
    """Knowledge-base source and cache window.

    Env vars use ``CKD_KB_`` prefix.
    """

    model_config = {"env_prefix": "CKD_KB_"}

    path: Path = DEFAULT_KNOWLEDGE_BASE_PATH
    ttl_seconds: float = Field(default=300.0, gt=0.0)


class UploadConfig(BaseSettings):
    """Document upload limits.

    Env vars use ``CKD_UPLOAD_`` prefix.
    """

    model_config = {"env_prefix": "CKD_UPLOAD_"}

    max_bytes: int = 10 * 1024 * 1024
    allowed_content_types: list[str] = ["application/pdf", "text/plain"]
    preview_chars: int = 500


class PersistenceConfig(BaseSettings):
    """Persistence configuration for the tasks resource.

    Env vars use ``CKD_PERSISTENCE_`` prefix.
    """

    model_config = {"env_prefix": "CKD_PERSISTENCE_"}

    backend: Literal["file", "memory"] = "file"
    store_path: Path = Path("./data")


class ObservabilityConfig(BaseSettings):
    """Logging configuration.

    Env vars use ``CKD_OBSERVABILITY_`` prefix.
    """

    model_config = {"env_prefix": "CKD_OBSERVABILITY_"}

    log_level: str = "INFO"


class AuthConfig(BaseSettings):
    """API-key authentication for ``/api`` routes.

    Env vars use ``CKD_AUTH_`` prefix::

        export CKD_AUTH_ENABLED=true
        export CKD_AUTH_API_KEYS='["key-1", "key-2"]'
    """

    model_config = {"env_prefix": "CKD_AUTH_"}

    enabled: bool = False
    api_keys: list[str] = []


class APIConfig(BaseSettings):
    """FastAPI metadata.

    Env vars use ``CKD_API_`` prefix.
    """

    model_config = {"env_prefix": "CKD_API_"}

    title: str = "CKD Appeals AI"
    description: str = "Document extraction and tri-state decisions for CKD insurance appeals"
    port: int = 3001


class AppSettings(BaseSettings):
    """Top-level application settings aggregating all sub-configs.

    Each sub-config reads its own ``CKD_<GROUP>_*`` env vars when the
    settings object is constructed.
    """

    llm: LLMConfig = Field(default_factory=LLMConfig)
    decision: DecisionConfig = Field(default_factory=DecisionConfig)
    knowledge_base: KnowledgeBaseConfig = Field(default_factory=KnowledgeBaseConfig)
    upload: UploadConfig = Field(default_factory=UploadConfig)
    persistence: PersistenceConfig = Field(default_factory=PersistenceConfig)
    observability: ObservabilityConfig = Field(default_factory=ObservabilityConfig)
    auth: AuthConfig = Field(default_factory=AuthConfig)
    api: APIConfig = Field(default_factory=APIConfig)
