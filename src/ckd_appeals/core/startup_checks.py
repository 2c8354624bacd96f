"""Startup validation: fail-fast on critical misconfigurations."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from ckd_appeals.core.config import AppSettings

log = logging.getLogger(__name__)

# Providers that run locally and do not require an API key
_NO_KEY_PROVIDERS = frozenset({"ollama"})


def validate_settings(settings: AppSettings) -> None:
    """Validate application settings at startup. Raises ValueError on fatal misconfig."""
    _check_api_key(settings)
    _check_knowledge_base(settings)
    _check_auth(settings)


def _check_api_key(settings: AppSettings) -> None:
    """Reject a missing API key for providers that need one."""
    if not settings.llm.enabled:
        log.warning("Decision model disabled (CKD_LLM_ENABLED=false); all decisions use fallback rules")
        return
    if settings.llm.provider not in _NO_KEY_PROVIDERS and not settings.llm.api_key:
        raise ValueError(
            f"CKD_LLM_API_KEY is required for provider '{settings.llm.provider}'. "
            f"Set it via environment variable, or set CKD_LLM_ENABLED=false to run on fallback rules only."
        )


def _check_knowledge_base(settings: AppSettings) -> None:
    """Reject a knowledge-base path that does not point at a file."""
    path = settings.knowledge_base.path
    if not path.is_file():
        raise ValueError(f"Knowledge base file not found: {path}. Check CKD_KB_PATH.")


def _check_auth(settings: AppSettings) -> None:
    """Reject auth enabled with no keys, which would lock out every request."""
    if settings.auth.enabled and not settings.auth.api_keys:
        raise ValueError(
            "CKD_AUTH_ENABLED=true but no API keys configured. "
            "Set CKD_AUTH_API_KEYS or disable auth."
        )
