"""Tests for startup validation checks."""

from __future__ import annotations

from pathlib import Path
from unittest.mock import patch

import pytest

from ckd_appeals.core.config import AppSettings, AuthConfig, KnowledgeBaseConfig, LLMConfig, UploadConfig
from ckd_appeals.core.startup_checks import validate_settings


class TestApiKeyValidation:
    """A missing API key is fatal for hosted providers unless the model is disabled."""

    @pytest.mark.parametrize("provider", ["gemini", "openai", "anthropic"])
    def test_rejects_empty_key(self, provider: str) -> None:
        settings = AppSettings(llm=LLMConfig(provider=provider, api_key=""))
        with pytest.raises(ValueError, match="CKD_LLM_API_KEY is required"):
            validate_settings(settings)

    def test_accepts_no_key_for_ollama(self) -> None:
        settings = AppSettings(llm=LLMConfig(provider="ollama", model="ollama/llama3", api_key=""))
        validate_settings(settings)

    def test_accepts_real_key(self) -> None:
        validate_settings(AppSettings(llm=LLMConfig(provider="gemini", api_key="real-key")))

    def test_disabled_model_needs_no_key(self) -> None:
        settings = AppSettings(llm=LLMConfig(enabled=False, api_key=""))
        with patch("ckd_appeals.core.startup_checks.log") as mock_log:
            validate_settings(settings)
            mock_log.warning.assert_called_once()


class TestKnowledgeBaseCheck:
    def test_missing_file_is_fatal(self, tmp_path: Path) -> None:
        settings = AppSettings(
            llm=LLMConfig(enabled=False),
            knowledge_base=KnowledgeBaseConfig(path=tmp_path / "missing.json"),
        )
        with pytest.raises(ValueError, match="Knowledge base file not found"):
            validate_settings(settings)

    def test_packaged_file_passes(self) -> None:
        validate_settings(AppSettings(llm=LLMConfig(enabled=False)))


class TestAuthCheck:
    def test_enabled_without_keys_is_fatal(self) -> None:
        settings = AppSettings(llm=LLMConfig(enabled=False), auth=AuthConfig(enabled=True, api_keys=[]))
        with pytest.raises(ValueError, match="no API keys configured"):
            validate_settings(settings)

    def test_enabled_with_keys_passes(self) -> None:
        settings = AppSettings(llm=LLMConfig(enabled=False), auth=AuthConfig(enabled=True, api_keys=["k"]))
        validate_settings(settings)


class TestConfigDefaults:
    def test_defaults(self) -> None:
        settings = AppSettings()
        assert settings.knowledge_base.ttl_seconds == 300
        assert settings.upload.max_bytes == 10 * 1024 * 1024
        assert settings.upload.preview_chars == 500
        assert settings.decision.excerpt_chars == 500
        assert settings.api.port == 3001
        assert settings.auth.enabled is False

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CKD_KB_TTL_SECONDS", "60")
        monkeypatch.setenv("CKD_LLM_ENABLED", "false")
        monkeypatch.setenv("CKD_UPLOAD_MAX_BYTES", "1024")

        assert KnowledgeBaseConfig().ttl_seconds == 60
        assert LLMConfig().enabled is False
        assert UploadConfig().max_bytes == 1024
