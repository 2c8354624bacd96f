"""Tests for API-key authentication."""

from __future__ import annotations

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import pytest
from fastapi import APIRouter, Depends, FastAPI
from fastapi.testclient import TestClient

from ckd_appeals.api.app import configure_state
from ckd_appeals.api.auth import require_auth
from ckd_appeals.api.routes import health
from ckd_appeals.core.config import AppSettings, AuthConfig


def _build_app_with_auth(settings: AppSettings) -> FastAPI:
    """Build a FastAPI app with auth dependency on /api routes, mirroring production."""

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
        configure_state(app, settings)
        yield

    app = FastAPI(lifespan=lifespan)
    app.include_router(health.router)

    protected_router = APIRouter(prefix="/api", dependencies=[Depends(require_auth)])

    @protected_router.get("/ping")
    async def ping() -> dict[str, str]:
        return {"pong": "ok"}

    app.include_router(protected_router)
    return app


@pytest.fixture
def make_settings(settings: AppSettings):
    def _make(*, auth_enabled: bool = False, api_keys: list[str] | None = None) -> AppSettings:
        settings.auth = AuthConfig(enabled=auth_enabled, api_keys=api_keys or [])
        return settings

    return _make


class TestHealthAlwaysAccessible:
    """Health endpoints never require authentication."""

    def test_health_no_auth(self, make_settings) -> None:
        with TestClient(_build_app_with_auth(make_settings(auth_enabled=True, api_keys=["secret"]))) as client:
            resp = client.get("/health")
            assert resp.status_code == 200
            assert resp.json()["status"] == "ok"

    def test_ready_no_auth(self, make_settings) -> None:
        with TestClient(_build_app_with_auth(make_settings(auth_enabled=True, api_keys=["secret"]))) as client:
            assert client.get("/ready").status_code == 200


class TestAuthEnabled:
    def test_no_key_returns_401(self, make_settings) -> None:
        with TestClient(_build_app_with_auth(make_settings(auth_enabled=True, api_keys=["secret"]))) as client:
            resp = client.get("/api/ping")
            assert resp.status_code == 401
            assert "Authentication required" in resp.json()["detail"]

    def test_wrong_key_returns_401(self, make_settings) -> None:
        with TestClient(_build_app_with_auth(make_settings(auth_enabled=True, api_keys=["right"]))) as client:
            assert client.get("/api/ping", headers={"X-API-Key": "wrong"}).status_code == 401

    def test_empty_key_returns_401(self, make_settings) -> None:
        with TestClient(_build_app_with_auth(make_settings(auth_enabled=True, api_keys=["secret"]))) as client:
            assert client.get("/api/ping", headers={"X-API-Key": ""}).status_code == 401

    def test_any_configured_key_allowed(self, make_settings) -> None:
        app = _build_app_with_auth(make_settings(auth_enabled=True, api_keys=["key-1", "key-2"]))
        with TestClient(app) as client:
            for key in ("key-1", "key-2"):
                resp = client.get("/api/ping", headers={"X-API-Key": key})
                assert resp.status_code == 200
                assert resp.json() == {"pong": "ok"}


class TestAuthDisabled:
    def test_disabled_allows_access(self, make_settings) -> None:
        with TestClient(_build_app_with_auth(make_settings(auth_enabled=False))) as client:
            assert client.get("/api/ping").status_code == 200

    def test_disabled_ignores_key(self, make_settings) -> None:
        with TestClient(_build_app_with_auth(make_settings(auth_enabled=False))) as client:
            assert client.get("/api/ping", headers={"X-API-Key": "anything"}).status_code == 200

    def test_env_var_override(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("CKD_AUTH_ENABLED", "true")
        monkeypatch.setenv("CKD_AUTH_API_KEYS", '["k1", "k2"]')
        cfg = AuthConfig()
        assert cfg.enabled is True
        assert cfg.api_keys == ["k1", "k2"]
