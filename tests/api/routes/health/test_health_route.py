"""Testes dos endpoints de health e readiness."""

from __future__ import annotations

import json

import pytest

from api.routes.health import router as health_router
from api.routes.health.router import health_check, readiness_check
from config.settings import TwitterSettings


@pytest.mark.asyncio
async def test_health_reports_service_name() -> None:
    response = await health_check()

    assert response.status == "healthy"
    assert response.service


@pytest.mark.asyncio
async def test_readiness_returns_not_ready_without_credentials(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(health_router, "get_twitter_settings", lambda: TwitterSettings())

    response = await readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 503
    assert payload["status"] == "not_ready"
    assert payload["checks"]["twitter_settings"] == {"status": "failed", "error_count": 5}


@pytest.mark.asyncio
async def test_readiness_returns_ready_with_credentials(
    monkeypatch: pytest.MonkeyPatch,
    twitter_settings: TwitterSettings,
) -> None:
    monkeypatch.setattr(health_router, "get_twitter_settings", lambda: twitter_settings)

    response = await readiness_check()
    payload = json.loads(response.body.decode("utf-8"))

    assert response.status_code == 200
    assert payload["status"] == "ready"
    assert payload["checks"]["twitter_settings"]["status"] == "ok"
