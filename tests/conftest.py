from __future__ import annotations

from collections.abc import Iterator
from unittest.mock import AsyncMock

import pytest
from fastapi.testclient import TestClient

from scp294.config import settings
from scp294.rate_limit import limiter
from scp294.services.mistral_client import get_client
from tests.mock.utils import chat_envelope, moderation_response, valid_drink


@pytest.fixture(autouse=True)
def _isolated_settings(monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    """Give every test a fake key, default pipeline settings and fresh limiter counters."""
    monkeypatch.setattr(settings, "mistral_api_key", "test-key")
    monkeypatch.setattr(settings, "moderation_enabled", True)
    monkeypatch.setattr(settings, "effect_catalog_version", 2)
    monkeypatch.setattr(settings, "denylist_extra", [])
    monkeypatch.setattr(settings, "rate_limit", "1000/minute")
    get_client.cache_clear()
    limiter.reset()
    yield
    get_client.cache_clear()


@pytest.fixture()
def moderation(monkeypatch: pytest.MonkeyPatch) -> AsyncMock:
    """Moderation call that reports nothing flagged."""
    mock = AsyncMock(return_value=moderation_response())
    monkeypatch.setattr("scp294.services.content_safety.moderate", mock)
    return mock


@pytest.fixture()
def generation(monkeypatch: pytest.MonkeyPatch) -> AsyncMock:
    """Generation call that returns a valid drink."""
    mock = AsyncMock(return_value=chat_envelope(valid_drink()))
    monkeypatch.setattr("scp294.services.drink_generator.structured_completion", mock)
    return mock


@pytest.fixture()
def client() -> TestClient:
    from scp294.main import app

    return TestClient(app)
