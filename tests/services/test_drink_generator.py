from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock

import pytest

from scp294.config import settings
from scp294.models.effects import CATALOGS
from scp294.services.drink_generator import GenerationError, build_messages, build_system_prompt, generate_drink
from tests.mock.utils import chat_envelope, valid_drink


def test_system_prompt_lists_active_catalog(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setattr(settings, "effect_catalog_version", 1)
    prompt = build_system_prompt()

    for effect in CATALOGS[1]:
        assert f'"{effect.value}"' in prompt
    assert '"EXPLODE"' not in prompt


def test_user_message_carries_query() -> None:
    messages = build_messages("lemonade")

    assert [m["role"] for m in messages] == ["system", "user"]
    assert messages[1]["content"] == "Request: lemonade"


@pytest.mark.asyncio
async def test_returns_envelope_and_passes_schema(generation: AsyncMock) -> None:
    envelope = await generate_drink("lemonade")

    assert envelope == chat_envelope(valid_drink())
    messages, schema = generation.await_args.args
    assert messages[1]["content"] == "Request: lemonade"
    assert "EXPLODE" in schema["properties"]["effectId"]["enum"]


@pytest.mark.asyncio
async def test_provider_error_raises_generation_error(generation: AsyncMock) -> None:
    generation.side_effect = RuntimeError("500 Internal Server Error")

    with pytest.raises(GenerationError, match="500 Internal Server Error"):
        await generate_drink("lemonade")


@pytest.mark.asyncio
async def test_timeout_raises_generation_error(monkeypatch: pytest.MonkeyPatch) -> None:
    async def slow_completion(*args, **kwargs) -> None:
        await asyncio.sleep(5)

    monkeypatch.setattr("scp294.services.drink_generator.structured_completion", slow_completion)
    monkeypatch.setattr(settings, "generation_timeout_s", 0.01)

    with pytest.raises(GenerationError, match="timed out"):
        await generate_drink("lemonade")


@pytest.mark.asyncio
async def test_missing_client_raises_generation_error(monkeypatch: pytest.MonkeyPatch) -> None:
    from scp294.services.mistral_client import get_client

    monkeypatch.setattr(settings, "mistral_api_key", "")
    get_client.cache_clear()

    with pytest.raises(GenerationError, match="no API key"):
        await generate_drink("lemonade")
