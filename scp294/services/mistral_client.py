"""Thin wrapper around the Mistral Python SDK.

Provides a singleton client plus the two async calls the dispenser
makes: moderation classification and schema-constrained chat completion.
Timeouts are applied by the callers; these helpers let SDK errors
propagate.
"""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Any

from mistralai import Mistral

from scp294.config import settings

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def get_client() -> Mistral | None:
    """Return a lazily-initialised Mistral client (or *None* without a key)."""
    if not settings.mistral_api_key:
        logger.warning("No MISTRAL_API_KEY configured — provider calls are disabled")
        return None
    return Mistral(api_key=settings.mistral_api_key)


def _require_client() -> Mistral:
    client = get_client()
    if client is None:
        raise RuntimeError("Mistral client unavailable (no API key configured)")
    return client


async def moderate(text: str) -> Any:
    """Classify *text* with the moderation model and return the raw response."""
    client = _require_client()
    return await client.classifiers.moderate_async(
        model=settings.moderation_model,
        inputs=[text],
    )


async def structured_completion(
    messages: list[dict[str, str]],
    schema: dict[str, Any],
    *,
    schema_name: str = "Drink",
    model: str | None = None,
    temperature: float | None = None,
    max_tokens: int | None = None,
) -> Any:
    """Run a chat completion constrained to *schema* and return the raw envelope."""
    client = _require_client()
    return await client.chat.complete_async(
        model=model or settings.generation_model,
        messages=messages,
        temperature=settings.generation_temperature if temperature is None else temperature,
        max_tokens=max_tokens or settings.generation_max_tokens,
        response_format={
            "type": "json_schema",
            "json_schema": {"name": schema_name, "schema": schema, "strict": True},
        },
    )
