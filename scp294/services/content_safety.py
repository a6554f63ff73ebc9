"""Content safety / moderation screening.

Uses the Mistral moderation classifier to screen a drink request before
a generation call is spent on it. The gate is advisory: when the
classifier is disabled, unreachable or slower than
``settings.moderation_timeout_s`` the request is allowed through.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from scp294.config import settings
from scp294.models.moderation import ContentSafetyResult
from scp294.services.mistral_client import get_client, moderate

logger = logging.getLogger(__name__)


def _unscreened(explanation: str) -> ContentSafetyResult:
    return ContentSafetyResult(is_safe=True, screened=False, explanation=explanation)


def _flagged_categories(response: Any) -> list[str]:
    blocking = set(settings.moderation_categories)
    flagged: list[str] = []
    for result in getattr(response, "results", None) or []:
        categories = getattr(result, "categories", None) or {}
        if hasattr(categories, "model_dump"):
            categories = categories.model_dump()
        for category, hit in categories.items():
            if hit and category in blocking and category not in flagged:
                flagged.append(category)
    return flagged


async def screen_content(text: str) -> ContentSafetyResult:
    """Screen user text for harmful content.

    Returns a ``ContentSafetyResult`` indicating whether the input is
    safe and listing any flagged categories.
    """
    if not settings.moderation_enabled:
        return _unscreened("Moderation disabled.")
    if get_client() is None:
        return _unscreened("No API key — content not screened.")

    try:
        response = await asyncio.wait_for(moderate(text), timeout=settings.moderation_timeout_s)
    except asyncio.TimeoutError:
        logger.warning("Content moderation timed out after %.1fs — allowing content", settings.moderation_timeout_s)
        return _unscreened("Moderation timed out — allowing content.")
    except Exception:
        logger.exception("Content moderation failed")
        return _unscreened("Moderation check failed — allowing content.")

    flagged = _flagged_categories(response)
    return ContentSafetyResult(
        is_safe=not flagged,
        categories=flagged,
        explanation="Content flagged for: " + ", ".join(flagged) if flagged else "Content is safe.",
    )
