"""The dispense pipeline.

pre-filter → moderation gate → generation → extraction → sanitising.
Every stage failure resolves to a fallback drink; ``dispense`` never
raises.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import StrEnum
from typing import Any

from scp294.config import settings
from scp294.models.drink import DrinkResponse
from scp294.services.content_safety import screen_content
from scp294.services.drink_generator import GenerationError, generate_drink
from scp294.services.extractor import extract_drink_json
from scp294.services.fallbacks import deny_fallback, generic_fallback, hard_failsafe, refusal_fallback
from scp294.services.prefilter import is_denied
from scp294.services.sanitizer import has_effect_id, sanitize_drink

logger = logging.getLogger(__name__)


class DrinkSource(StrEnum):
    """Which pipeline tier produced the drink."""

    PREFILTER = "prefilter"
    MODERATION = "moderation"
    MODEL = "model"
    FALLBACK = "fallback"
    FAILSAFE = "failsafe"


@dataclass
class DispenseResult:
    drink: DrinkResponse
    source: DrinkSource


def normalize_query(raw: Any) -> str | None:
    """Truncate then trim the client query; None when nothing is left."""
    if raw is None:
        return None
    query = str(raw)[: settings.max_query_length].strip()
    return query or None


async def _run_stages(query: str) -> DispenseResult:
    if is_denied(query):
        logger.info("Pre-filter denied request — dispensing refusal")
        return DispenseResult(deny_fallback(), DrinkSource.PREFILTER)

    safety = await screen_content(query)
    if not safety.is_safe:
        logger.info("Moderation flagged request (%s) — dispensing refusal", ", ".join(safety.categories))
        return DispenseResult(refusal_fallback(), DrinkSource.MODERATION)

    try:
        envelope = await generate_drink(query)
    except GenerationError as e:
        logger.warning("%s — dispensing generic drink", e)
        return DispenseResult(generic_fallback(query), DrinkSource.FALLBACK)

    candidate = extract_drink_json(envelope)
    if not has_effect_id(candidate):
        logger.warning("Generation returned no usable drink object — dispensing generic drink")
        return DispenseResult(generic_fallback(query), DrinkSource.FALLBACK)

    return DispenseResult(sanitize_drink(candidate, query), DrinkSource.MODEL)


async def dispense(query: str) -> DispenseResult:
    """Run the full pipeline for an already-normalised *query*."""
    logger.debug("Dispensing %r", query)
    try:
        return await _run_stages(query)
    except Exception:
        logger.exception("Unexpected pipeline failure — dispensing failsafe")
        return DispenseResult(hard_failsafe(), DrinkSource.FAILSAFE)
