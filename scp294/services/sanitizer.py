"""Field-by-field repair of model output against the drink schema.

Nothing here rejects: an out-of-contract value is replaced by its
default, numeric knobs are clamped and strings are truncated. The
result is always a valid ``DrinkResponse``, and sanitising an already
valid object returns it unchanged.
"""

from __future__ import annotations

import logging
import math
import re
from typing import Any

from scp294.models.drink import (
    COLOR_HEX_PATTERN,
    DISPLAY_NAME_MAX,
    MESSAGE_MAX,
    TASTE_NOTES_MAX,
    Container,
    DrinkResponse,
    EffectParams,
    Temperature,
    Visual,
)
from scp294.models.effects import EFFECT_PARAM_RANGES, EffectId, active_catalog, neutral_effect_params
from scp294.services.fallbacks import GENERIC_DISPLAY_NAME, GENERIC_MESSAGE, generic_fallback

logger = logging.getLogger(__name__)

DEFAULT_COLOR_HEX = "#A0C4FF"
DEFAULT_TEMPERATURE = Temperature.AMBIENT
DEFAULT_CONTAINER = Container.PAPER_CUP

_COLOR_RE = re.compile(COLOR_HEX_PATTERN)


def has_effect_id(candidate: Any) -> bool:
    return isinstance(candidate, dict) and bool(candidate.get("effectId"))


def _is_number(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    # ints compare exactly against the bounds, however large
    if isinstance(value, int):
        return True
    return isinstance(value, float) and math.isfinite(value)


def _display_name(value: Any, query: str | None) -> str:
    if isinstance(value, str) and value:
        return value[:DISPLAY_NAME_MAX]
    return (query or "").strip()[:DISPLAY_NAME_MAX] or GENERIC_DISPLAY_NAME


def _color_hex(value: Any) -> str:
    if isinstance(value, str) and _COLOR_RE.fullmatch(value):
        return value
    return DEFAULT_COLOR_HEX


def _choice(value: Any, enum_type: type, default: Any) -> Any:
    try:
        return enum_type(value) if isinstance(value, str) else default
    except ValueError:
        return default


def _visual(value: Any) -> Visual:
    raw = value if isinstance(value, dict) else {}
    flags = {key: raw.get(key) if isinstance(raw.get(key), bool) else False for key in ("foam", "bubbles", "steam")}
    return Visual(**flags)


def _taste_notes(value: Any) -> list[str]:
    if not isinstance(value, list):
        return []
    return [note for note in value if isinstance(note, str)][:TASTE_NOTES_MAX]


def _effect_params(value: Any) -> EffectParams | None:
    if not isinstance(value, dict):
        return None
    knobs: dict[str, float] = {}
    for name, bounds in EFFECT_PARAM_RANGES.items():
        raw = value.get(name)
        knobs[name] = bounds.clamp(raw) if _is_number(raw) else bounds.neutral
    return EffectParams.model_validate(knobs)


def _effect(candidate: dict[str, Any]) -> tuple[EffectId, EffectParams | None]:
    raw = candidate.get("effectId")
    allowed = {effect.value for effect in active_catalog()}
    if isinstance(raw, str) and raw in allowed:
        return EffectId(raw), _effect_params(candidate.get("effectParams"))
    logger.info("Coercing unknown effectId %r to NONE", raw)
    return EffectId.NONE, EffectParams.model_validate(neutral_effect_params())


def _message(value: Any) -> str:
    if isinstance(value, str):
        return value[:MESSAGE_MAX]
    return GENERIC_MESSAGE


def sanitize_drink(candidate: Any, query: str | None = None) -> DrinkResponse:
    """Repair *candidate* into a valid drink; *query* names fallback drinks."""
    if not has_effect_id(candidate):
        return generic_fallback(query)

    effect_id, effect_params = _effect(candidate)
    return DrinkResponse(
        display_name=_display_name(candidate.get("displayName"), query),
        color_hex=_color_hex(candidate.get("colorHex")),
        temperature=_choice(candidate.get("temperature"), Temperature, DEFAULT_TEMPERATURE),
        container=_choice(candidate.get("container"), Container, DEFAULT_CONTAINER),
        visual=_visual(candidate.get("visual")),
        taste_notes=_taste_notes(candidate.get("tasteNotes")),
        effect_id=effect_id,
        effect_params=effect_params,
        message=_message(candidate.get("message")),
    )
