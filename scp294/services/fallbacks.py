"""Statically-defined safe drinks returned when a pipeline stage bails out.

Tier selection is by cause: safety short-circuits get a refusal drink,
infrastructure or parsing failures get a neutral drink and only
unexpected errors get the coolant failsafe. Each helper builds a fresh
object so nothing is shared between requests.
"""

from __future__ import annotations

from scp294.models.drink import DISPLAY_NAME_MAX, Container, DrinkResponse, Temperature, Visual
from scp294.models.effects import EffectId

GENERIC_DISPLAY_NAME = "Generic Beverage"
GENERIC_MESSAGE = "A nondescript drink dispenses with a soft hum."


def _refusal(message: str) -> DrinkResponse:
    return DrinkResponse(
        display_name="Unknown Liquid",
        color_hex="#7F7F7F",
        temperature=Temperature.AMBIENT,
        container=Container.PAPER_CUP,
        visual=Visual(foam=False, bubbles=False, steam=False),
        taste_notes=["neutral"],
        effect_id=EffectId.NONE,
        message=message,
    )


def deny_fallback() -> DrinkResponse:
    """Pre-filter hit."""
    return _refusal("The machine refuses to dispense that request.")


def refusal_fallback() -> DrinkResponse:
    """Moderation flag."""
    return _refusal("OUT OF RANGE. The machine refuses to dispense that request.")


def generic_fallback(query: str | None = None) -> DrinkResponse:
    """Neutral drink used when generation or extraction fails."""
    name = (query or "").strip()[:DISPLAY_NAME_MAX] or GENERIC_DISPLAY_NAME
    return DrinkResponse(
        display_name=name,
        color_hex="#A0C4FF",
        temperature=Temperature.AMBIENT,
        container=Container.PAPER_CUP,
        visual=Visual(foam=False, bubbles=True, steam=False),
        taste_notes=["mild"],
        effect_id=EffectId.NONE,
        message=GENERIC_MESSAGE,
    )


def hard_failsafe() -> DrinkResponse:
    """Unexpected error or rate limit."""
    return DrinkResponse(
        display_name="Machine Coolant (Safe Replica)",
        color_hex="#88E0FF",
        temperature=Temperature.COOL,
        container=Container.METAL_CUP,
        visual=Visual(foam=False, bubbles=False, steam=False),
        taste_notes=["minty"],
        effect_id=EffectId.COOLING,
        message="Failsafe blend dispensed.",
    )
