"""Effect catalog — the closed set of cosmetic effects a drink may carry.

Every identifier ever shipped lives in ``EffectId``. Which of them the
dispenser may currently emit is decided by the catalog revision selected
through ``settings.effect_catalog_version``; growing the catalog means
adding a new revision, never editing an old one.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum

from scp294.config import settings


class EffectId(StrEnum):
    NONE = "NONE"
    WARMTH = "WARMTH"
    COOLING = "COOLING"
    SPEED_SMALL = "SPEED_SMALL"
    JUMP_SMALL = "JUMP_SMALL"
    GLOW = "GLOW"
    SHRINK_VFX = "SHRINK_VFX"
    GROW_VFX = "GROW_VFX"
    BURP = "BURP"
    EXPLODE = "EXPLODE"
    # extended audio / visual / prop effects
    SPARKLES = "SPARKLES"
    RAINBOW_TRAIL = "RAINBOW_TRAIL"
    CONFETTI = "CONFETTI"
    BUBBLE_AURA = "BUBBLE_AURA"
    MUSIC_NOTES = "MUSIC_NOTES"
    SQUEAKY_VOICE = "SQUEAKY_VOICE"
    DEEP_VOICE = "DEEP_VOICE"
    HICCUPS = "HICCUPS"
    TINY_HAT = "TINY_HAT"
    UMBRELLA_PROP = "UMBRELLA_PROP"


_CATALOG_V1: tuple[EffectId, ...] = (
    EffectId.NONE,
    EffectId.WARMTH,
    EffectId.COOLING,
    EffectId.SPEED_SMALL,
    EffectId.JUMP_SMALL,
    EffectId.GLOW,
    EffectId.SHRINK_VFX,
    EffectId.GROW_VFX,
    EffectId.BURP,
)
_CATALOG_V2 = _CATALOG_V1 + (EffectId.EXPLODE,)
_CATALOG_V3 = _CATALOG_V2 + (
    EffectId.SPARKLES,
    EffectId.RAINBOW_TRAIL,
    EffectId.CONFETTI,
    EffectId.BUBBLE_AURA,
    EffectId.MUSIC_NOTES,
    EffectId.SQUEAKY_VOICE,
    EffectId.DEEP_VOICE,
    EffectId.HICCUPS,
    EffectId.TINY_HAT,
    EffectId.UMBRELLA_PROP,
)

CATALOGS: dict[int, tuple[EffectId, ...]] = {
    1: _CATALOG_V1,
    2: _CATALOG_V2,
    3: _CATALOG_V3,
}

LATEST_CATALOG_VERSION = max(CATALOGS)


def active_catalog(version: int | None = None) -> tuple[EffectId, ...]:
    """Return the catalog revision in use (configured one by default)."""
    selected = settings.effect_catalog_version if version is None else version
    try:
        return CATALOGS[selected]
    except KeyError:
        raise ValueError(f"Unknown effect catalog version: {selected}") from None


@dataclass(frozen=True)
class ParamRange:
    """Bounds for one numeric effect knob."""

    minimum: float
    maximum: float
    neutral: float

    def clamp(self, value: float) -> float:
        return min(max(value, self.minimum), self.maximum)


# Declaration order is the wire order of ``effectParams``.
EFFECT_PARAM_RANGES: dict[str, ParamRange] = {
    "duration": ParamRange(0, 30, 0),
    "speedMultiplier": ParamRange(1.0, 1.5, 1.0),
    "jumpBoost": ParamRange(0, 20, 0),
    "glowBrightness": ParamRange(0, 5, 0),
    "power": ParamRange(0, 10, 0),
    "radius": ParamRange(0, 15, 0),
}


def neutral_effect_params() -> dict[str, float]:
    return {name: r.neutral for name, r in EFFECT_PARAM_RANGES.items()}
