"""Drink request / response models and the structured-output schema.

``DrinkResponse`` is the only shape ever returned to the game client.
``build_drink_schema`` renders the same contract as a strict JSON Schema
for the generation call.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from scp294.models.effects import EFFECT_PARAM_RANGES, EffectId, active_catalog

DISPLAY_NAME_MAX = 40
MESSAGE_MAX = 120
TASTE_NOTES_MAX = 3
COLOR_HEX_PATTERN = r"^#[0-9A-Fa-f]{6}$"


class Temperature(StrEnum):
    COLD = "cold"
    COOL = "cool"
    AMBIENT = "ambient"
    WARM = "warm"
    HOT = "hot"


class Container(StrEnum):
    PAPER_CUP = "paper_cup"
    MUG = "mug"
    GLASS = "glass"
    METAL_CUP = "metal_cup"


class _WireModel(BaseModel):
    """Base for models serialised with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="forbid")


def _knob(name: str) -> Any:
    r = EFFECT_PARAM_RANGES[name]
    return Field(default=r.neutral, ge=r.minimum, le=r.maximum)


class Visual(_WireModel):
    foam: bool
    bubbles: bool
    steam: bool


class EffectParams(_WireModel):
    """Numeric effect knobs, each bounded by ``EFFECT_PARAM_RANGES``."""

    duration: float = _knob("duration")
    speed_multiplier: float = _knob("speedMultiplier")
    jump_boost: float = _knob("jumpBoost")
    glow_brightness: float = _knob("glowBrightness")
    power: float = _knob("power")
    radius: float = _knob("radius")


class DrinkResponse(_WireModel):
    """A fully valid drink descriptor as sent to the game client."""

    display_name: str = Field(min_length=1, max_length=DISPLAY_NAME_MAX)
    color_hex: str = Field(pattern=COLOR_HEX_PATTERN)
    temperature: Temperature
    container: Container
    visual: Visual
    taste_notes: list[str] = Field(default_factory=list, max_length=TASTE_NOTES_MAX)
    effect_id: EffectId
    effect_params: EffectParams | None = None
    message: str = Field(max_length=MESSAGE_MAX)

    def as_json(self) -> dict[str, Any]:
        """Wire representation (camelCase, ``effectParams`` omitted when unset)."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)


class DrinkRequest(BaseModel):
    """Body of ``POST /api/scp294``."""

    query: str | None = None

    @field_validator("query", mode="before")
    @classmethod
    def _stringify(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        return value


def build_drink_schema(catalog: tuple[EffectId, ...] | None = None) -> dict[str, Any]:
    """Strict JSON Schema handed to the model as the output constraint."""
    effects = [effect.value for effect in (catalog or active_catalog())]
    params = {
        name: {"type": "number", "minimum": r.minimum, "maximum": r.maximum, "default": r.neutral}
        for name, r in EFFECT_PARAM_RANGES.items()
    }
    return {
        "type": "object",
        "additionalProperties": False,
        "properties": {
            "displayName": {"type": "string", "minLength": 1, "maxLength": DISPLAY_NAME_MAX},
            "colorHex": {"type": "string", "pattern": COLOR_HEX_PATTERN},
            "temperature": {"type": "string", "enum": [t.value for t in Temperature]},
            "container": {"type": "string", "enum": [c.value for c in Container]},
            "visual": {
                "type": "object",
                "additionalProperties": False,
                "properties": {
                    "foam": {"type": "boolean"},
                    "bubbles": {"type": "boolean"},
                    "steam": {"type": "boolean"},
                },
                "required": ["foam", "bubbles", "steam"],
            },
            "tasteNotes": {
                "type": "array",
                "items": {"type": "string"},
                "maxItems": TASTE_NOTES_MAX,
            },
            "effectId": {"type": "string", "enum": effects},
            "effectParams": {
                "type": "object",
                "additionalProperties": False,
                "properties": params,
                "required": list(params),
            },
            "message": {"type": "string", "maxLength": MESSAGE_MAX},
        },
        "required": [
            "displayName",
            "colorHex",
            "temperature",
            "container",
            "visual",
            "tasteNotes",
            "effectId",
            "message",
        ],
    }
