"""Local denylist pre-filter.

A cheap substring screen run before any provider call. It only catches
the obvious cases; the moderation gate and the model's own instructions
remain the real safety layers.
"""

from __future__ import annotations

from scp294.config import settings

# Tokens are long enough not to hit ordinary drink names ("speed", "root beer", "blood orange").
DENYLIST: tuple[str, ...] = (
    # intoxicants
    "alcohol",
    "vodka",
    "whiskey",
    "whisky",
    "tequila",
    "absinthe",
    "moonshine",
    "cocaine",
    "heroin",
    "methamphetamine",
    "crystal meth",
    "fentanyl",
    "cannabis",
    "marijuana",
    "ketamine",
    "opium",
    # biological fluids
    "urine",
    "human blood",
    "semen",
    "vomit",
    "saliva",
    "feces",
    # hazardous chemicals
    "bleach",
    "cyanide",
    "arsenic",
    "antifreeze",
    "gasoline",
    "ammonia",
    "sulfuric acid",
    "mercury",
    "poison",
)


def _tokens() -> list[str]:
    extra = [token.strip().lower() for token in settings.denylist_extra if token.strip()]
    return [*DENYLIST, *extra]


def is_denied(query: str) -> bool:
    """Return True when *query* contains a denylisted token (case-insensitive)."""
    lowered = query.lower()
    return any(token in lowered for token in _tokens())
