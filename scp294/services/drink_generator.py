"""Structured drink generation.

Asks the generation model for a single drink object conforming to the
drink schema. The call is bounded by ``settings.generation_timeout_s``
and attempted once; any failure is reported as ``GenerationError`` so
the pipeline can fall back to a neutral drink.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any

from scp294.config import settings
from scp294.models.drink import build_drink_schema
from scp294.models.effects import EffectId, active_catalog
from scp294.services.mistral_client import structured_completion

logger = logging.getLogger(__name__)

_SYSTEM_TEMPLATE = """\
You are the describer for SCP-294, a coffee-vending machine that can dispense
any liquid. Given a requested drink name, return ONE JSON object describing
harmless cosmetics for the drink and exactly one SAFE effectId from this list:
{effects}

Rules:
- Never invent effectIds outside that list.
- Real alcohol, drugs, poisons, bodily fluids or dangerous chemicals map to
  "NONE" with a short in-universe message about the machine refusing.
- Any explosive effect is cosmetic slapstick that only affects the drinker.
- Use plausible colors (#RRGGBB) and containers; no trademarks.
- effectParams, when given, must stay inside the declared ranges.
- Keep displayName under 40 characters, message under 120, at most 3 tasteNotes.
- Keep output PG-13.
"""


class GenerationError(RuntimeError):
    """The generation call failed, timed out or was not possible."""


def build_system_prompt(catalog: tuple[EffectId, ...] | None = None) -> str:
    effects = ", ".join(f'"{effect.value}"' for effect in (catalog or active_catalog()))
    return _SYSTEM_TEMPLATE.format(effects=f"[{effects}]")


def build_messages(query: str) -> list[dict[str, str]]:
    return [
        {"role": "system", "content": build_system_prompt()},
        {"role": "user", "content": f"Request: {query}"},
    ]


async def generate_drink(query: str) -> Any:
    """Return the raw response envelope for *query*.

    Raises ``GenerationError`` on timeout, transport failure or a
    non-success provider status.
    """
    timeout = settings.generation_timeout_s
    try:
        return await asyncio.wait_for(
            structured_completion(build_messages(query), build_drink_schema()),
            timeout=timeout,
        )
    except asyncio.TimeoutError as e:
        raise GenerationError(f"Generation timed out after {timeout:.1f}s") from e
    except Exception as e:
        raise GenerationError(f"Generation call failed: {e}") from e
