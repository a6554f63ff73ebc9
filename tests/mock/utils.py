from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any


def valid_drink(**overrides: Any) -> dict[str, Any]:
    """A schema-valid drink in wire (camelCase) form."""
    drink: dict[str, Any] = {
        "displayName": "Lemonade",
        "colorHex": "#FFF44F",
        "temperature": "cold",
        "container": "glass",
        "visual": {"foam": False, "bubbles": True, "steam": False},
        "tasteNotes": ["sour", "sweet"],
        "effectId": "SPEED_SMALL",
        "effectParams": {
            "duration": 10,
            "speedMultiplier": 1.2,
            "jumpBoost": 0,
            "glowBrightness": 0,
            "power": 0,
            "radius": 0,
        },
        "message": "Tart and refreshing. Your legs feel lighter.",
    }
    drink.update(overrides)
    return drink


def chat_envelope(payload: Any) -> dict[str, Any]:
    """Chat-completion style envelope carrying *payload* as message text."""
    content = payload if isinstance(payload, str) else json.dumps(payload)
    return {
        "id": "cmpl-test",
        "model": "mistral-small-latest",
        "choices": [
            {
                "index": 0,
                "message": {"role": "assistant", "content": content},
                "finish_reason": "stop",
            }
        ],
    }


def moderation_response(**flags: bool) -> SimpleNamespace:
    """Moderation response whose single result flags the given categories."""
    categories = {
        "sexual": False,
        "hate_and_discrimination": False,
        "violence_and_threats": False,
        "dangerous_and_criminal_content": False,
        "selfharm": False,
        "health": False,
        "financial": False,
        "law": False,
        "pii": False,
    }
    categories.update(flags)
    return SimpleNamespace(id="mod-test", model="mistral-moderation-latest", results=[SimpleNamespace(categories=categories)])
