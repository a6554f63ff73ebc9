from __future__ import annotations

from scp294.services.fallbacks import deny_fallback, generic_fallback, hard_failsafe, refusal_fallback


def test_generic_fallback_named_after_query() -> None:
    assert generic_fallback("lemonade").as_json() == {
        "displayName": "lemonade",
        "colorHex": "#A0C4FF",
        "temperature": "ambient",
        "container": "paper_cup",
        "visual": {"foam": False, "bubbles": True, "steam": False},
        "tasteNotes": ["mild"],
        "effectId": "NONE",
        "message": "A nondescript drink dispenses with a soft hum.",
    }


def test_generic_fallback_without_query() -> None:
    assert generic_fallback().display_name == "Generic Beverage"
    assert generic_fallback("   ").display_name == "Generic Beverage"
    assert len(generic_fallback("x" * 50).display_name) == 40


def test_refusal_tiers_are_grey_and_inert() -> None:
    for drink in (deny_fallback(), refusal_fallback()):
        wire = drink.as_json()
        assert wire["effectId"] == "NONE"
        assert wire["colorHex"] == "#7F7F7F"
        assert "refuses" in wire["message"]
        assert "effectParams" not in wire


def test_hard_failsafe_is_coolant() -> None:
    drink = hard_failsafe()
    assert drink.effect_id == "COOLING"
    assert drink.display_name == "Machine Coolant (Safe Replica)"


def test_fallbacks_are_fresh_objects() -> None:
    first = generic_fallback("tea")
    first.taste_notes.append("mutated")
    assert generic_fallback("tea").taste_notes == ["mild"]
