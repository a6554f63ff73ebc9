"""Tolerant JSON extraction from provider response envelopes.

The generation provider has returned the drink object in several shapes
over time: a pre-parsed field, nested message / output content (parsed
object, chunk list or raw text) and a flattened text field. New envelope
shapes are added here without touching the rest of the pipeline.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterator
from typing import Any

logger = logging.getLogger(__name__)

_PARSED_KEYS = ("output_parsed", "parsed")
_TEXT_KEYS = ("output_text", "text", "content")


def _to_plain(envelope: Any) -> Any:
    """Turn SDK response objects into plain dicts / lists."""
    if hasattr(envelope, "model_dump"):
        return envelope.model_dump()
    return envelope


def parse_json_text(text: str) -> dict[str, Any] | None:
    """Parse a JSON object from *text*, tolerating prose around it."""
    try:
        data = json.loads(text)
    except (json.JSONDecodeError, TypeError, ValueError):
        data = None
    if isinstance(data, dict):
        return data

    start, end = text.find("{"), text.rfind("}")
    if start == -1 or end <= start:
        return None
    try:
        data = json.loads(text[start : end + 1])
    except (json.JSONDecodeError, ValueError):
        return None
    return data if isinstance(data, dict) else None


def _content_candidates(content: Any) -> Iterator[Any]:
    """Yield candidates from a message / output ``content`` value."""
    if isinstance(content, (str, dict)):
        yield content
        return
    if not isinstance(content, list):
        return
    for part in content:
        if isinstance(part, str):
            yield part
        elif isinstance(part, dict):
            for key in ("parsed", "json"):
                if part.get(key) is not None:
                    yield part[key]
            if isinstance(part.get("text"), str):
                yield part["text"]


def _candidates(envelope: dict[str, Any]) -> Iterator[Any]:
    # (a) pre-parsed object supplied by the provider
    for key in _PARSED_KEYS:
        if envelope.get(key) is not None:
            yield envelope[key]

    # (b) nested content: chat-completion choices, then response output items
    for choice in envelope.get("choices") or []:
        message = choice.get("message") if isinstance(choice, dict) else None
        if not isinstance(message, dict):
            continue
        if message.get("parsed") is not None:
            yield message["parsed"]
        yield from _content_candidates(message.get("content"))

    for item in envelope.get("output") or []:
        if isinstance(item, dict):
            yield from _content_candidates(item.get("content"))

    # (c) flattened convenience text
    for key in _TEXT_KEYS:
        if isinstance(envelope.get(key), str):
            yield envelope[key]


def _coerce(candidate: Any) -> dict[str, Any] | None:
    if isinstance(candidate, dict):
        return candidate
    if hasattr(candidate, "model_dump"):
        return candidate.model_dump(by_alias=True)
    if isinstance(candidate, str):
        return parse_json_text(candidate)
    return None


def extract_drink_json(envelope: Any) -> dict[str, Any] | None:
    """Return the first JSON object found in *envelope*, or None."""
    plain = _to_plain(envelope)
    if isinstance(plain, str):
        return parse_json_text(plain)
    if not isinstance(plain, dict):
        return None

    for candidate in _candidates(plain):
        data = _coerce(candidate)
        if data is not None:
            return data

    logger.warning("No JSON object found in generation response")
    return None
