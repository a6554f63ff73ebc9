from __future__ import annotations

import json

from pydantic import BaseModel

from scp294.services.extractor import extract_drink_json, parse_json_text
from tests.mock.utils import chat_envelope, valid_drink

DRINK = valid_drink()


def test_top_level_parsed_field_preferred() -> None:
    envelope = {"output_parsed": DRINK, "output_text": json.dumps({"effectId": "BURP"})}
    assert extract_drink_json(envelope) == DRINK


def test_chat_message_text_content() -> None:
    assert extract_drink_json(chat_envelope(DRINK)) == DRINK


def test_chat_message_parsed_field() -> None:
    envelope = {"choices": [{"message": {"parsed": DRINK, "content": "not json"}}]}
    assert extract_drink_json(envelope) == DRINK


def test_chat_message_content_chunks() -> None:
    envelope = {"choices": [{"message": {"content": [{"type": "text", "text": json.dumps(DRINK)}]}}]}
    assert extract_drink_json(envelope) == DRINK


def test_responses_output_items() -> None:
    envelope = {
        "output": [
            {"type": "message", "content": [{"type": "output_text", "text": json.dumps(DRINK)}]},
        ]
    }
    assert extract_drink_json(envelope) == DRINK


def test_flattened_output_text() -> None:
    assert extract_drink_json({"output_text": json.dumps(DRINK)}) == DRINK


def test_text_wrapped_in_prose() -> None:
    text = f"Sure! Here is your drink:\n```json\n{json.dumps(DRINK)}\n```\nEnjoy."
    assert extract_drink_json(chat_envelope(text)) == DRINK


def test_skips_unparseable_candidates() -> None:
    envelope = {
        "choices": [{"message": {"content": "the machine sputters"}}],
        "output_text": json.dumps(DRINK),
    }
    assert extract_drink_json(envelope) == DRINK


def test_sdk_model_envelope() -> None:
    class Message(BaseModel):
        role: str
        content: str

    class Choice(BaseModel):
        message: Message

    class Completion(BaseModel):
        choices: list[Choice]

    envelope = Completion(choices=[Choice(message=Message(role="assistant", content=json.dumps(DRINK)))])
    assert extract_drink_json(envelope) == DRINK


def test_nothing_recoverable_returns_none() -> None:
    assert extract_drink_json(chat_envelope("no drink today")) is None
    assert extract_drink_json({"choices": []}) is None
    assert extract_drink_json(None) is None
    assert extract_drink_json(42) is None


def test_parse_json_text_rejects_non_objects() -> None:
    assert parse_json_text("[1, 2, 3]") is None
    assert parse_json_text("} backwards {") is None
    assert parse_json_text('{"a": 1}') == {"a": 1}
