import json

from models import Outfit, WorkoutPlan
from response_parser import (
    DecodeFailure,
    Decoded,
    decode_structured,
    extract_json_block,
    split_outfit_reply,
)


def test_decode_structured_returns_model(outfit_payload):
    result = decode_structured(json.dumps(outfit_payload), Outfit)

    assert isinstance(result, Decoded)
    assert result.value.title == "Rainy Day Rust"
    assert len(result.value.items) == 2
    assert result.value.items[0].brand == "Cos"


def test_decode_structured_malformed_json_is_failure():
    result = decode_structured('{"title": "Half', Outfit)

    assert isinstance(result, DecodeFailure)
    assert result.raw == '{"title": "Half'


def test_decode_structured_missing_required_field_is_failure():
    reply = json.dumps({"focus_area": "Upper body", "goal": "Width", "warmup": [], "cooldown": []})

    result = decode_structured(reply, WorkoutPlan)

    assert isinstance(result, DecodeFailure)
    assert "validation error" in result.reason


def test_decode_structured_empty_text_is_failure():
    assert isinstance(decode_structured("", Outfit), DecodeFailure)
    assert isinstance(decode_structured(None, Outfit), DecodeFailure)


def test_extract_json_block_splits_prose_and_trailing_object():
    text = 'Here is a look for Friday.\n{"title": "Night Out", "items": []}'

    obj, leftover = extract_json_block(text)

    assert obj == {"title": "Night Out", "items": []}
    assert leftover == "Here is a look for Friday."


def test_extract_json_block_keeps_prose_after_object():
    text = 'Try this: {"a": {"b": 1}} Let me know what you think!'

    obj, leftover = extract_json_block(text)

    assert obj == {"a": {"b": 1}}
    assert leftover == "Try this:\n\nLet me know what you think!"


def test_extract_json_block_prefers_fenced_block():
    text = 'Some thoughts.\n```json\n{"title": "Fenced", "items": []}\n```\nEnjoy!'

    obj, leftover = extract_json_block(text)

    assert obj["title"] == "Fenced"
    assert "```" not in leftover
    assert leftover == "Some thoughts.\n\nEnjoy!"


def test_extract_json_block_truncated_returns_none_and_full_text():
    text = 'Almost there {"title": "Cut", "items": [{"name": "Sca'

    assert extract_json_block(text) == (None, text)


def test_extract_json_block_without_object():
    text = "What fabric do you prefer, linen or wool?"

    assert extract_json_block(text) == (None, text)


def test_split_outfit_reply_with_outfit(outfit_payload):
    reply = "This one is made for you.\n\n" + json.dumps(outfit_payload)

    text, outfit = split_outfit_reply(reply)

    assert text == "This one is made for you."
    assert outfit is not None
    assert outfit.title == outfit_payload["title"]
    assert [item.name for item in outfit.items] == ["Cropped Trench", "Wide Leg Trousers"]


def test_split_outfit_reply_requires_title_and_items():
    reply = 'Noted. {"title": "Only a title"}'

    text, outfit = split_outfit_reply(reply)

    assert outfit is None
    assert text == reply


def test_split_outfit_reply_invalid_items_is_plain_text():
    reply = 'Look: {"title": "Broken", "items": [{"name": "No brand or price"}]}'

    text, outfit = split_outfit_reply(reply)

    assert outfit is None
    assert text == reply


def test_split_outfit_reply_only_looks_at_first_object_start():
    reply = 'Use {your} instincts. {"title": "Later", "items": []}'

    text, outfit = split_outfit_reply(reply)

    assert outfit is None
    assert text == reply


def test_split_outfit_reply_plain_text():
    reply = "Is this for a wedding or the office?"

    assert split_outfit_reply(reply) == (reply, None)
