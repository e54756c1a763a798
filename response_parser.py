"""
Decoding of Gemini replies into typed values.

Structured replies are validated against the pydantic models and returned as a
tagged result instead of raising. Chat replies may mix prose with a trailing
outfit block; ``extract_json_block`` pulls that block out.
"""
import json
import re
from dataclasses import dataclass
from typing import Any, Generic, Optional, Tuple, Type, TypeVar, Union

from pydantic import BaseModel, ValidationError

from models import Outfit

T = TypeVar("T", bound=BaseModel)

OUTFIT_KEYS = ("title", "items")

_FENCED_JSON_RE = re.compile(r"```(?:json)?\s*(\{.*?\})\s*```", re.DOTALL)
_decoder = json.JSONDecoder()


@dataclass(frozen=True)
class Decoded(Generic[T]):
    value: T


@dataclass(frozen=True)
class DecodeFailure:
    reason: str
    raw: str


DecodeResult = Union[Decoded[T], DecodeFailure]


def decode_structured(text: Optional[str], model: Type[T]) -> "DecodeResult[T]":
    """Validate a JSON reply against ``model``."""
    if not text or not text.strip():
        return DecodeFailure(reason="empty response", raw=text or "")
    try:
        return Decoded(model.model_validate_json(text))
    except ValidationError as e:
        return DecodeFailure(reason=f"{e.error_count()} validation error(s): {e.errors()[0]['msg']}", raw=text)


def _join_prose(before: str, after: str) -> str:
    before, after = before.strip(), after.strip()
    if before and after:
        return f"{before}\n\n{after}"
    return before or after


def extract_json_block(text: str) -> Tuple[Optional[Any], str]:
    """
    Pull one JSON object out of free text.

    A fenced ```json block wins when present. Otherwise decoding starts at the
    first ``{`` and reads exactly one JSON value, so prose after the block is
    kept. Returns ``(obj, leftover_text)``, or ``(None, text)`` when nothing
    parses (for example a truncated block).
    """
    fenced = _FENCED_JSON_RE.search(text)
    if fenced:
        try:
            obj = json.loads(fenced.group(1))
            return obj, _join_prose(text[:fenced.start()], text[fenced.end():])
        except json.JSONDecodeError:
            pass

    start = text.find("{")
    if start == -1:
        return None, text
    try:
        obj, end = _decoder.raw_decode(text, start)
    except json.JSONDecodeError:
        return None, text
    before = text[:start]
    after = text[end:]
    # Drop the fence remnants of an unterminated or bare ``` block
    before = re.sub(r"```(?:json)?\s*$", "", before)
    after = re.sub(r"^\s*```", "", after)
    return obj, _join_prose(before, after)


def split_outfit_reply(reply: str) -> Tuple[str, Optional[Outfit]]:
    """
    Split a chat reply into (prose, outfit).

    The block counts as an outfit only if it is an object carrying both
    ``title`` and ``items`` and validates as an Outfit. Anything else leaves
    the reply untouched.
    """
    obj, leftover = extract_json_block(reply)
    if not isinstance(obj, dict) or not all(key in obj for key in OUTFIT_KEYS):
        return reply, None
    try:
        outfit = Outfit.model_validate(obj)
    except ValidationError:
        return reply, None
    return leftover, outfit
