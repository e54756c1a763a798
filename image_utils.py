import base64
import binascii
import re
from typing import NamedTuple, Tuple

DEFAULT_MIME_TYPE = "image/jpeg"

_DATA_URL_RE = re.compile(r"^data:(?P<mime>[\w.+-]+/[\w.+-]+)?(?:;[^,]*)?,(?P<data>.*)$", re.DOTALL)


class ImagePayload(NamedTuple):
    mime_type: str
    data: bytes


def split_data_url(payload: str) -> Tuple[str, str]:
    """
    Split a captured image into (mime_type, base64 data).

    Accepts either a bare base64 string or a data URL such as
    ``data:image/png;base64,iVBOR...``. The prefix never reaches the model.
    """
    payload = payload.strip()
    match = _DATA_URL_RE.match(payload)
    if match:
        return match.group("mime") or DEFAULT_MIME_TYPE, match.group("data").strip()
    return DEFAULT_MIME_TYPE, payload


def decode_image_payload(payload: str) -> ImagePayload:
    """
    Decode a client image payload into raw bytes.

    Raises:
        ValueError: if the payload is empty or not valid base64
    """
    mime_type, data = split_data_url(payload)
    # Canvas exports can carry whitespace or line breaks
    data = re.sub(r"\s+", "", data)
    if not data:
        raise ValueError("Image payload is empty")
    try:
        raw = base64.b64decode(data, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ValueError(f"Image payload is not valid base64: {e}") from e
    return ImagePayload(mime_type=mime_type, data=raw)
