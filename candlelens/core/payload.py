# candlelens/core/payload.py
import base64
from typing import Optional, Union

ImagePayload = Union[bytes, bytearray, memoryview, str]


def detect_mime(b: bytes) -> str:
    if len(b) >= 2 and b[0] == 0xFF and b[1] == 0xD8:
        return "image/jpeg"
    if len(b) >= 8 and b[:8] == b"\x89PNG\r\n\x1a\n":
        return "image/png"
    if len(b) >= 12 and b[:4] == b"RIFF" and b[8:12] == b"WEBP":
        return "image/webp"
    return "image/jpeg"


def to_data_url(image: bytes, mime_type: Optional[str] = None) -> str:
    """Encode raw image bytes as a ``data:`` URL (the form sent to the vision provider)."""
    mime = mime_type or detect_mime(image)
    return f"data:{mime};base64,{base64.b64encode(image).decode('utf-8')}"


def payload_text(image: Optional[ImagePayload]) -> str:
    """
    Textual encoding of an image payload.

    Strings are taken as already encoded; binary buffers become a base64 data URL.
    The payload is never decoded as pixels.
    """
    if image is None:
        return ""
    if isinstance(image, str):
        return image
    return to_data_url(bytes(image))
