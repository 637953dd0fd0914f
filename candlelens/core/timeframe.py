# candlelens/core/timeframe.py
"""
Timeframe extraction.

Three tiers, in priority order:

1. The analysis already carries a ``Timeframe:`` label -> nothing is injected.
2. Otherwise the image payload's textual encoding is scanned for a platform
   token (``m15``, ``1h``, ``w1`` ...). A hit is mapped to its canonical code and
   prepended to the text as ``Timeframe: <code>``.
3. The (possibly augmented) text is scanned with ``TEXT_MATCHERS``. A hit there
   supersedes whatever tier 2 produced.
"""
import re
from typing import Dict, Optional, Tuple

from candlelens.core.matchers import Matcher, first_match
from candlelens.core.payload import ImagePayload, payload_text
from candlelens.core.units import format_timeframe
from candlelens.utils.logger import get_logger

logger = get_logger(__name__)

NOT_IDENTIFIED = "Not Identified"
LABEL = "timeframe:"

IMAGE_TOKEN_RE = re.compile(
    r"\bm(?:1|5|10|15|20|30)\b|\b1h\b|\b4h\b|\b1d\b|\bw1\b|\bmn\b",
    re.IGNORECASE,
)

IMAGE_TOKEN_MAP: Dict[str, str] = {
    "m1": "1M", "m5": "5M", "m10": "10M", "m15": "15M", "m20": "20M", "m30": "30M",
    "1h": "1H", "4h": "4H", "1d": "1D", "w1": "1W", "mn": "1MO",
}

_UNITS = r"(m|h|d|w|mo|min|hr|hour|day|week|month)"

TEXT_MATCHERS: Tuple[Matcher, ...] = (
    Matcher(
        "label",
        re.compile(r"\bTimeframe:\s*(\d{1,2})" + _UNITS + r"\b", re.IGNORECASE),
        lambda m: format_timeframe(m.group(1), m.group(2)),
    ),
    Matcher(
        "compact",
        re.compile(r"\b([mhdw])(\d{1,2})\b", re.IGNORECASE),
        lambda m: format_timeframe(m.group(2), m.group(1)),
    ),
    Matcher(
        "loose",
        re.compile(r"\b(\d{1,2})" + _UNITS + r"\b", re.IGNORECASE),
        lambda m: format_timeframe(m.group(1), m.group(2)),
    ),
)


def has_timeframe_label(text: str) -> bool:
    return LABEL in (text or "").lower()


def timeframe_from_image(image: Optional[ImagePayload]) -> Optional[str]:
    """Canonical timeframe for the first platform token found in the payload, if any."""
    match = IMAGE_TOKEN_RE.search(payload_text(image))
    if not match:
        return None
    return IMAGE_TOKEN_MAP.get(match.group(0).lower(), NOT_IDENTIFIED)


def timeframe_from_text(text: str) -> Optional[str]:
    result = first_match(TEXT_MATCHERS, text)
    if result is None:
        return None
    logger.debug(f"Timeframe matched by '{result.matcher}': {result.value}")
    return result.value


def extract_timeframe(text: str, image: Optional[ImagePayload] = None) -> Tuple[Optional[str], str]:
    """
    Returns ``(timeframe, working_text)``.

    ``working_text`` is ``text`` with a synthesized ``Timeframe:`` first line when
    the value had to come from the image payload; otherwise ``text`` unchanged.
    """
    timeframe = None
    if not has_timeframe_label(text):
        timeframe = timeframe_from_image(image)
        if timeframe:
            logger.debug(f"Timeframe taken from image payload: {timeframe}")
            text = f"Timeframe: {timeframe}\n{text}"

    return timeframe_from_text(text) or timeframe, text
