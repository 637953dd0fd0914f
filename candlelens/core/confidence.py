# candlelens/core/confidence.py
import re
from typing import Optional, Tuple

from candlelens.core.matchers import Matcher, first_match
from candlelens.utils.logger import get_logger

logger = get_logger(__name__)


def _to_int(match: re.Match) -> int:
    return int(match.group(1))


# "Confidence Level: 91%", then the markdown form "**Confidence Level:** 73%" / "... **73%**".
# Values are returned as written; nothing outside 0-100 is clamped or dropped.
CONFIDENCE_MATCHERS: Tuple[Matcher, ...] = (
    Matcher(
        "main",
        re.compile(r"confidence\s*level[:\s]*(\d{1,3})%", re.IGNORECASE),
        _to_int,
    ),
    Matcher(
        "emphasis",
        re.compile(r"confidence\s*level[\s:*_]*(\d{1,3})\s*%[*_]*", re.IGNORECASE),
        _to_int,
    ),
)


def extract_confidence(text: str) -> Optional[int]:
    result = first_match(CONFIDENCE_MATCHERS, text)
    if result is None:
        return None
    logger.debug(f"Confidence matched by '{result.matcher}': {result.value}")
    return result.value
