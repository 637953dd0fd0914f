# candlelens/core/pair.py
import re
from typing import Optional, Tuple

from candlelens.core.matchers import Matcher, first_match
from candlelens.utils.logger import get_logger

logger = get_logger(__name__)


def canonical_pair(raw: str) -> Optional[str]:
    """
    "EURUSD" -> "EUR/USD"; "GBP/JPY" stays as is.
    Anything else is not a pair.
    """
    value = (raw or "").strip().upper()
    if "/" in value:
        return value if re.fullmatch(r"[A-Z]{3}/[A-Z]{3}", value) else None
    if re.fullmatch(r"[A-Z]{6}", value):
        return f"{value[:3]}/{value[3:]}"
    return None


# Case-sensitive: only capitalized codes count as pairs.
PAIR_MATCHERS: Tuple[Matcher, ...] = (
    Matcher("slash", re.compile(r"\b[A-Z]{3}/[A-Z]{3}\b"), lambda m: canonical_pair(m.group(0))),
    Matcher("bare", re.compile(r"\b[A-Z]{6}\b"), lambda m: canonical_pair(m.group(0))),
)


def extract_pair(text: str) -> Optional[str]:
    """Canonical ``XXX/YYY`` pair found in ``text``, or None."""
    result = first_match(PAIR_MATCHERS, text)
    if result is None:
        return None
    logger.debug(f"Pair matched by '{result.matcher}': {result.value}")
    return result.value

