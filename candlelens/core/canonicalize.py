# candlelens/core/canonicalize.py
import re

_ENUMERATION_RE = re.compile(r"^\d+\.\s*", re.MULTILINE)
_BULLET_RE = re.compile(r"•\s*")
_BLANK_RUN_RE = re.compile(r"\n{2,}")


def _clean_once(text: str) -> str:
    cleaned = _ENUMERATION_RE.sub("", text)
    cleaned = _BULLET_RE.sub("", cleaned)
    cleaned = _BLANK_RUN_RE.sub("\n", cleaned)
    cleaned = cleaned.strip()

    lines = (line.strip() for line in cleaned.split("\n"))
    return "\n".join(dict.fromkeys(lines))


def canonicalize(text: str) -> str:
    """
    Clean model output into a stable list of unique lines.

    Strips "1. " enumerations and "•" bullets, collapses blank-line runs,
    trims every line and keeps only the first occurrence of each line.

    A single pass can expose new markers (an indented "  2. item" is only
    trimmed at the end), so passes repeat until the text stops changing.
    Every step only deletes characters, which bounds the loop.
    """
    current = text
    while True:
        cleaned = _clean_once(current)
        if cleaned == current:
            return cleaned
        current = cleaned
