# candlelens/core/matchers.py
"""
Ordered regex strategies with first-success-wins evaluation.

Every extractor in the pipeline is a fixed tuple of ``Matcher`` objects. Each
matcher pairs a compiled pattern with a transform that turns the match into a
value; a transform returning ``None`` means "matched, but not usable", and the
next matcher is tried.
"""
import re
from dataclasses import dataclass
from typing import Any, Callable, Iterable, Optional


@dataclass(frozen=True)
class Matcher:
    name: str
    pattern: re.Pattern
    transform: Callable[[re.Match], Optional[Any]]

    def apply(self, text: str) -> Optional[Any]:
        match = self.pattern.search(text)
        if match is None:
            return None
        return self.transform(match)


@dataclass(frozen=True)
class MatchResult:
    value: Any
    matcher: str


def first_match(matchers: Iterable[Matcher], text: Optional[str]) -> Optional[MatchResult]:
    if not text:
        return None
    for matcher in matchers:
        value = matcher.apply(text)
        if value is not None:
            return MatchResult(value=value, matcher=matcher.name)
    return None
