"""
Shared fixtures for the test suite.
"""

import pytest

from candlelens.core.pair_memory import PairMemoryStore
from candlelens.core.pipeline import AnalysisPipeline


class FakeCompleter:
    """Stands in for the vision provider; returns canned text or raises."""

    def __init__(self, text="", error=None):
        self.text = text
        self.error = error
        self.calls = []

    def complete_chart(self, image, mime_type=None):
        self.calls.append((image, mime_type))
        if self.error is not None:
            raise self.error
        return self.text


@pytest.fixture
def memory():
    return PairMemoryStore()


@pytest.fixture
def pipeline(memory):
    return AnalysisPipeline(memory=memory)


@pytest.fixture
def completer():
    return FakeCompleter()


@pytest.fixture
def png_bytes():
    return b"\x89PNG\r\n\x1a\n" + b"0" * 32
