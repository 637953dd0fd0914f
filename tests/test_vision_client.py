"""
Tests for the OpenAI-backed vision completer.
"""

from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

from candlelens.core.exceptions import UpstreamServiceError
from candlelens.core.prompts import CHART_ANALYST_PROMPT
from candlelens.core.vision_client import OpenAIChartCompleter


def _response(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


class TestOpenAIChartCompleter:
    """Model-chain walking and error mapping."""

    def test_returns_stripped_content(self, png_bytes):
        client = MagicMock()
        client.chat.completions.create.return_value = _response("  Trend: Uptrend \n")
        completer = OpenAIChartCompleter(api_key=None, models=["gpt-4-turbo"], client=client)

        assert completer.complete_chart(png_bytes, "image/png") == "Trend: Uptrend"

    def test_request_shape(self, png_bytes):
        client = MagicMock()
        client.chat.completions.create.return_value = _response("ok")
        completer = OpenAIChartCompleter(api_key=None, models=["gpt-4-turbo"], max_tokens=321, client=client)

        completer.complete_chart(png_bytes, "image/png")

        kwargs = client.chat.completions.create.call_args.kwargs
        assert kwargs["model"] == "gpt-4-turbo"
        assert kwargs["max_tokens"] == 321
        system, user = kwargs["messages"]
        assert system == {"role": "system", "content": CHART_ANALYST_PROMPT}
        image_part = user["content"][1]
        assert image_part["type"] == "image_url"
        assert image_part["image_url"]["url"].startswith("data:image/png;base64,")

    def test_falls_back_to_next_model(self, png_bytes):
        client = MagicMock()
        client.chat.completions.create.side_effect = [RuntimeError("rate limited"), _response("second")]
        completer = OpenAIChartCompleter(api_key=None, models=["a", "b"], client=client)

        assert completer.complete_chart(png_bytes) == "second"
        models = [c.kwargs["model"] for c in client.chat.completions.create.call_args_list]
        assert models == ["a", "b"]

    def test_empty_answer_tries_next_model(self, png_bytes):
        client = MagicMock()
        client.chat.completions.create.side_effect = [_response(None), _response("filled")]
        completer = OpenAIChartCompleter(api_key=None, models=["a", "b"], client=client)

        assert completer.complete_chart(png_bytes) == "filled"

    def test_all_empty_returns_empty_string(self, png_bytes):
        client = MagicMock()
        client.chat.completions.create.return_value = _response("   ")
        completer = OpenAIChartCompleter(api_key=None, models=["a", "b"], client=client)

        assert completer.complete_chart(png_bytes) == ""

    def test_all_failures_raise(self, png_bytes):
        client = MagicMock()
        client.chat.completions.create.side_effect = RuntimeError("down")
        completer = OpenAIChartCompleter(api_key=None, models=["a", "b"], client=client)

        with pytest.raises(UpstreamServiceError, match="down"):
            completer.complete_chart(png_bytes)

    def test_missing_api_key(self, png_bytes):
        completer = OpenAIChartCompleter(api_key=None, models=["gpt-4-turbo"])

        with pytest.raises(UpstreamServiceError, match="not configured"):
            completer.complete_chart(png_bytes)

    def test_requires_a_model(self):
        with pytest.raises(ValueError):
            OpenAIChartCompleter(api_key="k", models=[])
