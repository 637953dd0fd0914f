"""
Tests for the normalization pipeline.
"""

import pytest
from pydantic import ValidationError as PydanticValidationError

from candlelens.core.config import DEFAULT_EMPTY_ANALYSIS_MESSAGE
from candlelens.core.pipeline import AnalysisPipeline, normalize_analysis

SAMPLE = "1. Pattern: bullish\n• RSI divergence\n• RSI divergence\nConfidence Level: 91%\nEURUSD"


class TestNormalizeAnalysis:
    """The pure core."""

    def test_end_to_end_sample(self):
        record, extracted = normalize_analysis(SAMPLE, None, None)

        assert record.lines == [
            "Pattern: bullish",
            "RSI divergence",
            "Confidence Level: 91%",
            "EURUSD",
        ]
        assert record.pair == "EUR/USD"
        assert record.confidence == 91
        assert record.timeframe is None
        assert extracted == "EUR/USD"

    def test_prior_pair_used_when_text_has_none(self):
        record, extracted = normalize_analysis("Trend: Uptrend", None, "GBP/JPY")

        assert record.pair == "GBP/JPY"
        assert extracted is None

    def test_fresh_pair_beats_prior(self):
        record, extracted = normalize_analysis("Pair GBP/JPY", None, "EUR/USD")

        assert record.pair == "GBP/JPY"
        assert extracted == "GBP/JPY"

    @pytest.mark.parametrize("raw", [None, "", "   \n\t  "])
    def test_missing_input_yields_placeholder(self, raw):
        record, extracted = normalize_analysis(raw, "payload m15", "EUR/USD")

        assert record.text == DEFAULT_EMPTY_ANALYSIS_MESSAGE
        assert record.pair is None
        assert record.timeframe is None
        assert record.confidence is None
        assert extracted is None

    def test_custom_placeholder(self):
        record, _ = normalize_analysis("", empty_message="nothing to show")
        assert record.text == "nothing to show"

    def test_text_that_cleans_to_nothing(self):
        record, _ = normalize_analysis("• \n•")
        assert record.text == DEFAULT_EMPTY_ANALYSIS_MESSAGE

    def test_image_timeframe_becomes_first_line(self):
        record, _ = normalize_analysis("Trend: Uptrend\nTrend: Uptrend", "data:image/png;base64,AA m15 BB")

        assert record.timeframe == "15M"
        assert record.lines == ["Timeframe: 15M", "Trend: Uptrend"]

    def test_label_in_text_suppresses_image_tier(self):
        record, _ = normalize_analysis("**Trend:** Up\nTimeframe: 4H", "data:image/png;base64,AA m15 BB")

        assert record.timeframe == "4H"
        assert record.lines == ["**Trend:** Up", "Timeframe: 4H"]

    def test_bold_confidence(self):
        record, _ = normalize_analysis("📈 **Trading Recommendation**\n**Confidence Level:** 73%")
        assert record.confidence == 73

    def test_record_is_immutable(self):
        record, _ = normalize_analysis(SAMPLE)
        with pytest.raises(PydanticValidationError):
            record.pair = "GBP/JPY"

    def test_serialized_shape(self):
        record, _ = normalize_analysis(SAMPLE)
        assert set(record.model_dump()) == {"text", "pair", "timeframe", "confidence"}


class TestAnalysisPipeline:
    """Pipeline with sticky pair memory."""

    def test_sticky_pair_across_requests(self, pipeline):
        first = pipeline.run(SAMPLE)
        second = pipeline.run("Pattern: bearish flag\nConfidence Level: 40%")

        assert first.pair == "EUR/USD"
        assert second.pair == "EUR/USD"
        assert second.confidence == 40

    def test_no_prior_pair_means_none(self, pipeline):
        assert pipeline.run("Pattern: bearish flag").pair is None

    def test_failed_extraction_never_clears_memory(self, pipeline, memory):
        pipeline.run("Pair: GBP/JPY")
        pipeline.run("no instrument here")
        pipeline.run("")

        assert memory.get() == "GBP/JPY"

    def test_new_pair_overwrites_memory(self, pipeline, memory):
        pipeline.run("Pair: GBP/JPY")
        record = pipeline.run("Pair: AUDCAD")

        assert record.pair == "AUD/CAD"
        assert memory.get() == "AUD/CAD"

    def test_sessions_do_not_share_pairs(self, pipeline):
        pipeline.run("Pair: GBP/JPY", session="alice")

        assert pipeline.run("nothing", session="bob").pair is None
        assert pipeline.run("nothing", session="alice").pair == "GBP/JPY"

    def test_default_memory_is_created(self):
        pipeline = AnalysisPipeline()
        pipeline.run("EURUSD")
        assert pipeline.memory.get() == "EUR/USD"

    def test_empty_message_passed_through(self, memory):
        pipeline = AnalysisPipeline(memory=memory, empty_message="retry please")
        assert pipeline.run(None).text == "retry please"
