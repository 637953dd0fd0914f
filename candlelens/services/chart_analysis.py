# candlelens/services/chart_analysis.py
from __future__ import annotations
from functools import lru_cache
from typing import Optional

from candlelens.core.config import get_settings
from candlelens.core.exceptions import ValidationError
from candlelens.core.pair_memory import PairMemoryStore
from candlelens.core.payload import detect_mime, to_data_url
from candlelens.core.pipeline import AnalysisPipeline
from candlelens.core.vision_client import ChartCompleter, OpenAIChartCompleter
from candlelens.schemas.chart_analysis import NormalizedRecord
from candlelens.utils.logger import get_logger

logger = get_logger(__name__)


class ChartAnalysisService:
    def __init__(
        self,
        completer: ChartCompleter,
        pipeline: Optional[AnalysisPipeline] = None,
        max_image_bytes: int = 10 * 1024 * 1024,
    ):
        self.completer = completer
        self.pipeline = pipeline or AnalysisPipeline()
        self.max_image_bytes = max_image_bytes

    def _validate(self, image: bytes, content_type: Optional[str]) -> str:
        if not image:
            raise ValidationError("Image file is empty")
        if content_type and not content_type.startswith("image/"):
            raise ValidationError("File must be an image")
        if len(image) > self.max_image_bytes:
            raise ValidationError(f"Image exceeds the {self.max_image_bytes} byte limit")
        return content_type or detect_mime(image)

    def analyze(
        self,
        image: bytes,
        content_type: Optional[str] = None,
        session: Optional[str] = None,
    ) -> NormalizedRecord:
        """
        Send the chart to the vision provider and normalize its answer.

        Provider failures propagate as UpstreamServiceError; an empty answer is
        normalized into the placeholder record.
        """
        mime_type = self._validate(image, content_type)

        raw_text = self.completer.complete_chart(image, mime_type)
        record = self.pipeline.run(raw_text, to_data_url(image, mime_type), session)

        logger.info(
            f"Chart analyzed: pair={record.pair} timeframe={record.timeframe} "
            f"confidence={record.confidence}"
        )
        return record


@lru_cache
def get_chart_analysis_service() -> ChartAnalysisService:
    """Process-wide service; its pipeline owns the pair memory for all sessions."""
    settings = get_settings()
    completer = OpenAIChartCompleter(
        api_key=settings.openai_api_key,
        models=settings.model_chain,
        max_tokens=settings.openai_max_tokens,
        timeout=settings.openai_timeout_seconds,
    )
    pipeline = AnalysisPipeline(
        memory=PairMemoryStore(),
        empty_message=settings.empty_analysis_message,
    )
    return ChartAnalysisService(completer, pipeline, max_image_bytes=settings.max_image_bytes)
