# candlelens/core/pipeline.py
"""
Analysis normalization pipeline.

``normalize_analysis`` is the pure core: raw model text + image payload + the
previously remembered pair in; record + freshly extracted pair out.
``AnalysisPipeline`` wraps it with a ``PairMemoryStore`` owned by the hosting
service.
"""
from typing import Optional, Tuple

from candlelens.core.canonicalize import canonicalize
from candlelens.core.config import DEFAULT_EMPTY_ANALYSIS_MESSAGE
from candlelens.core.confidence import extract_confidence
from candlelens.core.pair import extract_pair
from candlelens.core.pair_memory import DEFAULT_SESSION, PairMemoryStore
from candlelens.core.payload import ImagePayload
from candlelens.core.timeframe import extract_timeframe
from candlelens.schemas.chart_analysis import NormalizedRecord
from candlelens.utils.logger import get_logger, log_execution_time

logger = get_logger(__name__)


def normalize_analysis(
    raw_text: Optional[str],
    image: Optional[ImagePayload] = None,
    prior_pair: Optional[str] = None,
    *,
    empty_message: str = DEFAULT_EMPTY_ANALYSIS_MESSAGE,
) -> Tuple[NormalizedRecord, Optional[str]]:
    """
    Returns ``(record, extracted_pair)``.

    ``extracted_pair`` is None when this text held no pair; the record then
    carries ``prior_pair`` instead. Empty or missing text yields the
    placeholder message with every structured field empty.
    """
    analysis = (raw_text or "").strip()
    if not analysis:
        return NormalizedRecord(text=empty_message), None

    timeframe, analysis = extract_timeframe(analysis, image)
    text = canonicalize(analysis)
    extracted = extract_pair(text)
    confidence = extract_confidence(text)

    record = NormalizedRecord(
        text=text or empty_message,
        pair=extracted or prior_pair,
        timeframe=timeframe,
        confidence=confidence,
    )
    return record, extracted


class AnalysisPipeline:
    def __init__(
        self,
        memory: Optional[PairMemoryStore] = None,
        empty_message: str = DEFAULT_EMPTY_ANALYSIS_MESSAGE,
    ):
        self.memory = memory if memory is not None else PairMemoryStore()
        self.empty_message = empty_message

    @log_execution_time
    def run(
        self,
        raw_text: Optional[str],
        image: Optional[ImagePayload] = None,
        session: Optional[str] = DEFAULT_SESSION,
    ) -> NormalizedRecord:
        logger.debug(f"Raw analysis for session '{session}':\n{raw_text}")

        record, extracted = normalize_analysis(
            raw_text, image, self.memory.get(session), empty_message=self.empty_message
        )
        if extracted:
            self.memory.remember(session, extracted)

        logger.debug(f"Normalized record: {record.model_dump()}")
        return record
