# candlelens/api/endpoints/chart_analysis.py
from fastapi import APIRouter, Depends, File, Request, UploadFile
from fastapi.responses import PlainTextResponse
from starlette.concurrency import run_in_threadpool

from candlelens.core.config import Settings, get_settings
from candlelens.schemas.chart_analysis import NormalizedRecord
from candlelens.services.chart_analysis import ChartAnalysisService, get_chart_analysis_service
from candlelens.utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix="", tags=["chart"])


@router.post("/analyze", response_model=NormalizedRecord)
async def analyze_chart(
    request: Request,
    image: UploadFile = File(...),
    service: ChartAnalysisService = Depends(get_chart_analysis_service),
    settings: Settings = Depends(get_settings),
):
    """
    Upload a chart screenshot; returns the normalized analysis:
    text, pair, timeframe, confidence.
    """
    logger.info(f"Received request: {request.method} {request.url.path}")
    raw = await image.read()
    session = request.headers.get(settings.session_header)

    # Provider call blocks; keep it off the event loop.
    return await run_in_threadpool(service.analyze, raw, image.content_type, session)


@router.get("/analyze", response_class=PlainTextResponse, status_code=405)
def analyze_wrong_method():
    return "❌ Use POST method instead of GET"
