from fastapi import APIRouter

from candlelens.api.endpoints import health
from candlelens.api.endpoints import chart_analysis

router = APIRouter()
router.include_router(health.router, tags=["_meta"])
router.include_router(chart_analysis.router, tags=["chart"])
