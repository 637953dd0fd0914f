from fastapi import APIRouter, Depends

from candlelens.core.config import Settings, get_settings

router = APIRouter()


@router.get("/health")
def health(settings: Settings = Depends(get_settings)):
    return {"ok": True, "version": settings.app_version}
