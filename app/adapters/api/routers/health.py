# app/adapters/api/routers/health.py
from fastapi import APIRouter

from app.shared.config import settings

router = APIRouter(prefix="/health", tags=["Health"])


@router.get("", summary="Liveness probe")
def health() -> dict:
    """The engine holds no connections, so being up means being ready."""
    return {"status": "ok", "app": settings.APP_NAME, "env": settings.APP_ENV.value}
