# app/api/v1/routes_health.py
from fastapi import APIRouter
from app.core.config import settings

router = APIRouter(
    prefix="/health",
    tags=["health"],
)


@router.get("/", summary="Health check")
async def health_check():
    """
    Liveness check. Does not call Nominatim or Overpass, only reports
    which endpoints the planner is configured to use.
    """
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "collaborators": {
            "geocoding": settings.NOMINATIM_URL,
            "poi": settings.OVERPASS_URL,
        },
    }
