from fastapi import APIRouter, Depends

from command_center.api.deps import get_settings
from command_center.core.config import Settings

router = APIRouter(tags=["health"])


@router.api_route("/", methods=["GET", "HEAD"])
@router.api_route("/health", methods=["GET", "HEAD"])
def health(settings: Settings = Depends(get_settings)):
    return {"status": "ok", "service": settings.APP_NAME, "version": settings.APP_VERSION}
