from fastapi import APIRouter
from fastapi import Depends
from fastapi import Response

from readme_elements.api.params import get_settings
from readme_elements.api.schemas.version import HealthResponse
from readme_elements.api.schemas.version import VersionResponse
from readme_elements.services.version_service import get_version_info
from readme_elements.settings import Settings


router = APIRouter()


@router.get("/")
async def root() -> dict[str, str]:
    """Return a basic service greeting."""

    return {"message": "Hello World"}


@router.get("/health")
def health() -> Response:
    """Bare liveness probe returning an empty 200."""

    return Response(status_code=200)


@router.get("/health/live")
def health_live() -> HealthResponse:
    """Return liveness probe response for health checks."""

    return HealthResponse(status="ok")


@router.get("/version")
def get_version(app_settings: Settings = Depends(get_settings)) -> VersionResponse:
    """Return the running version, commit revision and matching tags."""

    return VersionResponse(**get_version_info(app_settings))
