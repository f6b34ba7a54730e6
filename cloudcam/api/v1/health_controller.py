# External package imports
from fastapi import APIRouter

# Local application imports
from ...application.dto.health_dto import HealthResponse
from ...utils.datetime_utils import now_iso


router = APIRouter(tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health() -> HealthResponse:
    """Liveness probe. Never touches the device cloud."""
    return HealthResponse(status="ok", timestamp=now_iso())
