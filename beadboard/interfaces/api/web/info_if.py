"""Health endpoint."""

from fastapi import APIRouter, Depends

from beadboard.interfaces.api.types.info_types import HealthResponse
from beadboard.interfaces.api.web.dependencies import get_info_service
from beadboard.services.infrastructure.info_svc import InfoService

router = APIRouter(prefix="", tags=["Info"])


@router.get("/health")
async def health(info_service: InfoService = Depends(get_info_service)) -> HealthResponse:
    """Liveness plus the town root this server aggregates."""
    return HealthResponse.from_dto(info_service.get_health())
