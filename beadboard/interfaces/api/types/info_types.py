"""Info API types - Pydantic models for the health endpoint."""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, Field

if TYPE_CHECKING:
    from beadboard.helpers.dto.info_dto import HealthResult


class HealthResponse(BaseModel):
    """Response for health endpoint."""

    status: str = Field(..., description="Always 'ok' when the server answers")
    town: str = Field(..., description="Town root directory")
    engine: str = Field(..., description="Server implementation")
    version: str = Field(..., description="Application version")
    sources: int = Field(..., description="Number of distinct bead locations")

    @classmethod
    def from_dto(cls, dto: HealthResult) -> HealthResponse:
        """Convert HealthResult DTO to Pydantic response model."""
        return cls(
            status=dto.status,
            town=dto.town,
            engine=dto.engine,
            version=dto.version,
            sources=dto.sources,
        )
