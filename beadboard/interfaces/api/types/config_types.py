"""Config API types - Pydantic models for the board config endpoints.

External API contracts for /api/config. These models are thin adapters
around the BoardConfig DTOs in helpers/dto/board_config_dto.py; services
never import pydantic.

Wire shape (camelCase on the wire, snake_case in Python):
    {"filters": {...5 booleans...}, "server": {"port": int, "host": str}, "refreshInterval": int}
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel, ConfigDict, Field

from beadboard.helpers.dto.board_config_dto import BoardConfigUpdate, BoardFilters

if TYPE_CHECKING:
    from beadboard.helpers.dto.board_config_dto import BoardConfig

# ──────────────────────────────────────────────────────────────────────
# Shared Models
# ──────────────────────────────────────────────────────────────────────


class FiltersModel(BaseModel):
    """The five presentation filter flags.

    In a request, a flag omitted from a supplied filters object counts as
    false: the whole group is replaced, never merged flag by flag.
    """

    model_config = ConfigDict(populate_by_name=True)

    hide_system_beads: bool = Field(False, alias="hideSystemBeads")
    hide_events: bool = Field(False, alias="hideEvents")
    hide_rig_identity: bool = Field(False, alias="hideRigIdentity")
    hide_maintenance_wisps: bool = Field(False, alias="hideMaintenanceWisps")
    hide_hq_beads: bool = Field(False, alias="hideHQBeads")

    @classmethod
    def from_dto(cls, dto: BoardFilters) -> FiltersModel:
        return cls(
            hide_system_beads=dto.hide_system_beads,
            hide_events=dto.hide_events,
            hide_rig_identity=dto.hide_rig_identity,
            hide_maintenance_wisps=dto.hide_maintenance_wisps,
            hide_hq_beads=dto.hide_hq_beads,
        )

    def to_dto(self) -> BoardFilters:
        return BoardFilters(
            hide_system_beads=self.hide_system_beads,
            hide_events=self.hide_events,
            hide_rig_identity=self.hide_rig_identity,
            hide_maintenance_wisps=self.hide_maintenance_wisps,
            hide_hq_beads=self.hide_hq_beads,
        )


class ServerModel(BaseModel):
    """Listen address. 0 / "" mean "leave unchanged" in an update."""

    port: int = Field(0, ge=0, le=65535, description="Listen port")
    host: str = Field("", description="Listen host")


# ──────────────────────────────────────────────────────────────────────
# Response Models
# ──────────────────────────────────────────────────────────────────────


class ConfigResponse(BaseModel):
    """Full board config."""

    model_config = ConfigDict(populate_by_name=True)

    filters: FiltersModel
    server: ServerModel
    refresh_interval: int = Field(..., alias="refreshInterval", description="Refresh interval (ms)")

    @classmethod
    def from_dto(cls, dto: BoardConfig) -> ConfigResponse:
        """Convert BoardConfig DTO to Pydantic response model."""
        return cls(
            filters=FiltersModel.from_dto(dto.filters),
            server=ServerModel(port=dto.server.port, host=dto.server.host),
            refresh_interval=dto.refresh_interval,
        )


# ──────────────────────────────────────────────────────────────────────
# Request Models
# ──────────────────────────────────────────────────────────────────────


class ConfigUpdateRequest(BaseModel):
    """Partial board config update; every section is optional."""

    model_config = ConfigDict(populate_by_name=True)

    filters: FiltersModel | None = Field(None, description="Replaces all five flags when present")
    server: ServerModel | None = Field(None, description="Non-zero/non-empty fields overwrite")
    refresh_interval: int = Field(0, ge=0, alias="refreshInterval", description="Refresh interval (ms); 0 = keep")

    def to_dto(self) -> BoardConfigUpdate:
        """Convert to the service-layer update DTO."""
        server = self.server or ServerModel()
        return BoardConfigUpdate(
            filters=self.filters.to_dto() if self.filters is not None else None,
            port=server.port,
            host=server.host,
            refresh_interval=self.refresh_interval,
        )
