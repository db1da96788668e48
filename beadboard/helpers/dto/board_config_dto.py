"""
Board config DTOs.

The user-editable dashboard configuration (filters, listen address, refresh
interval) and the partial update applied to it.

Rules:
- Import only stdlib and typing (no beadboard.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

DEFAULT_PORT = 9292
DEFAULT_HOST = "localhost"
DEFAULT_REFRESH_INTERVAL_MS = 30000


@dataclass(frozen=True)
class BoardFilters:
    """Presentation filters. Every flag defaults to hiding the noise."""

    hide_system_beads: bool = True
    hide_events: bool = True
    hide_rig_identity: bool = True
    hide_maintenance_wisps: bool = True
    hide_hq_beads: bool = True

    def to_dict(self) -> dict[str, bool]:
        return {
            "hideSystemBeads": self.hide_system_beads,
            "hideEvents": self.hide_events,
            "hideRigIdentity": self.hide_rig_identity,
            "hideMaintenanceWisps": self.hide_maintenance_wisps,
            "hideHQBeads": self.hide_hq_beads,
        }


@dataclass(frozen=True)
class ServerSettings:
    """Listen address for the dashboard server."""

    port: int = DEFAULT_PORT
    host: str = DEFAULT_HOST

    def to_dict(self) -> dict[str, Any]:
        return {"port": self.port, "host": self.host}


@dataclass(frozen=True)
class BoardConfig:
    """Complete board configuration as stored on disk and served over HTTP."""

    filters: BoardFilters = field(default_factory=BoardFilters)
    server: ServerSettings = field(default_factory=ServerSettings)
    refresh_interval: int = DEFAULT_REFRESH_INTERVAL_MS

    def to_dict(self) -> dict[str, Any]:
        """Wire shape: {filters: {...}, server: {port, host}, refreshInterval}."""
        return {
            "filters": self.filters.to_dict(),
            "server": self.server.to_dict(),
            "refreshInterval": self.refresh_interval,
        }


@dataclass(frozen=True)
class BoardConfigUpdate:
    """
    Partial update to a BoardConfig.

    Zero/empty scalars mean "not supplied". filters=None means the payload
    had no filters object; any BoardFilters value replaces all five flags.
    """

    filters: BoardFilters | None = None
    port: int = 0
    host: str = ""
    refresh_interval: int = 0
