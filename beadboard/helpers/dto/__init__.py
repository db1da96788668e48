"""
Domain-specific DTOs (Data Transfer Objects) used across multiple layers.

Domain-specific DTOs live in helpers/dto/<domain>_dto.py and form cross-layer contracts
within that domain (interfaces -> services -> components).

Rules for DTO modules:
- Import only stdlib and typing (no beadboard.* imports)
- Contain ONLY dataclass/type definitions, constants and simple type aliases
- No I/O, no business logic
- Pure data structures with optional simple properties
"""

from .board_config_dto import (
    DEFAULT_HOST,
    DEFAULT_PORT,
    DEFAULT_REFRESH_INTERVAL_MS,
    BoardConfig,
    BoardConfigUpdate,
    BoardFilters,
    ServerSettings,
)
from .info_dto import HealthResult
from .routing_dto import (
    BEADS_DIR_NAME,
    HQ_PREFIX,
    MARKER_FILE_NAME,
    ROUTES_FILE_NAME,
    TOWN_PATH,
    RigDirectory,
    Route,
)

__all__ = [
    "BEADS_DIR_NAME",
    "DEFAULT_HOST",
    "DEFAULT_PORT",
    "DEFAULT_REFRESH_INTERVAL_MS",
    "HQ_PREFIX",
    "MARKER_FILE_NAME",
    "ROUTES_FILE_NAME",
    "TOWN_PATH",
    "BoardConfig",
    "BoardConfigUpdate",
    "BoardFilters",
    "HealthResult",
    "RigDirectory",
    "Route",
    "ServerSettings",
]
