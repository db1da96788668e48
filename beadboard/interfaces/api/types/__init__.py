"""
API types package.

Pydantic request/response models. DTOs from helpers/dto are converted at
this boundary with from_dto()/to_dto().
"""

from .config_types import ConfigResponse, ConfigUpdateRequest, FiltersModel, ServerModel
from .info_types import HealthResponse

__all__ = [
    "ConfigResponse",
    "ConfigUpdateRequest",
    "FiltersModel",
    "HealthResponse",
    "ServerModel",
]
