"""
Services package.
"""

from .config_svc import INTERNAL_ENGINE, ConfigService
from .domain import BeadsService, SourceRegistry, TownService
from .infrastructure import FilterConfigStore, InfoService

__all__ = [
    "INTERNAL_ENGINE",
    "BeadsService",
    "ConfigService",
    "FilterConfigStore",
    "InfoService",
    "SourceRegistry",
    "TownService",
]
