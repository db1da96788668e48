"""
Domain services package.
"""

from .beads_svc import BEADS_DIR_ENV, BeadsService, CommandRunner
from .source_registry_svc import SourceRegistry
from .town_svc import TownService

__all__ = [
    "BEADS_DIR_ENV",
    "BeadsService",
    "CommandRunner",
    "SourceRegistry",
    "TownService",
]
