"""
Infrastructure services package.
"""

from .filter_config_svc import FilterConfigStore, merge_board_config
from .info_svc import InfoService

__all__ = [
    "FilterConfigStore",
    "InfoService",
    "merge_board_config",
]
