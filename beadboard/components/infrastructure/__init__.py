"""
Infrastructure package.
"""

from .config_file_comp import FILTER_FIELDS, load_board_config, parse_board_config, save_board_config
from .town_root_comp import TOWN_MARKERS, find_town_root, is_town_root

__all__ = [
    "FILTER_FIELDS",
    "TOWN_MARKERS",
    "find_town_root",
    "is_town_root",
    "load_board_config",
    "parse_board_config",
    "save_board_config",
]
