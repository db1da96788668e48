"""
Routing package.
"""

from .display_names_comp import TOWN_DISPLAY_NAME, build_rig_prefix_names
from .manifest_comp import manifest_path, parse_route_line, read_routes
from .rig_scan_comp import scan_rig_directories

__all__ = [
    "TOWN_DISPLAY_NAME",
    "build_rig_prefix_names",
    "manifest_path",
    "parse_route_line",
    "read_routes",
    "scan_rig_directories",
]
