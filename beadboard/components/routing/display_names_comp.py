"""Prefix -> rig display name mapping for presentation enrichment."""

from __future__ import annotations

from pathlib import Path

from beadboard.components.routing.manifest_comp import read_routes

TOWN_DISPLAY_NAME = "town"


def build_rig_prefix_names(town_root: str | Path) -> dict[str, str]:
    """
    Map bead id prefixes to rig names, e.g. {"ri": "rigradar", "hq": "town"}.

    Rebuilt from the manifest on every call. Keys are the first segment of
    each declared prefix (the part a bead id exposes before its first dash);
    the first declaration of a key wins. No manifest means an empty map.
    """
    names: dict[str, str] = {}
    for route in read_routes(town_root):
        key = route.first_segment or route.prefix
        if key in names:
            continue
        names[key] = TOWN_DISPLAY_NAME if route.is_town else route.path
    return names
