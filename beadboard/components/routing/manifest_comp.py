"""
Route manifest reader component.

Parses <town>/.beads/routes.jsonl: one JSON object per line, each declaring a
bead id prefix and the rig path (relative to the town root) that owns it.

Architecture:
- Leaf component (no upward imports)
- Best-effort: unreadable files and malformed lines are skipped, never raised
"""

from __future__ import annotations

import json
import logging
from pathlib import Path

from beadboard.helpers.dto.routing_dto import BEADS_DIR_NAME, ROUTES_FILE_NAME, Route

logger = logging.getLogger(__name__)

PREFIX_SEPARATOR = "-"


def manifest_path(town_root: str | Path) -> Path:
    """Location of the route manifest for a town."""
    return Path(town_root) / BEADS_DIR_NAME / ROUTES_FILE_NAME


def parse_route_line(line: str) -> Route | None:
    """
    Parse one manifest line.

    Returns None for blank lines, invalid JSON, non-object values, and
    objects whose prefix/path are missing or not strings.

    Example:
        >>> parse_route_line('{"prefix": "gt-", "path": "gastown"}')
        Route(prefix='gt', path='gastown')
        >>> parse_route_line("not json") is None
        True
    """
    line = line.strip()
    if not line:
        return None
    try:
        data = json.loads(line)
    except json.JSONDecodeError:
        return None
    if not isinstance(data, dict):
        return None

    prefix = data.get("prefix")
    path = data.get("path")
    if not isinstance(prefix, str) or not isinstance(path, str):
        return None

    prefix = prefix.strip()
    if prefix.endswith(PREFIX_SEPARATOR):
        prefix = prefix[: -len(PREFIX_SEPARATOR)]
    path = path.strip()
    if not prefix or not path:
        return None
    return Route(prefix=prefix, path=path)


def read_routes(town_root: str | Path) -> list[Route]:
    """
    Read every well-formed route from the town's manifest, in file order.

    Args:
        town_root: Town root directory

    Returns:
        Parsed routes (empty if the manifest is absent or unreadable)
    """
    path = manifest_path(town_root)
    try:
        raw = path.read_bytes()
    except FileNotFoundError:
        logger.debug(f"[manifest] No route manifest at {path}")
        return []
    except OSError as e:
        logger.warning(f"[manifest] Cannot read {path}: {e}")
        return []

    routes: list[Route] = []
    skipped = 0
    # Decoded line by line: an undecodable line is skipped like invalid JSON
    for raw_line in raw.splitlines():
        try:
            line = raw_line.decode("utf-8")
        except UnicodeDecodeError:
            skipped += 1
            continue
        route = parse_route_line(line)
        if route is None:
            if line.strip():
                skipped += 1
            continue
        routes.append(route)

    if skipped:
        logger.debug(f"[manifest] Skipped {skipped} malformed line(s) in {path}")
    return routes
