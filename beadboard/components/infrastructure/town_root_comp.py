"""
Town root discovery component.

A town root is recognised by a ``mayor/`` directory or a ``.gastown`` marker.
Discovery walks up from a starting directory (usually the process cwd, which
is typically a crew or polecat checkout somewhere inside the town).
"""

from __future__ import annotations

import logging
from pathlib import Path

logger = logging.getLogger(__name__)

TOWN_MARKERS = ("mayor", ".gastown")
MAX_WALK_UP_LEVELS = 10
# town/rig/polecats/name/project -> town is four levels up
POLECAT_DEPTH = 4


def is_town_root(path: str | Path) -> bool:
    """True when path carries one of the town markers."""
    p = Path(path)
    return any((p / marker).exists() for marker in TOWN_MARKERS)


def find_town_root(start: str | Path) -> str:
    """
    Locate the town root for a starting directory.

    Order:
    1. start and up to MAX_WALK_UP_LEVELS parents, nearest first
    2. POLECAT_DEPTH levels above start, if it has a mayor/ directory
    3. start itself

    Args:
        start: Directory to search from

    Returns:
        Absolute path of the town root (never fails)
    """
    start_path = Path(start).resolve()

    current = start_path
    for _ in range(MAX_WALK_UP_LEVELS):
        if is_town_root(current):
            logger.debug(f"[town_root] Found town root at {current}")
            return str(current)
        if current.parent == current:
            break
        current = current.parent

    candidate = start_path
    for _ in range(POLECAT_DEPTH):
        candidate = candidate.parent
    if (candidate / "mayor").exists():
        logger.debug(f"[town_root] Using polecat-depth town root {candidate}")
        return str(candidate)

    logger.info(f"[town_root] No town markers found above {start_path}; using it as town root")
    return str(start_path)
