"""
Rig directory scanner component.

Fallback discovery: a town subdirectory is a rig when it contains the
marker file .beads/beads.db. Only immediate children are inspected; the
marker's contents are never read.
"""

from __future__ import annotations

import logging
from pathlib import Path

from beadboard.helpers.dto.routing_dto import BEADS_DIR_NAME, MARKER_FILE_NAME, RigDirectory

logger = logging.getLogger(__name__)


def scan_rig_directories(town_root: str | Path) -> list[RigDirectory]:
    """
    List rig directories directly under the town root, sorted by name.

    Args:
        town_root: Town root directory

    Returns:
        One RigDirectory per marked subdirectory (empty if the root is unreadable)
    """
    root = Path(town_root)
    try:
        entries = sorted(root.iterdir(), key=lambda p: p.name)
    except OSError as e:
        logger.warning(f"[rig_scan] Cannot list {root}: {e}")
        return []

    rigs: list[RigDirectory] = []
    for entry in entries:
        try:
            if not entry.is_dir():
                continue
            beads_dir = entry / BEADS_DIR_NAME
            if not (beads_dir / MARKER_FILE_NAME).exists():
                continue
        except OSError:
            continue
        rigs.append(RigDirectory(name=entry.name, beads_dir=str(beads_dir)))

    logger.debug(f"[rig_scan] Found {len(rigs)} rig(s) under {root}")
    return rigs
