"""
Routing domain DTOs.

Data structures shared by the manifest reader, the rig scanner and the
source registry.

Rules:
- Import only stdlib and typing (no beadboard.* imports)
- Pure data structures only (no I/O, no business logic)
"""

from __future__ import annotations

from dataclasses import dataclass

HQ_PREFIX = "hq"
TOWN_PATH = "."
BEADS_DIR_NAME = ".beads"
ROUTES_FILE_NAME = "routes.jsonl"
MARKER_FILE_NAME = "beads.db"


@dataclass(frozen=True)
class Route:
    """One parsed line of routes.jsonl."""

    prefix: str
    """Declared prefix with the trailing separator already stripped."""

    path: str
    """Rig path relative to the town root, or "." for the town itself."""

    @property
    def is_town(self) -> bool:
        return self.path == TOWN_PATH

    @property
    def first_segment(self) -> str | None:
        """First dash-separated segment of a multi-segment prefix, else None."""
        idx = self.prefix.find("-")
        if idx > 0:
            return self.prefix[:idx]
        return None


@dataclass(frozen=True)
class RigDirectory:
    """A town subdirectory carrying the .beads/beads.db marker."""

    name: str
    beads_dir: str

