"""
Source registry service.

Answers "which rig's .beads directory owns this bead id?" and "which bead
directories exist at all?". Built once at startup from the route manifest
and a scan of the town's rig directories; read-only afterwards, so request
handlers share one instance without locking.

Registration rules (first registered key always wins):
1. "hq" -> <town>/.beads, inserted before anything else
2. Each manifest route, in file order (a route whose prefix is already
   registered is dropped whole):
   - full prefix -> rig location
   - first segment of a multi-segment prefix ("a-b" -> "a")
   - rig path as a directory-name alias (skipped for the town itself)
3. Each scanned rig directory name -> its .beads directory
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterable, Mapping
from types import MappingProxyType

from beadboard.components.routing.manifest_comp import read_routes
from beadboard.components.routing.rig_scan_comp import scan_rig_directories
from beadboard.helpers.dto.routing_dto import BEADS_DIR_NAME, HQ_PREFIX, RigDirectory, Route

logger = logging.getLogger(__name__)

ID_SEPARATOR = "-"


class SourceRegistry:
    """
    Immutable prefix -> bead directory mapping for one town.

    Use SourceRegistry.build(town_root) in production; the constructor
    accepts pre-parsed routes and rig directories so tests can drive the
    merge rules without touching the filesystem.
    """

    def __init__(
        self,
        town_root: str,
        routes: Iterable[Route] = (),
        rigs: Iterable[RigDirectory] = (),
    ) -> None:
        self._town_root = str(town_root)
        self._hq_location = os.path.join(self._town_root, BEADS_DIR_NAME)

        prefixes: dict[str, str] = {HQ_PREFIX: self._hq_location}

        for route in routes:
            location = self._location_for_route(route)
            if route.prefix in prefixes:
                logger.debug(f"[registry] Ignoring duplicate route for {route.prefix!r} -> {location}")
                continue
            prefixes[route.prefix] = location
            alias = route.first_segment
            if alias:
                self._register(prefixes, alias, location)
            if not route.is_town:
                self._register(prefixes, route.path, location)

        for rig in rigs:
            self._register(prefixes, rig.name, rig.beads_dir)

        self._prefixes: Mapping[str, str] = MappingProxyType(prefixes)
        self._locations: tuple[str, ...] = tuple(dict.fromkeys(prefixes.values()))

        logger.info(
            f"[registry] {len(self._prefixes)} prefix(es) across {len(self._locations)} bead location(s) "
            f"under {self._town_root}"
        )

    @classmethod
    def build(cls, town_root: str) -> SourceRegistry:
        """
        Build the registry for a town from its manifest and rig directories.

        Never raises for a missing or malformed manifest, or an unreadable
        town root; the result always contains at least "hq".
        """
        return cls(town_root, routes=read_routes(town_root), rigs=scan_rig_directories(town_root))

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    @property
    def town_root(self) -> str:
        return self._town_root

    @property
    def hq_location(self) -> str:
        return self._hq_location

    @property
    def prefixes(self) -> Mapping[str, str]:
        """Read-only view of every registered key (prefixes and aliases)."""
        return self._prefixes

    def locations(self) -> list[str]:
        """Distinct bead locations in registration order ("hq" first)."""
        return list(self._locations)

    def location_for(self, bead_id: str) -> str:
        """
        Resolve the bead directory owning a bead id.

        "gt-abc12" -> location registered for "gt". Ids without a dash, with
        a leading dash, or with an unknown prefix fall back to "hq".
        """
        dash = bead_id.find(ID_SEPARATOR)
        if dash > 0:
            location = self._prefixes.get(bead_id[:dash])
            if location is not None:
                return location
        return self._hq_location

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _location_for_route(self, route: Route) -> str:
        if route.is_town:
            return self._hq_location
        return os.path.join(self._town_root, route.path, BEADS_DIR_NAME)

    @staticmethod
    def _register(prefixes: dict[str, str], key: str, location: str) -> None:
        if key in prefixes:
            if prefixes[key] != location:
                logger.debug(f"[registry] Ignoring {key!r} -> {location}; already routed to {prefixes[key]}")
            return
        prefixes[key] = location
