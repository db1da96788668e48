"""
Beads service - cross-rig bead queries.

list_all() fans one `bd list` out to every distinct bead location in the
registry and concatenates whatever comes back. Individual rigs may be
missing, broken or slow: each one is bounded by its own timeout and any
failure only removes that rig's contribution.

detail() resolves a single bead to its owning rig and runs one `bd show`;
failures there propagate to the caller.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from beadboard.components.platform.command_comp import COMMAND_TIMEOUT_SECONDS, run_json_command
from beadboard.helpers.exceptions import InvalidBeadIdError, SourceUnavailableError
from beadboard.helpers.logging_helper import set_log_context
from beadboard.services.domain.source_registry_svc import SourceRegistry

logger = logging.getLogger(__name__)

BEADS_DIR_ENV = "BEADS_DIR"

CommandRunner = Callable[..., Awaitable[Any]]


class BeadsService:
    """Bead list/detail queries routed through a SourceRegistry."""

    def __init__(
        self,
        registry: SourceRegistry,
        *,
        bd_command: str = "bd",
        timeout: float = COMMAND_TIMEOUT_SECONDS,
        runner: CommandRunner = run_json_command,
    ) -> None:
        self._registry = registry
        self._bd_command = bd_command
        self._timeout = timeout
        self._runner = runner

    @property
    def registry(self) -> SourceRegistry:
        return self._registry

    async def list_all(self, status: str | None = None, issue_type: str | None = None) -> list[Any]:
        """
        List beads from every rig.

        Args:
            status: Passed to bd as --status=<status> when non-empty
            issue_type: Passed to bd as --type=<issue_type> when non-empty

        Returns:
            Concatenated bead records, grouped by rig in dispatch order.
            Empty when there are no rigs or every rig failed; never raises
            for a rig failure.
        """
        locations = self._registry.locations()
        if not locations:
            return []

        args = ["list", "--json"]
        if status:
            args.append(f"--status={status}")
        if issue_type:
            args.append(f"--type={issue_type}")

        async with asyncio.TaskGroup() as group:
            tasks = [group.create_task(self._list_location(location, args)) for location in locations]

        beads: list[Any] = []
        for task in tasks:
            beads.extend(task.result())

        logger.debug(f"[beads] Listed {len(beads)} bead(s) from {len(locations)} location(s)")
        return beads

    async def detail(self, bead_id: str) -> Any:
        """
        Show one bead from the rig that owns its prefix.

        Returns:
            bd's JSON output verbatim (object or single-element array)

        Raises:
            InvalidBeadIdError: bead_id is empty (raised before any I/O)
            CommandError: bd failed for the owning rig
        """
        if not bead_id or not bead_id.strip():
            raise InvalidBeadIdError("missing bead id")

        location = self._registry.location_for(bead_id)
        logger.debug(f"[beads] Resolved {bead_id} -> {location}")
        return await self._runner(
            self._bd_command,
            ["show", bead_id, "--json"],
            cwd=self._registry.town_root,
            env={BEADS_DIR_ENV: location},
            timeout=self._timeout,
        )

    async def _list_location(self, location: str, args: list[str]) -> list[Any]:
        # Runs in its own task, so the context stays local to this rig
        set_log_context(rig=location)
        try:
            data = await self._runner(
                self._bd_command,
                args,
                cwd=self._registry.town_root,
                env={BEADS_DIR_ENV: location},
                timeout=self._timeout,
            )
        except SourceUnavailableError as e:
            logger.warning(f"[beads] Skipping rig: {e}")
            return []
        except Exception:
            logger.exception("[beads] Skipping rig after unexpected error")
            return []

        if not isinstance(data, list):
            logger.warning(f"[beads] Skipping rig: bd list returned {type(data).__name__}, not an array")
            return []
        return data
