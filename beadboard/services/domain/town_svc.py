"""Town-level queries answered by the gt tool (ready work, town status)."""

from __future__ import annotations

from typing import Any

from beadboard.components.platform.command_comp import COMMAND_TIMEOUT_SECONDS, run_json_command
from beadboard.components.routing.display_names_comp import build_rig_prefix_names
from beadboard.services.domain.beads_svc import CommandRunner


class TownService:
    """Runs gt against the town root; failures propagate as CommandError."""

    def __init__(
        self,
        town_root: str,
        *,
        gt_command: str = "gt",
        timeout: float = COMMAND_TIMEOUT_SECONDS,
        runner: CommandRunner = run_json_command,
    ) -> None:
        self._town_root = town_root
        self._gt_command = gt_command
        self._timeout = timeout
        self._runner = runner

    async def ready(self) -> Any:
        """`gt ready --json` output verbatim."""
        return await self._run(["ready", "--json"])

    async def status(self) -> Any:
        """
        `gt status --json` output, enriched with rig display names.

        When gt returns an object, a "rigPrefixes" key is added mapping bead
        id prefixes to rig names (rebuilt from the manifest on each call).
        Any other JSON value is returned untouched.
        """
        data = await self._run(["status", "--json"])
        if isinstance(data, dict):
            return {**data, "rigPrefixes": build_rig_prefix_names(self._town_root)}
        return data

    async def _run(self, args: list[str]) -> Any:
        return await self._runner(self._gt_command, args, cwd=self._town_root, timeout=self._timeout)
