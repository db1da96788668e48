"""Bead and town query endpoints for the dashboard."""

from typing import Any

from fastapi import APIRouter, Depends, Query

from beadboard.interfaces.api.web.dependencies import get_beads_service, get_town_service
from beadboard.services.domain.beads_svc import BeadsService
from beadboard.services.domain.town_svc import TownService

router = APIRouter(prefix="/api", tags=["Beads"])


# ──────────────────────────────────────────────────────────────────────
# Endpoints
# ──────────────────────────────────────────────────────────────────────


@router.get("/beads")
async def list_beads(
    status: str | None = None,
    issue_type: str | None = Query(None, alias="type"),
    beads_service: BeadsService = Depends(get_beads_service),
) -> list[Any]:
    """
    List beads from every rig.

    Rigs that fail or time out are left out; this endpoint does not
    report their errors.
    """
    return await beads_service.list_all(status=status, issue_type=issue_type)


@router.get("/bead/{bead_id:path}")
async def get_bead(
    bead_id: str,
    beads_service: BeadsService = Depends(get_beads_service),
) -> Any:
    """Show one bead from the rig owning its prefix (400 on empty id, 500 on bd failure)."""
    return await beads_service.detail(bead_id)


@router.get("/ready")
async def get_ready(town_service: TownService = Depends(get_town_service)) -> Any:
    """Ready work across the town (`gt ready`)."""
    return await town_service.ready()


@router.get("/status")
async def get_status(town_service: TownService = Depends(get_town_service)) -> Any:
    """Town status (`gt status`) plus rigPrefixes display names."""
    return await town_service.status()
