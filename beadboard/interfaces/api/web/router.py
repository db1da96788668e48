"""
Combined router for all dashboard endpoints.

This module aggregates the web routers (beads, config, info) into a single
router that can be included in the main FastAPI app.
"""

from fastapi import APIRouter

from beadboard.interfaces.api.web import beads_if, config_if, info_if

# Create combined router
router = APIRouter()

# Include all web routers
router.include_router(info_if.router)
router.include_router(beads_if.router)
router.include_router(config_if.router)
