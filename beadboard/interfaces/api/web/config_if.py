"""Board configuration endpoints for the dashboard."""

import logging

from fastapi import APIRouter, Depends, HTTPException

from beadboard.interfaces.api.types.config_types import ConfigResponse, ConfigUpdateRequest
from beadboard.interfaces.api.web.dependencies import get_filter_config_store
from beadboard.services.infrastructure.filter_config_svc import FilterConfigStore

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/config", tags=["Config"])


# ──────────────────────────────────────────────────────────────────────
# Endpoints
# ──────────────────────────────────────────────────────────────────────


@router.get("")
def get_config(store: FilterConfigStore = Depends(get_filter_config_store)) -> ConfigResponse:
    """Get the stored board config (defaults when nothing is stored)."""
    return ConfigResponse.from_dto(store.get())


@router.post("")
def update_config(
    request: ConfigUpdateRequest,
    store: FilterConfigStore = Depends(get_filter_config_store),
) -> ConfigResponse:
    """
    Merge a partial board config into the stored one.

    server.port, server.host and refreshInterval change only when given a
    non-zero / non-empty value. A filters object, when present, replaces
    all five flags. Malformed payloads are rejected with 400 before the
    store is touched.
    """
    try:
        merged = store.update(request.to_dto())
    except OSError as e:
        logger.exception("[Web API] Error saving config")
        raise HTTPException(status_code=500, detail=f"Error saving config: {e}") from e
    return ConfigResponse.from_dto(merged)
