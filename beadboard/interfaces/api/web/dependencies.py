"""
FastAPI dependency injection helpers for web endpoints.

Services are looked up on the Application stored in app.state by
create_api_app(); there is no module-level application singleton.

ARCHITECTURE:
- Endpoints should ONLY inject services, never the registry internals or raw files
- Services encapsulate all business logic and I/O
- Endpoints are thin presentation layers that call services and format responses
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from fastapi import HTTPException, Request

if TYPE_CHECKING:
    from beadboard.app import Application
    from beadboard.services.domain.beads_svc import BeadsService
    from beadboard.services.domain.town_svc import TownService
    from beadboard.services.infrastructure.filter_config_svc import FilterConfigStore
    from beadboard.services.infrastructure.info_svc import InfoService


def get_application(request: Request) -> Application:
    """Get the Application bound to this FastAPI app."""
    application = getattr(request.app.state, "application", None)
    if application is None:
        raise HTTPException(status_code=503, detail="Application not initialized")
    return application  # type: ignore[no-any-return]


def _get_service(request: Request, name: str, label: str) -> Any:
    service = get_application(request).services.get(name)
    if service is None:
        raise HTTPException(status_code=503, detail=f"{label} service not available")
    return service


def get_beads_service(request: Request) -> BeadsService:
    """Get BeadsService instance."""
    return _get_service(request, "beads", "Beads")  # type: ignore[no-any-return]


def get_town_service(request: Request) -> TownService:
    """Get TownService instance."""
    return _get_service(request, "town", "Town")  # type: ignore[no-any-return]


def get_filter_config_store(request: Request) -> FilterConfigStore:
    """Get FilterConfigStore instance."""
    return _get_service(request, "filter_config", "Config")  # type: ignore[no-any-return]


def get_info_service(request: Request) -> InfoService:
    """Get InfoService instance."""
    return _get_service(request, "info", "Info")  # type: ignore[no-any-return]
