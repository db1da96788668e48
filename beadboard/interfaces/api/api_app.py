"""
FastAPI application setup and configuration.
Main entry point for the Beadboard HTTP service.

Routes:
- GET  /               dashboard page (public_html/index.html, when installed)
- GET  /health         liveness + town root
- GET  /api/beads      beads from every rig (?status=, ?type=)
- GET  /api/bead/{id}  one bead from its owning rig
- GET  /api/ready      gt ready passthrough
- GET  /api/status     gt status + rig display names
- GET  /api/config     board config
- POST /api/config     partial board config update

Every error response body is {"error": "<message>"}.
"""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from pathlib import Path
from typing import TYPE_CHECKING

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from beadboard.__version__ import __version__
from beadboard.helpers.exceptions import InvalidBeadIdError, SourceUnavailableError
from beadboard.interfaces.api import web

if TYPE_CHECKING:
    from beadboard.app import Application

logger = logging.getLogger(__name__)

PUBLIC_HTML_DIR = Path(__file__).resolve().parent.parent.parent / "public_html"


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def _format_validation_error(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err.get("loc", ()) if p != "body")
        msg = err.get("msg", "invalid value")
        parts.append(f"{loc}: {msg}" if loc else msg)
    return "; ".join(parts) or "invalid request"


# ----------------------------------------------------------------------
#  App lifecycle
# ----------------------------------------------------------------------
@asynccontextmanager
async def lifespan(app_instance: FastAPI):
    """Log startup/shutdown; the Application is fully built before uvicorn runs."""
    application = app_instance.state.application
    logger.info(
        f"[API] Beadboard {__version__} serving {len(application.registry.locations())} bead location(s) "
        f"from {application.town_root}"
    )
    try:
        yield
    finally:
        logger.info("[API] Shutdown complete")


# ----------------------------------------------------------------------
#  FastAPI app
# ----------------------------------------------------------------------
def create_api_app(application: Application) -> FastAPI:
    """
    Build the FastAPI app bound to one Application.

    Args:
        application: Fully constructed composition root

    Returns:
        FastAPI app with routes, CORS and error handlers installed
    """
    api_app = FastAPI(title="Beadboard", version=__version__, lifespan=lifespan)
    api_app.state.application = application

    api_app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )

    @api_app.exception_handler(InvalidBeadIdError)
    async def invalid_bead_id_handler(request: Request, exc: InvalidBeadIdError):
        return _error(400, str(exc))

    @api_app.exception_handler(SourceUnavailableError)
    async def source_error_handler(request: Request, exc: SourceUnavailableError):
        logger.warning(f"[API] {request.url.path}: {exc}")
        return _error(500, str(exc))

    @api_app.exception_handler(RequestValidationError)
    async def validation_error_handler(request: Request, exc: RequestValidationError):
        return _error(400, _format_validation_error(exc))

    @api_app.exception_handler(StarletteHTTPException)
    async def http_error_handler(request: Request, exc: StarletteHTTPException):
        response = _error(exc.status_code, str(exc.detail))
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    # Global exception handler
    @api_app.exception_handler(Exception)
    async def exception_handler(request: Request, exc: Exception):
        logger.exception(f"[API] Exception: {exc}")
        return _error(500, str(exc))

    api_app.include_router(web.router)

    @api_app.get("/", include_in_schema=False)
    async def serve_dashboard():
        """Serve the dashboard page when one is installed."""
        index_path = PUBLIC_HTML_DIR / "index.html"
        if index_path.exists():
            return FileResponse(str(index_path), media_type="text/html; charset=utf-8")
        return _error(404, "Web UI not found")

    return api_app
