"""
API layer package for Beadboard.
Exports the FastAPI app factory.
"""

from beadboard.interfaces.api.api_app import create_api_app

__all__ = ["create_api_app"]
