"""
Info domain DTOs.

Data transfer objects for the health endpoint.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass
class HealthResult:
    """Result from InfoService.get_health."""

    status: str
    town: str
    engine: str
    version: str
    sources: int
