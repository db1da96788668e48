"""Info service - process health summary."""

from __future__ import annotations

from beadboard.__version__ import __version__
from beadboard.helpers.dto.info_dto import HealthResult
from beadboard.services.config_svc import INTERNAL_ENGINE
from beadboard.services.domain.source_registry_svc import SourceRegistry


class InfoService:
    """Answers /health from the registry built at startup."""

    def __init__(self, registry: SourceRegistry) -> None:
        self._registry = registry

    def get_health(self) -> HealthResult:
        return HealthResult(
            status="ok",
            town=self._registry.town_root,
            engine=INTERNAL_ENGINE,
            version=__version__,
            sources=len(self._registry.locations()),
        )
