"""
Application composition root and dependency injection container.

The Application owns every long-lived object for one town:
- ConfigService (process settings)
- town root (discovered or configured)
- SourceRegistry (built exactly once, read-only afterwards)
- FilterConfigStore, BeadsService, TownService, InfoService

Architecture:
- Construct one Application at startup and hand it to create_api_app();
  endpoints reach services through FastAPI dependencies, never through
  module-level globals
- Services are registered via register_service() and looked up with
  get_service("name") or application.services["name"]
"""

from __future__ import annotations

import logging
import os
from typing import Any

from beadboard.components.infrastructure.town_root_comp import find_town_root
from beadboard.components.platform.command_comp import run_json_command
from beadboard.services.config_svc import ConfigService
from beadboard.services.domain.beads_svc import BeadsService, CommandRunner
from beadboard.services.domain.source_registry_svc import SourceRegistry
from beadboard.services.domain.town_svc import TownService
from beadboard.services.infrastructure.filter_config_svc import FilterConfigStore
from beadboard.services.infrastructure.info_svc import InfoService

logger = logging.getLogger(__name__)


class Application:
    """
    Application composition root and dependency injection container.

    Configuration Access:
    - Settings come from the ConfigService passed in (or a default one)
    - Prefer the instance attributes (town_root, board_config_path, ...)
      over reading raw settings
    """

    def __init__(
        self,
        config_service: ConfigService | None = None,
        *,
        runner: CommandRunner = run_json_command,
    ) -> None:
        """
        Resolve settings, build the source registry and register services.

        Args:
            config_service: Settings source (defaults to a fresh ConfigService)
            runner: External command runner shared by bead and town services
        """
        self._config_service = config_service or ConfigService()

        configured_root = self._config_service.town_root
        if configured_root:
            self.town_root: str = os.path.abspath(configured_root)
        else:
            self.town_root = find_town_root(os.getcwd())
        self.board_config_path: str = self._config_service.board_config_path
        self.command_timeout_s: float = self._config_service.command_timeout_s

        # Services container (DI registry)
        self.services: dict[str, Any] = {}

        self.registry = SourceRegistry.build(self.town_root)
        self.filter_config = FilterConfigStore(self.board_config_path)

        self.register_service("config", self._config_service)
        self.register_service("registry", self.registry)
        self.register_service("filter_config", self.filter_config)
        self.register_service(
            "beads",
            BeadsService(
                self.registry,
                bd_command=self._config_service.bd_command,
                timeout=self.command_timeout_s,
                runner=runner,
            ),
        )
        self.register_service(
            "town",
            TownService(
                self.town_root,
                gt_command=self._config_service.gt_command,
                timeout=self.command_timeout_s,
                runner=runner,
            ),
        )
        self.register_service("info", InfoService(self.registry))

        logger.info(f"[Application] Town root: {self.town_root}")
        logger.info(f"[Application] Board config: {self.board_config_path}")

    def register_service(self, name: str, service: Any) -> None:
        """
        Register a service in the DI container.

        Args:
            name: Service name for lookup
            service: Service instance
        """
        self.services[name] = service

    def get_service(self, name: str) -> Any:
        """
        Get a service from the DI container.

        Raises:
            KeyError: If service not found
        """
        if name not in self.services:
            raise KeyError(f"Service '{name}' not found. Available services: {list(self.services.keys())}")
        return self.services[name]
