#!/usr/bin/env python3
# ======================================================================
#  Config Service - Process settings loading and caching
#  - Loads settings from defaults, YAML files and BEADBOARD_* env vars
#  - Caches composed settings for the life of the process
#  - Provides reload() for tests and tooling
#  - The user-editable board config lives in FilterConfigStore, not here
# ======================================================================

from __future__ import annotations

import logging
import os
from typing import Any

import yaml

from beadboard.components.platform.command_comp import COMMAND_TIMEOUT_SECONDS

# ======================================================================
# Internal Constants (Not User-Configurable)
# ======================================================================
INTERNAL_ENGINE = "python"
SYSTEM_SETTINGS_PATH = "/etc/beadboard/config.yaml"
SETTINGS_PATH_ENV = "BEADBOARD_SETTINGS"
ENV_PREFIX = "BEADBOARD_"

# Whitelist of keys accepted from YAML overrides and environment
USER_SETTINGS_KEYS = {
    "town_root",
    "board_config_path",
    "command_timeout_s",
    "bd_command",
    "gt_command",
    "log_level",
}


class ConfigService:
    """
    Service for loading and caching process settings.

    Loads settings from multiple sources (defaults -> YAML -> overrides -> env),
    caches the result, and provides reload capability.
    """

    def __init__(self, overrides: dict[str, Any] | None = None) -> None:
        """
        Initialize ConfigService with empty cache.

        Args:
            overrides: Values applied after YAML and before environment
                (start.py passes CLI flags here)
        """
        self._overrides = dict(overrides or {})
        self._config: dict[str, Any] | None = None
        self._logger = logging.getLogger(__name__)

    def get_config(self, force_reload: bool = False) -> dict[str, Any]:
        """
        Get the composed settings.

        Args:
            force_reload: If True, bypass cache and reload from sources

        Returns:
            Complete settings dict
        """
        if self._config is None or force_reload:
            self._config = self._compose()
        return self._config

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a single setting.

        Example:
            >>> service.get("bd_command")
            'bd'
        """
        return self.get_config().get(key, default)

    def reload(self) -> dict[str, Any]:
        """Force reload settings from all sources."""
        self._logger.info("Reloading settings from all sources")
        return self.get_config(force_reload=True)

    # Typed accessors ---------------------------------------------------

    @property
    def town_root(self) -> str | None:
        value = self.get("town_root")
        return str(value) if value else None

    @property
    def board_config_path(self) -> str:
        return str(self.get("board_config_path") or os.path.join(os.getcwd(), "config.json"))

    @property
    def command_timeout_s(self) -> float:
        try:
            timeout = float(self.get("command_timeout_s", COMMAND_TIMEOUT_SECONDS))
        except (TypeError, ValueError):
            self._logger.warning("Invalid command_timeout_s; using default")
            return COMMAND_TIMEOUT_SECONDS
        return timeout if timeout > 0 else COMMAND_TIMEOUT_SECONDS

    @property
    def bd_command(self) -> str:
        return str(self.get("bd_command") or "bd")

    @property
    def gt_command(self) -> str:
        return str(self.get("gt_command") or "gt")

    @property
    def log_level(self) -> str:
        return str(self.get("log_level") or "INFO")

    # ----------------------------------------------------------------------
    # Private composition logic
    # ----------------------------------------------------------------------

    def _compose(self) -> dict[str, Any]:
        """
        Load final settings from:
          1) Built-in defaults
          2) /etc/beadboard/config.yaml (if present)
          3) ./config/config.yaml (if present)
          4) $BEADBOARD_SETTINGS (if set)
          5) overrides passed to the constructor
          6) Environment variables (BEADBOARD_*)
        """
        cfg = self._default_config()

        self._merge_whitelisted(cfg, self._load_yaml(SYSTEM_SETTINGS_PATH))
        self._merge_whitelisted(cfg, self._load_yaml(os.path.join(os.getcwd(), "config", "config.yaml")))

        env_path = os.getenv(SETTINGS_PATH_ENV)
        if env_path:
            self._merge_whitelisted(cfg, self._load_yaml(env_path))

        if self._overrides:
            self._merge_whitelisted(cfg, {k: v for k, v in self._overrides.items() if v is not None})

        self._apply_env_overrides(cfg)

        self._logger.debug("compose() loaded settings; keys: %s", sorted(cfg.keys()))
        return cfg

    def _default_config(self) -> dict[str, Any]:
        return {
            "town_root": None,  # None = discover from cwd
            "board_config_path": os.path.join(os.getcwd(), "config.json"),
            "command_timeout_s": COMMAND_TIMEOUT_SECONDS,
            "bd_command": "bd",
            "gt_command": "gt",
            "log_level": "INFO",
        }

    def _merge_whitelisted(self, cfg: dict[str, Any], values: dict[str, Any]) -> None:
        for key, value in values.items():
            if key not in USER_SETTINGS_KEYS:
                self._logger.debug(f"Ignoring unknown setting: {key}")
                continue
            cfg[key] = value

    def _load_yaml(self, path: str) -> dict[str, Any]:
        """
        Load a YAML file; returns {} if not found or invalid.
        """
        if not path or not os.path.exists(path):
            return {}
        try:
            with open(path, encoding="utf-8") as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            self._logger.warning(f"Ignoring unreadable settings file {path}: {e}")
            return {}
        if not isinstance(data, dict):
            self._logger.warning(f"Ignoring settings file {path}: top level is not a mapping")
            return {}
        return data

    def _apply_env_overrides(self, cfg: dict[str, Any]) -> None:
        """
        Support environment overrides for user settings only.

        Supported formats:
          BEADBOARD_TOWN_ROOT=/home/me/gt
          BEADBOARD_BOARD_CONFIG_PATH=/home/me/.beadboard.json
          BEADBOARD_COMMAND_TIMEOUT_S=30
          BEADBOARD_BD_COMMAND=/usr/local/bin/bd
          BEADBOARD_GT_COMMAND=gt
          BEADBOARD_LOG_LEVEL=DEBUG
        """
        for k, v in os.environ.items():
            if not k.startswith(ENV_PREFIX) or k == SETTINGS_PATH_ENV:
                continue

            key = k[len(ENV_PREFIX) :].lower()
            if key not in USER_SETTINGS_KEYS:
                self._logger.debug(f"Ignoring environment override for unknown key: {key}")
                continue

            val: Any
            if v.isdigit():
                val = int(v)
            elif v.replace(".", "", 1).isdigit():
                val = float(v)
            else:
                val = v
            cfg[key] = val
