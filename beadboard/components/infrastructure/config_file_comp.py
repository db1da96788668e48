"""
Board config file component.

Reads and writes the JSON board config:

    {
      "filters": {"hideSystemBeads": true, ...},
      "server": {"port": 9292, "host": "localhost"},
      "refreshInterval": 30000
    }

Architecture:
- Leaf component (no locking; callers serialize writes)
- Reads never raise: absence or corruption yields the defaults
- Writes are atomic (temp file in the same directory + os.replace)
"""

from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from dataclasses import replace
from pathlib import Path
from typing import Any

from beadboard.helpers.dto.board_config_dto import BoardConfig, ServerSettings

logger = logging.getLogger(__name__)

MAX_PORT = 65535

# Wire key -> BoardFilters attribute
FILTER_FIELDS: dict[str, str] = {
    "hideSystemBeads": "hide_system_beads",
    "hideEvents": "hide_events",
    "hideRigIdentity": "hide_rig_identity",
    "hideMaintenanceWisps": "hide_maintenance_wisps",
    "hideHQBeads": "hide_hq_beads",
}


def _expect_int(value: Any, name: str) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise ValueError(f"{name} must be an integer")
    return value


def parse_board_config(data: Any) -> BoardConfig:
    """
    Build a BoardConfig from decoded JSON, starting from the defaults.

    Fields absent from data keep their default value.

    Raises:
        ValueError: If data is not an object or a present field has the wrong type
    """
    if not isinstance(data, dict):
        raise ValueError("config must be a JSON object")

    defaults = BoardConfig()
    filters = defaults.filters
    server = defaults.server
    refresh_interval = defaults.refresh_interval

    raw_filters = data.get("filters")
    if raw_filters is not None:
        if not isinstance(raw_filters, dict):
            raise ValueError("filters must be an object")
        updates: dict[str, bool] = {}
        for wire_key, attr in FILTER_FIELDS.items():
            if wire_key in raw_filters:
                if not isinstance(raw_filters[wire_key], bool):
                    raise ValueError(f"filters.{wire_key} must be a boolean")
                updates[attr] = raw_filters[wire_key]
        filters = replace(filters, **updates)

    raw_server = data.get("server")
    if raw_server is not None:
        if not isinstance(raw_server, dict):
            raise ValueError("server must be an object")
        port = server.port
        host = server.host
        if "port" in raw_server:
            port = _expect_int(raw_server["port"], "server.port")
            if not 0 <= port <= MAX_PORT:
                raise ValueError(f"server.port must be between 0 and {MAX_PORT}")
        if "host" in raw_server:
            if not isinstance(raw_server["host"], str):
                raise ValueError("server.host must be a string")
            host = raw_server["host"]
        server = ServerSettings(port=port, host=host)

    if "refreshInterval" in data:
        refresh_interval = _expect_int(data["refreshInterval"], "refreshInterval")
        if refresh_interval < 0:
            raise ValueError("refreshInterval must not be negative")

    return BoardConfig(filters=filters, server=server, refresh_interval=refresh_interval)


def load_board_config(path: str | Path) -> BoardConfig:
    """
    Load the board config, falling back to defaults on any failure.

    Args:
        path: Path to config.json

    Returns:
        Stored config, or BoardConfig() if missing/unreadable/malformed
    """
    try:
        with open(path, encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        return BoardConfig()
    except (OSError, ValueError) as e:
        logger.warning(f"[config_file] Unreadable board config {path}, using defaults: {e}")
        return BoardConfig()

    try:
        return parse_board_config(data)
    except ValueError as e:
        logger.warning(f"[config_file] Malformed board config {path}, using defaults: {e}")
        return BoardConfig()


def save_board_config(path: str | Path, config: BoardConfig) -> None:
    """
    Atomically write the board config as indented JSON.

    Raises:
        OSError: If the directory is not writable
    """
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    payload = json.dumps(config.to_dict(), indent=2) + "\n"

    fd, tmp_name = tempfile.mkstemp(dir=str(target.parent), prefix=f".{target.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        os.replace(tmp_name, target)
    except BaseException:
        with contextlib.suppress(OSError):
            os.unlink(tmp_name)
        raise
    logger.debug(f"[config_file] Wrote board config to {target}")
