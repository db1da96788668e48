"""
Filter config store - the user-editable board configuration.

Reads go to disk every time (no cache) and never fail: a missing or broken
file reads as the defaults. Updates are a read-merge-write held under one
lock, so concurrent submissions are applied one after the other and each
write reflects exactly one submission on top of the previous state.

Merge rules:
- server.port, server.host and refreshInterval are overwritten only by a
  non-zero / non-empty incoming value
- a supplied filters object replaces all five flags at once
"""

from __future__ import annotations

import logging
import threading
from dataclasses import replace
from pathlib import Path

from beadboard.components.infrastructure.config_file_comp import load_board_config, save_board_config
from beadboard.helpers.dto.board_config_dto import BoardConfig, BoardConfigUpdate

logger = logging.getLogger(__name__)


def merge_board_config(current: BoardConfig, update: BoardConfigUpdate) -> BoardConfig:
    """Apply a partial update to a config (pure function)."""
    server = current.server
    if update.port:
        server = replace(server, port=update.port)
    if update.host:
        server = replace(server, host=update.host)

    refresh_interval = update.refresh_interval or current.refresh_interval
    filters = update.filters if update.filters is not None else current.filters

    return BoardConfig(filters=filters, server=server, refresh_interval=refresh_interval)


class FilterConfigStore:
    """Durable board config with serialized partial updates."""

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._lock = threading.Lock()

    @property
    def path(self) -> Path:
        return self._path

    def get(self) -> BoardConfig:
        """Current stored config, or the defaults."""
        with self._lock:
            return load_board_config(self._path)

    def update(self, update: BoardConfigUpdate) -> BoardConfig:
        """
        Merge a partial update into the stored config and persist it.

        Returns:
            The merged config as written

        Raises:
            OSError: If the config file cannot be written (stored file untouched)
        """
        with self._lock:
            current = load_board_config(self._path)
            merged = merge_board_config(current, update)
            save_board_config(self._path, merged)

        logger.info(
            f"[config] Updated board config: port={merged.server.port} host={merged.server.host} "
            f"refreshInterval={merged.refresh_interval}"
        )
        return merged
