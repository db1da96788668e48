"""
Logging helpers shared by every layer.

Provides:
- BeadboardLogFilter: derives readable identity/role tags from logger names
  (``beadboard.services.domain.beads_svc`` -> ``[Beads] [Service]``) and
  renders per-task context set via set_log_context().
- configure_logging(): one-call process setup used by start.py.

Context is stored in a ContextVar so concurrent fan-out tasks each carry
their own rig location without stepping on one another.
"""

from __future__ import annotations

import contextvars
import logging
from typing import Any

logger = logging.getLogger(__name__)

LOG_FORMAT = (
    "%(asctime)s %(levelname)s %(beadboard_identity_tag)s %(beadboard_role_tag)s %(context_str)s%(message)s"
)

# Module name suffix -> role tag
_ROLE_SUFFIXES: dict[str, str] = {
    "_svc": "[Service]",
    "_comp": "[Component]",
    "_helper": "[Helper]",
    "_dto": "[DTO]",
    "_if": "[Interface]",
}

_log_context: contextvars.ContextVar[dict[str, Any] | None] = contextvars.ContextVar(
    "beadboard_log_context", default=None
)


def set_log_context(**values: Any) -> None:
    """Add key/value pairs to the logging context of the current task."""
    current = dict(_log_context.get() or {})
    current.update(values)
    _log_context.set(current)


def clear_log_context() -> None:
    """Drop all logging context for the current task."""
    _log_context.set(None)


def _derive_tags(name: str) -> tuple[str, str]:
    module = name.rsplit(".", 1)[-1]
    for suffix, role in _ROLE_SUFFIXES.items():
        if module.endswith(suffix):
            stem = module[: -len(suffix)]
            if not stem.strip("_"):
                break
            identity = " ".join(part.capitalize() for part in stem.split("_") if part)
            return f"[{identity}]", role
    return name, ""


class BeadboardLogFilter(logging.Filter):
    """
    Attach identity, role and context attributes to every record.

    Never suppresses a record and never raises.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        try:
            identity, role = _derive_tags(str(record.name or ""))
        except Exception:
            identity, role = str(getattr(record, "name", "")), ""
        record.beadboard_identity_tag = identity
        record.beadboard_role_tag = role

        try:
            context = _log_context.get() or {}
            if context:
                rendered = " ".join(f"{k}={v}" for k, v in context.items())
                record.context_str = f"[{rendered}] "
            else:
                record.context_str = ""
        except Exception:
            record.context_str = ""
        return True


def configure_logging(level: str | int = logging.INFO) -> None:
    """
    Configure root logging once for the whole process.

    Args:
        level: Level name ("INFO", "DEBUG", ...) or numeric level
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    handler = logging.StreamHandler()
    handler.addFilter(BeadboardLogFilter())
    handler.setFormatter(logging.Formatter(LOG_FORMAT))

    root = logging.getLogger()
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)
    logger.debug("Logging configured at level %s", logging.getLevelName(level))
