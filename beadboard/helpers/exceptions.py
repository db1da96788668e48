"""Custom exceptions used across multiple layers.

Rules:
- Only put exceptions here if they need to be raised in one layer and caught in another.
- Keep exceptions simple and focused.
- No I/O, no config loading, no complex logic.
"""

from __future__ import annotations


class SourceUnavailableError(Exception):
    """Raised when a rig's bead source cannot answer a query."""


class CommandError(SourceUnavailableError):
    """Raised when an external tool (bd/gt) is missing, exits non-zero or times out.

    The message is the tool's own failure text and is safe to relay to callers.
    """

    def __init__(self, message: str, *, command: str = "", returncode: int | None = None) -> None:
        super().__init__(message)
        self.command = command
        self.returncode = returncode


class InvalidBeadIdError(ValueError):
    """Raised when a detail lookup is requested without a bead id."""
