"""
External command component.

Runs the line-oriented bead tools (bd, gt) as subprocesses and decodes their
JSON output.

Architecture:
- Leaf component (no upward imports)
- Async: callers await the child without blocking the event loop
- Hard per-invocation timeout; a timed-out child is killed and reaped
  before the call returns, so no process outlives its caller
- Every failure mode is raised as CommandError carrying the tool's message
"""

from __future__ import annotations

import asyncio
import contextlib
import json
import logging
import os
import time
from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

from beadboard.helpers.exceptions import CommandError

logger = logging.getLogger(__name__)

COMMAND_TIMEOUT_SECONDS = 15.0  # Hard timeout per tool invocation


def decode_output(raw: bytes) -> Any:
    """
    Decode tool stdout: parsed JSON when valid, else the stripped text.

    Example:
        >>> decode_output(b' [1, 2]\\n')
        [1, 2]
        >>> decode_output(b"no beads\\n")
        'no beads'
    """
    text = raw.decode("utf-8", errors="replace").strip()
    try:
        return json.loads(text)
    except ValueError:
        return text


async def _reap(proc: asyncio.subprocess.Process) -> None:
    if proc.returncode is None:
        with contextlib.suppress(ProcessLookupError):
            proc.kill()
        await proc.wait()


async def run_json_command(
    name: str,
    args: Sequence[str],
    *,
    cwd: str | Path | None = None,
    env: Mapping[str, str] | None = None,
    timeout: float = COMMAND_TIMEOUT_SECONDS,
) -> Any:
    """
    Run an external tool and return its decoded stdout.

    Args:
        name: Executable name or path (resolved via PATH)
        args: Arguments passed verbatim
        cwd: Working directory for the child
        env: Extra variables layered over the current environment
        timeout: Maximum seconds to wait for the child

    Returns:
        Parsed JSON value, or the stripped stdout text if it is not JSON

    Raises:
        CommandError: Tool missing, non-zero exit, or timeout
    """
    command_line = " ".join([name, *args])
    child_env = None
    if env:
        child_env = {**os.environ, **env}

    started = time.monotonic()
    try:
        proc = await asyncio.create_subprocess_exec(
            name,
            *args,
            cwd=str(cwd) if cwd is not None else None,
            env=child_env,
            stdin=asyncio.subprocess.DEVNULL,
            stdout=asyncio.subprocess.PIPE,
            stderr=asyncio.subprocess.PIPE,
        )
    except FileNotFoundError as e:
        raise CommandError(f"{name}: command not found", command=command_line) from e
    except OSError as e:
        raise CommandError(f"{command_line}: {e}", command=command_line) from e

    try:
        stdout, stderr = await asyncio.wait_for(proc.communicate(), timeout=timeout)
    except TimeoutError as e:
        logger.warning(f"[command] {command_line} timed out after {timeout}s")
        raise CommandError(f"{command_line} timed out after {timeout}s", command=command_line) from e
    finally:
        await _reap(proc)

    duration_ms = (time.monotonic() - started) * 1000
    if proc.returncode != 0:
        message = stderr.decode("utf-8", errors="replace")
        logger.debug(f"[command] {command_line} exited {proc.returncode} ({duration_ms:.1f}ms)")
        raise CommandError(
            f"{command_line} exited {proc.returncode}: {message}",
            command=command_line,
            returncode=proc.returncode,
        )

    logger.debug(f"[command] {command_line} ok ({duration_ms:.1f}ms)")
    return decode_output(stdout)
