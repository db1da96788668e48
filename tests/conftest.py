"""
Pytest fixtures and configuration for the test suite.

Town fixtures build a throwaway town layout under tmp_path:

    town/
      .beads/routes.jsonl      route manifest
      mayor/                   town marker
      <rig>/.beads/beads.db    rig marker (scanned rigs)

External tools are never executed by service or API tests; they receive
a FakeRunner that records calls and replays canned results.
"""

from __future__ import annotations

import json
import sys
from collections.abc import Callable, Iterable, Mapping
from pathlib import Path
from typing import Any

import pytest

# Add project root to path so tests can import beadboard package
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from beadboard.helpers.exceptions import CommandError  # noqa: E402
from beadboard.helpers.logging_helper import clear_log_context  # noqa: E402


# === TOWN LAYOUT HELPERS ===
def write_routes(town: Path, lines: Iterable[Any]) -> Path:
    """Write routes.jsonl; dict entries are JSON-encoded, strings written raw."""
    beads_dir = town / ".beads"
    beads_dir.mkdir(parents=True, exist_ok=True)
    path = beads_dir / "routes.jsonl"
    rendered = [json.dumps(line) if isinstance(line, dict) else str(line) for line in lines]
    path.write_text("\n".join(rendered) + "\n", encoding="utf-8")
    return path


def make_rig(town: Path, name: str, marker: bool = True) -> Path:
    """Create <town>/<name>/.beads, with the beads.db marker unless marker=False."""
    beads_dir = town / name / ".beads"
    beads_dir.mkdir(parents=True, exist_ok=True)
    if marker:
        (beads_dir / "beads.db").write_bytes(b"")
    return beads_dir


@pytest.fixture
def town(tmp_path: Path) -> Path:
    """Empty town root carrying the mayor/ marker."""
    root = tmp_path / "town"
    (root / "mayor").mkdir(parents=True)
    (root / ".beads").mkdir()
    return root


# === FAKE COMMAND RUNNER ===
class FakeRunner:
    """
    Stand-in for run_json_command.

    handler(name, args, env) returns the decoded output or raises. Every
    call is recorded as a dict with name/args/cwd/env/timeout.
    """

    def __init__(self, handler: Callable[[str, list[str], Mapping[str, str]], Any] | None = None) -> None:
        self.handler = handler or (lambda name, args, env: [])
        self.calls: list[dict[str, Any]] = []

    async def __call__(
        self,
        name: str,
        args: list[str],
        *,
        cwd: Any = None,
        env: Mapping[str, str] | None = None,
        timeout: float = 0,
    ) -> Any:
        env = dict(env or {})
        self.calls.append({"name": name, "args": list(args), "cwd": cwd, "env": env, "timeout": timeout})
        return self.handler(name, list(args), env)


@pytest.fixture
def fake_runner() -> FakeRunner:
    return FakeRunner()


def failing(message: str, returncode: int = 1) -> CommandError:
    """Build the CommandError a failing tool would produce."""
    return CommandError(message, command="bd", returncode=returncode)


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_log_context()
    yield
    clear_log_context()


def pytest_configure(config):
    """Register custom pytest markers."""
    config.addinivalue_line("markers", "unit: mark test as unit test (fast, filesystem only)")
    config.addinivalue_line("markers", "integration: mark test as integration test (full HTTP app)")
    config.addinivalue_line("markers", "slow: mark test as slow running (spawns subprocesses)")
