"""
HTTP API tests.

Builds a real Application over a temporary town and drives it through
FastAPI's TestClient. External tools are replaced by a FakeRunner, so
no bd/gt binary is needed.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any

import pytest
from conftest import FakeRunner, failing, make_rig, write_routes
from fastapi.testclient import TestClient

from beadboard.__version__ import __version__
from beadboard.app import Application
from beadboard.interfaces.api import api_app as api_app_module
from beadboard.interfaces.api import create_api_app
from beadboard.services.config_svc import ConfigService


@pytest.fixture
def runner() -> FakeRunner:
    def handler(name: str, args: list[str], env: dict[str, str]) -> Any:
        if name == "gt":
            return {"rigs": ["gastown"]} if args[0] == "status" else [{"id": "gt-ready"}]
        if args[0] == "show":
            return {"id": args[1], "dir": env["BEADS_DIR"]}
        return [{"id": f"bead@{env['BEADS_DIR']}", "args": args}]

    return FakeRunner(handler)


@pytest.fixture
def application(town: Path, tmp_path: Path, runner: FakeRunner, monkeypatch: pytest.MonkeyPatch) -> Application:
    for key in list(os.environ):
        if key.startswith("BEADBOARD_"):
            monkeypatch.delenv(key, raising=False)
    write_routes(town, [{"prefix": "hq-", "path": "."}, {"prefix": "gt-", "path": "gastown"}])
    make_rig(town, "gastown")
    make_rig(town, "rigradar")
    config = ConfigService(
        overrides={"town_root": str(town), "board_config_path": str(tmp_path / "board" / "config.json")}
    )
    return Application(config, runner=runner)


@pytest.fixture
def client(application: Application):
    with TestClient(create_api_app(application)) as test_client:
        yield test_client


class TestHealth:
    @pytest.mark.integration
    def test_health(self, client: TestClient, town: Path) -> None:
        response = client.get("/health")

        assert response.status_code == 200
        assert response.json() == {
            "status": "ok",
            "town": str(town),
            "engine": "python",
            "version": __version__,
            "sources": 3,
        }


class TestBeads:
    @pytest.mark.integration
    def test_list_aggregates_every_rig(self, client: TestClient, town: Path) -> None:
        response = client.get("/api/beads")

        assert response.status_code == 200
        assert [b["id"] for b in response.json()] == [
            f"bead@{town / '.beads'}",
            f"bead@{town / 'gastown' / '.beads'}",
            f"bead@{town / 'rigradar' / '.beads'}",
        ]

    @pytest.mark.integration
    def test_list_forwards_filters(self, client: TestClient, runner: FakeRunner) -> None:
        client.get("/api/beads", params={"status": "open", "type": "bug"})

        assert {tuple(call["args"]) for call in runner.calls} == {("list", "--json", "--status=open", "--type=bug")}

    @pytest.mark.integration
    def test_list_survives_failing_rig(self, client: TestClient, runner: FakeRunner, town: Path) -> None:
        gastown = str(town / "gastown" / ".beads")

        def handler(name: str, args: list[str], env: dict[str, str]) -> Any:
            if env["BEADS_DIR"] == gastown:
                raise failing("bd list --json exited 1: locked")
            return [{"id": "ok"}]

        runner.handler = handler

        response = client.get("/api/beads")

        assert response.status_code == 200
        assert response.json() == [{"id": "ok"}, {"id": "ok"}]

    @pytest.mark.integration
    def test_list_all_failing_is_empty_array(self, client: TestClient, runner: FakeRunner) -> None:
        def handler(name: str, args: list[str], env: dict[str, str]) -> Any:
            raise failing("bd: command not found")

        runner.handler = handler

        response = client.get("/api/beads")

        assert response.status_code == 200
        assert response.json() == []

    @pytest.mark.integration
    def test_detail_routes_by_prefix(self, client: TestClient, town: Path) -> None:
        response = client.get("/api/bead/gt-abc12")

        assert response.status_code == 200
        assert response.json() == {"id": "gt-abc12", "dir": str(town / "gastown" / ".beads")}

    @pytest.mark.integration
    def test_detail_empty_id_is_400(self, client: TestClient, runner: FakeRunner) -> None:
        response = client.get("/api/bead/")

        assert response.status_code == 400
        assert response.json() == {"error": "missing bead id"}
        assert runner.calls == []

    @pytest.mark.integration
    def test_detail_failure_is_500_with_message(self, client: TestClient, runner: FakeRunner) -> None:
        def handler(name: str, args: list[str], env: dict[str, str]) -> Any:
            raise failing("bd show gt-404 --json exited 1: issue not found")

        runner.handler = handler

        response = client.get("/api/bead/gt-404")

        assert response.status_code == 500
        assert response.json() == {"error": "bd show gt-404 --json exited 1: issue not found"}


class TestTown:
    @pytest.mark.integration
    def test_ready(self, client: TestClient) -> None:
        response = client.get("/api/ready")

        assert response.status_code == 200
        assert response.json() == [{"id": "gt-ready"}]

    @pytest.mark.integration
    def test_status_carries_rig_prefixes(self, client: TestClient) -> None:
        response = client.get("/api/status")

        assert response.status_code == 200
        assert response.json() == {"rigs": ["gastown"], "rigPrefixes": {"hq": "town", "gt": "gastown"}}

    @pytest.mark.integration
    def test_gt_failure_is_500(self, client: TestClient, runner: FakeRunner) -> None:
        def handler(name: str, args: list[str], env: dict[str, str]) -> Any:
            raise failing("gt: command not found")

        runner.handler = handler

        response = client.get("/api/status")

        assert response.status_code == 500
        assert response.json() == {"error": "gt: command not found"}


class TestConfig:
    @pytest.mark.integration
    def test_get_defaults(self, client: TestClient) -> None:
        response = client.get("/api/config")

        assert response.status_code == 200
        assert response.json() == {
            "filters": {
                "hideSystemBeads": True,
                "hideEvents": True,
                "hideRigIdentity": True,
                "hideMaintenanceWisps": True,
                "hideHQBeads": True,
            },
            "server": {"port": 9292, "host": "localhost"},
            "refreshInterval": 30000,
        }

    @pytest.mark.integration
    def test_partial_update_persists(self, client: TestClient, application: Application) -> None:
        response = client.post("/api/config", json={"server": {"port": 8123}})

        assert response.status_code == 200
        body = response.json()
        assert body["server"] == {"port": 8123, "host": "localhost"}
        assert body["refreshInterval"] == 30000

        stored = json.loads(Path(application.board_config_path).read_text(encoding="utf-8"))
        assert stored == body
        assert client.get("/api/config").json() == body

    @pytest.mark.integration
    def test_filters_replace_whole_group(self, client: TestClient) -> None:
        response = client.post("/api/config", json={"filters": {"hideEvents": True}})

        assert response.status_code == 200
        assert response.json()["filters"] == {
            "hideSystemBeads": False,
            "hideEvents": True,
            "hideRigIdentity": False,
            "hideMaintenanceWisps": False,
            "hideHQBeads": False,
        }

    @pytest.mark.integration
    @pytest.mark.parametrize(
        "payload",
        [
            {"server": {"port": "not-a-port"}},
            {"server": {"port": 70000}},
            {"filters": {"hideEvents": "maybe"}},
            {"refreshInterval": -1},
        ],
    )
    def test_malformed_update_is_400(
        self, client: TestClient, application: Application, payload: dict[str, Any]
    ) -> None:
        response = client.post("/api/config", json=payload)

        assert response.status_code == 400
        assert "error" in response.json()
        assert not Path(application.board_config_path).exists()

    @pytest.mark.integration
    def test_out_of_range_stored_config_reads_as_defaults(
        self, client: TestClient, application: Application
    ) -> None:
        path = Path(application.board_config_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps({"server": {"port": 70000, "host": "h"}}), encoding="utf-8")

        response = client.get("/api/config")

        assert response.status_code == 200
        assert response.json()["server"] == {"port": 9292, "host": "localhost"}

    @pytest.mark.integration
    def test_update_over_out_of_range_stored_config(
        self, client: TestClient, application: Application
    ) -> None:
        path = Path(application.board_config_path)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps({"server": {"port": 70000, "host": "h"}}), encoding="utf-8")

        response = client.post("/api/config", json={"refreshInterval": 1000})

        assert response.status_code == 200
        assert response.json()["server"] == {"port": 9292, "host": "localhost"}
        assert response.json()["refreshInterval"] == 1000
        assert json.loads(path.read_text(encoding="utf-8")) == response.json()

    @pytest.mark.integration
    def test_invalid_json_is_400(self, client: TestClient) -> None:
        response = client.post("/api/config", content=b"{nope", headers={"Content-Type": "application/json"})

        assert response.status_code == 400
        assert "error" in response.json()


class TestHttpSurface:
    @pytest.mark.integration
    def test_unknown_route_is_json_404(self, client: TestClient) -> None:
        response = client.get("/api/nothing-here")

        assert response.status_code == 404
        assert response.json() == {"error": "Not Found"}

    @pytest.mark.integration
    def test_cors_simple_request(self, client: TestClient) -> None:
        response = client.get("/health", headers={"Origin": "http://example.test"})

        assert response.headers["access-control-allow-origin"] == "*"

    @pytest.mark.integration
    def test_cors_preflight(self, client: TestClient) -> None:
        response = client.options(
            "/api/config",
            headers={
                "Origin": "http://example.test",
                "Access-Control-Request-Method": "POST",
                "Access-Control-Request-Headers": "Content-Type",
            },
        )

        assert response.status_code == 200
        assert response.headers["access-control-allow-origin"] == "*"
        assert "POST" in response.headers["access-control-allow-methods"]

    @pytest.mark.integration
    def test_index_missing_is_404(
        self, client: TestClient, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setattr(api_app_module, "PUBLIC_HTML_DIR", tmp_path / "no-ui")

        response = client.get("/")

        assert response.status_code == 404
        assert "error" in response.json()

    @pytest.mark.integration
    def test_index_served_when_present(
        self, client: TestClient, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        ui = tmp_path / "ui"
        ui.mkdir()
        (ui / "index.html").write_text("<h1>beadboard</h1>", encoding="utf-8")
        monkeypatch.setattr(api_app_module, "PUBLIC_HTML_DIR", ui)

        response = client.get("/")

        assert response.status_code == 200
        assert "text/html" in response.headers["content-type"]
        assert "<h1>beadboard</h1>" in response.text
