"""Tests for the Application composition root and the server starter."""

from __future__ import annotations

import os
from pathlib import Path

import pytest
from conftest import FakeRunner, make_rig
from rich.console import Console

from beadboard.app import Application
from beadboard.helpers.dto.board_config_dto import BoardConfigUpdate
from beadboard.interfaces.cli import show_startup_banner
from beadboard.services.config_svc import ConfigService
from beadboard.start import build_parser, main, resolve_bind


@pytest.fixture(autouse=True)
def _no_env_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    for key in list(os.environ):
        if key.startswith("BEADBOARD_"):
            monkeypatch.delenv(key, raising=False)


def _application(town: Path, tmp_path: Path) -> Application:
    config = ConfigService(
        overrides={"town_root": str(town), "board_config_path": str(tmp_path / "config.json")}
    )
    return Application(config, runner=FakeRunner())


class TestApplication:
    @pytest.mark.unit
    def test_registers_services(self, town: Path, tmp_path: Path) -> None:
        application = _application(town, tmp_path)

        for name in ("config", "registry", "filter_config", "beads", "town", "info"):
            assert application.get_service(name) is application.services[name]

    @pytest.mark.unit
    def test_unknown_service_lists_available(self, town: Path, tmp_path: Path) -> None:
        application = _application(town, tmp_path)

        with pytest.raises(KeyError, match="Available services"):
            application.get_service("nope")

    @pytest.mark.unit
    def test_registry_built_from_town(self, town: Path, tmp_path: Path) -> None:
        make_rig(town, "gastown")

        application = _application(town, tmp_path)

        assert application.town_root == str(town)
        assert application.registry.locations() == [str(town / ".beads"), str(town / "gastown" / ".beads")]

    @pytest.mark.unit
    def test_town_discovered_from_cwd(self, town: Path, tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
        crew = town / "gastown" / "crew" / "max"
        crew.mkdir(parents=True)
        monkeypatch.chdir(crew)

        application = Application(
            ConfigService(overrides={"board_config_path": str(tmp_path / "config.json")}),
            runner=FakeRunner(),
        )

        assert application.town_root == str(town.resolve())


class TestStarter:
    @pytest.mark.unit
    def test_parser_defaults(self) -> None:
        args = build_parser().parse_args([])

        assert args.port == 0
        assert args.host == ""
        assert args.town is None
        assert args.open is False

    @pytest.mark.unit
    def test_bind_defaults(self, town: Path, tmp_path: Path) -> None:
        assert resolve_bind(_application(town, tmp_path)) == ("localhost", 9292)

    @pytest.mark.unit
    def test_bind_uses_stored_config(self, town: Path, tmp_path: Path) -> None:
        application = _application(town, tmp_path)
        application.filter_config.update(BoardConfigUpdate(port=8500, host="0.0.0.0"))

        assert resolve_bind(application) == ("0.0.0.0", 8500)

    @pytest.mark.unit
    def test_flags_beat_stored_config(self, town: Path, tmp_path: Path) -> None:
        application = _application(town, tmp_path)
        application.filter_config.update(BoardConfigUpdate(port=8500, host="0.0.0.0"))

        assert resolve_bind(application, 7000, "127.0.0.1") == ("127.0.0.1", 7000)
        assert resolve_bind(application, 7000) == ("0.0.0.0", 7000)

    @pytest.mark.unit
    def test_missing_town_flag_exits(self, tmp_path: Path) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--town", str(tmp_path / "missing")])

        assert exc_info.value.code == 2


@pytest.mark.unit
def test_startup_banner_lists_url_and_sources() -> None:
    target = Console(record=True, width=100)

    show_startup_banner("http://localhost:9292/", "/srv/town", 3, target=target)

    text = target.export_text()
    assert "http://localhost:9292/" in text
    assert "/srv/town" in text
    assert "3 bead location(s)" in text
