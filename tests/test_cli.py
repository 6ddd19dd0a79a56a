"""Tests for roost.cli — CLI entrypoint and the routes command."""

import json
import types

import pytest

from roost.cli import main
from roost.config import ServerConfig
from roost.server import Server


@pytest.fixture
def _fake_server_module(monkeypatch: pytest.MonkeyPatch) -> None:
    server = Server(ServerConfig(default_auth="session"))

    @server.route("/users/{id}", description="Fetch a user")
    def get_user():
        return "user"

    @server.route("/admin", auth="token", scope="admin")
    def admin():
        return "admin"

    mod = types.ModuleType("_fake_roost_cli")
    mod.server = server  # type: ignore[attr-defined]
    mod.empty = Server()  # type: ignore[attr-defined]
    monkeypatch.setitem(__import__("sys").modules, "_fake_roost_cli", mod)


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_routes_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "--help"])
        assert exc_info.value.code == 0


class TestCLIMissingArgs:
    def test_routes_missing_app(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes"])
        assert exc_info.value.code == 2


class TestCLINoCommand:
    def test_no_command_exits_zero(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "roost" in capsys.readouterr().out


@pytest.mark.usefixtures("_fake_server_module")
class TestRoutesCommand:
    def test_plain_listing(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_roost_cli", "--no-color"])
        out = capsys.readouterr().out.splitlines()

        assert out[0] == "http://127.0.0.1:8000"
        assert out[1].split() == ["GET", "/admin"]
        assert out[2].split() == ["GET", "/users/{id}", "Fetch", "a", "user"]

    def test_auth_and_scope_flags(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_roost_cli:server", "--auth", "--scope", "--no-color"])
        out = capsys.readouterr().out.splitlines()

        assert out[1].split() == ["GET", "/admin", "token", "admin"]
        assert out[2].split() == ["GET", "/users/{id}", "session", "none", "Fetch", "a", "user"]

    def test_forced_color(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_roost_cli", "--color"])
        assert "\033[32m" in capsys.readouterr().out

    def test_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_roost_cli", "--json", "--auth"])
        data = json.loads(capsys.readouterr().out)

        assert data[0]["uri"] == "http://127.0.0.1:8000"
        assert data[0]["routes"][0] == {
            "method": "GET",
            "path": "/admin",
            "description": "",
            "auth": "token",
        }
        assert "scope" not in data[0]["routes"][1]

    def test_empty_server(self, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", "_fake_roost_cli:empty", "--no-color"])
        captured = capsys.readouterr()

        assert "No routes registered." in captured.err
        assert captured.out == "http://127.0.0.1:8000\n"

    def test_unresolvable_app(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "nonexistent_module_xyz:server"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err
