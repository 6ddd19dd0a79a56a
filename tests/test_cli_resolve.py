"""Tests for roost.cli._resolve — Server import resolution."""

import types

import pytest

from roost.cli._resolve import resolve_server
from roost.server import Server


def _factory() -> Server:
    return Server()


def _broken_factory() -> Server:
    raise RuntimeError("no config")


def _wrong_factory() -> str:
    return "not a server"


@pytest.fixture
def _fake_server_module(monkeypatch: pytest.MonkeyPatch) -> None:
    """Register a fake module with a roost Server on sys.modules."""
    mod = types.ModuleType("_fake_roost_server")
    mod.server = Server()  # type: ignore[attr-defined]
    mod.custom = Server()  # type: ignore[attr-defined]
    mod.create_server = _factory  # type: ignore[attr-defined]
    mod.broken = _broken_factory  # type: ignore[attr-defined]
    mod.wrong = _wrong_factory  # type: ignore[attr-defined]
    mod.hosts = types.SimpleNamespace(public=Server())  # type: ignore[attr-defined]
    mod.not_a_server = "just a string"  # type: ignore[attr-defined]
    monkeypatch.setitem(__import__("sys").modules, "_fake_roost_server", mod)


@pytest.mark.usefixtures("_fake_server_module")
class TestResolveServer:
    def test_explicit_attribute(self) -> None:
        assert isinstance(resolve_server("_fake_roost_server:server"), Server)

    def test_custom_attribute(self) -> None:
        assert isinstance(resolve_server("_fake_roost_server:custom"), Server)

    def test_default_attribute(self) -> None:
        """Omitting :attr defaults to 'server'."""
        assert isinstance(resolve_server("_fake_roost_server"), Server)

    def test_factory(self) -> None:
        assert isinstance(resolve_server("_fake_roost_server:create_server"), Server)

    def test_factory_error(self) -> None:
        with pytest.raises(TypeError, match="failed: no config"):
            resolve_server("_fake_roost_server:broken")

    def test_dotted_attribute(self) -> None:
        assert isinstance(resolve_server("_fake_roost_server:hosts.public"), Server)

    def test_factory_returning_other_type(self) -> None:
        with pytest.raises(TypeError, match="returned str"):
            resolve_server("_fake_roost_server:wrong")

    def test_missing_module(self) -> None:
        with pytest.raises(ModuleNotFoundError):
            resolve_server("nonexistent_module_xyz:server")

    def test_missing_attribute(self) -> None:
        with pytest.raises(AttributeError):
            resolve_server("_fake_roost_server:does_not_exist")

    def test_wrong_type(self) -> None:
        with pytest.raises(TypeError, match=r"expected a roost\.Server instance"):
            resolve_server("_fake_roost_server:not_a_server")
