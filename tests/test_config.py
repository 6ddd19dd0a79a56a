"""Tests for roost.config — ListingConfig and ServerConfig."""

import pytest

from roost.config import ListingConfig, ServerConfig
from roost.errors import ConfigurationError


class TestListingConfig:
    def test_defaults(self) -> None:
        cfg = ListingConfig()

        assert cfg.show_auth is False
        assert cfg.show_scope is False
        assert cfg.show_start is True

    def test_override(self) -> None:
        cfg = ListingConfig(show_auth=True, show_scope=True, show_start=False)

        assert cfg.show_auth is True
        assert cfg.show_scope is True
        assert cfg.show_start is False

    def test_frozen(self) -> None:
        cfg = ListingConfig()

        with pytest.raises(AttributeError):
            cfg.show_auth = True  # type: ignore[misc]


class TestFromMapping:
    def test_none_gives_defaults(self) -> None:
        assert ListingConfig.from_mapping(None) == ListingConfig()

    def test_empty_gives_defaults(self) -> None:
        assert ListingConfig.from_mapping({}) == ListingConfig()

    def test_snake_case_keys(self) -> None:
        cfg = ListingConfig.from_mapping({"show_auth": True, "show_start": False})

        assert cfg == ListingConfig(show_auth=True, show_start=False)

    def test_camel_case_aliases(self) -> None:
        cfg = ListingConfig.from_mapping({"showAuth": True, "showScope": True, "showStart": False})

        assert cfg == ListingConfig(show_auth=True, show_scope=True, show_start=False)

    def test_unknown_option(self) -> None:
        with pytest.raises(ConfigurationError, match="Unknown listing option 'showColors'"):
            ListingConfig.from_mapping({"showColors": True})

    def test_unknown_option_lists_allowed(self) -> None:
        with pytest.raises(ConfigurationError) as exc_info:
            ListingConfig.from_mapping({"verbose": True})
        assert "show_auth" in str(exc_info.value)

    def test_non_bool_value(self) -> None:
        with pytest.raises(ConfigurationError, match="must be a bool"):
            ListingConfig.from_mapping({"show_auth": "yes"})

    def test_int_is_not_bool(self) -> None:
        with pytest.raises(ConfigurationError, match="got int"):
            ListingConfig.from_mapping({"show_scope": 1})

    def test_duplicate_via_alias(self) -> None:
        with pytest.raises(ConfigurationError, match="more than once"):
            ListingConfig.from_mapping({"show_auth": True, "showAuth": False})

    def test_not_a_mapping(self) -> None:
        with pytest.raises(ConfigurationError, match="must be a mapping"):
            ListingConfig.from_mapping(["show_auth"])  # type: ignore[arg-type]


class TestServerConfig:
    def test_defaults(self) -> None:
        cfg = ServerConfig()

        assert cfg.host == "127.0.0.1"
        assert cfg.port == 8000
        assert cfg.default_auth is None

    def test_uri(self) -> None:
        assert ServerConfig().uri == "http://127.0.0.1:8000"
        assert ServerConfig(host="0.0.0.0", port=443, scheme="https").uri == "https://0.0.0.0:443"
