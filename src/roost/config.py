"""Listing and server configuration.

Both configs are frozen dataclasses: immutable after creation,
IDE-autocompletable, no string-key dict lookups once validated.
"""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, fields
from typing import Any

from roost.errors import ConfigurationError

# Option names accepted by the original hapi-style plugin API
_ALIASES: dict[str, str] = {
    "showAuth": "show_auth",
    "showScope": "show_scope",
    "showStart": "show_start",
}


@dataclass(frozen=True, slots=True)
class ListingConfig:
    """Route listing options. Immutable after creation.

    Three independent toggles::

        config = ListingConfig(show_auth=True, show_scope=True)
    """

    # Adds the auth column and resolves each route's effective strategy
    show_auth: bool = False
    # Adds the scope column and resolves each route's first access scope
    show_scope: bool = False
    # Prints the listing once when the host server starts
    show_start: bool = True

    @classmethod
    def from_mapping(cls, options: Mapping[str, Any] | None) -> "ListingConfig":
        """Validate a plain options mapping and build a config.

        Accepts snake_case names and the camelCase aliases
        (``showAuth``, ``showScope``, ``showStart``).  Missing keys take
        their defaults.

        Raises:
            ConfigurationError: Unknown option, duplicate option, or a
                value that is not a ``bool``.
        """
        if options is None:
            return cls()
        if not isinstance(options, Mapping):
            msg = f"Listing options must be a mapping, got {type(options).__name__}"
            raise ConfigurationError(msg)

        known = {f.name for f in fields(cls)}
        values: dict[str, bool] = {}
        for key, value in options.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                allowed = ", ".join(sorted(known))
                msg = f"Unknown listing option {key!r}. Allowed options: {allowed}"
                raise ConfigurationError(msg)
            if name in values:
                msg = f"Listing option {name!r} given more than once (as {key!r})"
                raise ConfigurationError(msg)
            if not isinstance(value, bool):
                msg = (
                    f"Listing option {key!r} must be a bool, "
                    f"got {type(value).__name__} ({value!r})"
                )
                raise ConfigurationError(msg)
            values[name] = value
        return cls(**values)


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """Host server configuration. Immutable after creation.

    The default connection URI is built from ``scheme``, ``host`` and
    ``port``::

        config = ServerConfig(port=3000, default_auth="session")
    """

    host: str = "127.0.0.1"
    port: int = 8000
    scheme: str = "http"

    # Host-wide default auth strategy (or strategies) for routes that
    # declare no auth settings of their own
    default_auth: str | Sequence[str] | None = None

    @property
    def uri(self) -> str:
        return f"{self.scheme}://{self.host}:{self.port}"
