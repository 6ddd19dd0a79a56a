"""Route and auth settings frozen dataclasses."""

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

from roost.errors import ConfigurationError


@dataclass(frozen=True, slots=True)
class AuthAccess:
    """One access rule of a route's auth settings.

    ``scope`` is the scope selection the rule requires; empty when the
    rule restricts nothing by scope.
    """

    scope: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class AuthSettings:
    """Auth settings declared explicitly on a route.

    A route with ``auth=None`` declares nothing and inherits the host
    default; ``auth=False`` disables auth; an ``AuthSettings`` names the
    strategies (and optional access rules) that apply.
    """

    strategies: tuple[str, ...] = ()
    access: tuple[AuthAccess, ...] = ()


RouteAuth = AuthSettings | Literal[False] | None


@dataclass(frozen=True, slots=True)
class Route:
    """A frozen route definition: one HTTP method on one path.

    Created during host setup, frozen into the route table at start.
    """

    method: str
    path: str
    description: str | None = None
    auth: RouteAuth = None


def normalize_auth(
    auth: AuthSettings | str | Sequence[str] | Literal[False] | None,
    *,
    scope: Sequence[str] | str | None = None,
) -> RouteAuth:
    """Coerce the shorthand auth forms accepted by ``Server.route()``.

    ``"session"`` and ``["session", "token"]`` become ``AuthSettings``;
    ``scope`` adds a single access rule.  ``None`` and ``False`` pass
    through unchanged.
    """
    if auth is None or auth is False:
        if scope:
            msg = f"A route scope requires auth strategies (got auth={auth!r})"
            raise ConfigurationError(msg)
        return auth
    if auth is True:
        msg = "auth=True is ambiguous; name the strategy, e.g. auth='session'"
        raise ConfigurationError(msg)

    if isinstance(auth, AuthSettings):
        settings = auth
    elif isinstance(auth, str):
        settings = AuthSettings(strategies=(auth,))
    else:
        settings = AuthSettings(strategies=tuple(auth))

    if scope:
        selection = (scope,) if isinstance(scope, str) else tuple(scope)
        settings = AuthSettings(
            strategies=settings.strategies,
            access=(AuthAccess(scope=selection), *settings.access),
        )
    return settings
