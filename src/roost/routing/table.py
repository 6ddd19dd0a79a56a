"""Ordered route table with freeze-on-start semantics.

Routes are registered during setup and frozen into an immutable
snapshot when the host starts.  Registration order is preserved; the
listing relies on it as the tie-break for equal paths.
"""

import re

from roost.errors import ConfigurationError
from roost.routing.route import Route

# RFC 9110 token characters, the set an HTTP method may use
_METHOD_RE = re.compile(r"^[!#$%&'*+\-.^_`|~0-9A-Za-z]+$")
_FLASK_PARAM_RE = re.compile(r"<[^/<>]+>")


def validate_path(path: str) -> None:
    """Check a route path template.

    Paths start with ``/`` and mark parameters as whole ``{param}``
    segments, e.g. ``/users/{id}``.

    Raises ``ConfigurationError`` for a missing leading slash,
    Flask-style ``<param>`` segments, and unbalanced braces.
    """
    if not path.startswith("/"):
        msg = f"Route path {path!r} must start with '/'"
        raise ConfigurationError(msg)
    if _FLASK_PARAM_RE.search(path):
        msg = (
            f"Route path {path!r} uses <param> placeholders. "
            "Use {param} instead, e.g. /users/{id}."
        )
        raise ConfigurationError(msg)

    for part in path.split("/"):
        if part.startswith("{") and part.endswith("}"):
            continue
        if "{" in part or "}" in part:
            msg = f"Route path {path!r} has an unbalanced placeholder in segment {part!r}"
            raise ConfigurationError(msg)


class RouteTable:
    """Ordered, freezable route table.

    Usage::

        table = RouteTable()
        table.add(Route("GET", "/users"))
        table.add(Route("GET", "/users/{id}"))
        table.compile()
        routes = table.snapshot()
    """

    __slots__ = ("_compiled", "_routes")

    def __init__(self) -> None:
        self._routes: list[Route] = []
        self._compiled = False

    def add(self, route: Route) -> None:
        """Add a route to the table. Must be called before compile()."""
        if self._compiled:
            msg = "Cannot add routes after compilation."
            raise RuntimeError(msg)
        if not _METHOD_RE.match(route.method):
            msg = f"Invalid HTTP method {route.method!r} for route {route.path!r}"
            raise ConfigurationError(msg)
        validate_path(route.path)
        self._routes.append(route)

    def snapshot(self) -> tuple[Route, ...]:
        """Read-only view of the table, safe to hand to introspection."""
        return tuple(self._routes)

    def compile(self) -> None:
        """Freeze the table. No more routes can be added."""
        self._compiled = True

    def __len__(self) -> int:
        return len(self._routes)
