"""Route collection — routing-table snapshots into RouteRecords.

Reads each source's snapshot once, normalizes every entry into a
``RouteRecord`` and hands the list to ``roost.ordering``.  Auth and
scope resolution run only when the matching column is enabled.
"""

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from typing import Any, Literal, Protocol, runtime_checkable

from roost.config import ListingConfig
from roost.ordering import sort_records
from roost.routing.route import AuthSettings, Route, RouteAuth

logger = logging.getLogger("roost.collector")

# "none configured": no concrete strategy or scope applies
NotConfigured = Literal[False]


@runtime_checkable
class RoutingSource(Protocol):
    """Read-only view of one listener's routing table."""

    @property
    def uri(self) -> str: ...

    @property
    def default_auth(self) -> str | Sequence[str] | None: ...

    def snapshot(self) -> Sequence[Route]: ...


@dataclass(frozen=True, slots=True)
class RouteRecord:
    """Normalized listing row for one (method, path) entry.

    ``auth`` and ``scope`` are ``None`` when their column is disabled,
    ``False`` when enabled but nothing is configured.
    """

    method: str
    path: str
    description: str = ""
    auth: str | NotConfigured | None = None
    scope: str | NotConfigured | None = None

    def to_dict(self) -> dict[str, Any]:
        """JSON-ready mapping; disabled columns are omitted."""
        data: dict[str, Any] = {
            "method": self.method,
            "path": self.path,
            "description": self.description,
        }
        if self.auth is not None:
            data["auth"] = self.auth
        if self.scope is not None:
            data["scope"] = self.scope
        return data


@dataclass(frozen=True, slots=True)
class ConnectionInfo:
    """Sorted route records served under one base URI."""

    uri: str
    routes: tuple[RouteRecord, ...] = ()

    def to_dict(self) -> dict[str, Any]:
        return {"uri": self.uri, "routes": [r.to_dict() for r in self.routes]}


def _join(value: str | Iterable[str]) -> str:
    if isinstance(value, str):
        return value
    return ",".join(str(v) for v in value)


def resolve_auth_strategy(
    route_auth: RouteAuth,
    default: str | Sequence[str] | None,
) -> str | NotConfigured:
    """Effective auth strategy for one route.

    Precedence:
        1. Route declares nothing (``None``): the host default, if any.
        2. Route disables auth (``False``) or declares no strategies:
           not configured.
        3. Route declares strategies: joined with ``,``.
    """
    if route_auth is None:
        if not default:
            return False
        return _join(default) or False
    if route_auth is False or not route_auth.strategies:
        return False
    return _join(route_auth.strategies)


def resolve_auth_scope(route_auth: RouteAuth) -> str | NotConfigured:
    """Scope selection of the route's first access rule.

    Later access rules are ignored.  A first rule with an empty
    selection counts as not configured.
    """
    if not isinstance(route_auth, AuthSettings) or not route_auth.access:
        return False
    return _join(route_auth.access[0].scope) or False


def build_record(
    route: Route,
    config: ListingConfig,
    default_auth: str | Sequence[str] | None = None,
) -> RouteRecord:
    """Normalize one table entry."""
    auth: str | NotConfigured | None = None
    scope: str | NotConfigured | None = None
    if config.show_auth:
        auth = resolve_auth_strategy(route.auth, default_auth)
    if config.show_scope:
        scope = resolve_auth_scope(route.auth)
    return RouteRecord(
        method=route.method.upper(),
        path=route.path,
        description=route.description or "",
        auth=auth,
        scope=scope,
    )


def collect(source: RoutingSource, config: ListingConfig) -> ConnectionInfo:
    """Collect and sort the routes of one source."""
    default_auth = source.default_auth if config.show_auth else None
    records = [build_record(route, config, default_auth) for route in source.snapshot()]
    logger.debug("Collected %d route(s) from %s", len(records), source.uri)
    return ConnectionInfo(uri=source.uri, routes=sort_records(records))


def collect_all(sources: Iterable[RoutingSource], config: ListingConfig) -> list[ConnectionInfo]:
    """One ``ConnectionInfo`` per source, in source order."""
    return [collect(source, config) for source in sources]
