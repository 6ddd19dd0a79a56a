"""Roost host server.

A minimal in-process host that owns route tables and lifecycle hooks.
Mutable during setup (route registration, connections, hooks, plugins).
Frozen when ``start()`` is first awaited.
"""

import inspect
import logging
import threading
from collections.abc import Callable, Sequence
from typing import Any, Literal

from roost.config import ServerConfig
from roost.routing.route import AuthSettings, Route, normalize_auth
from roost.routing.table import RouteTable

logger = logging.getLogger("roost.server")

Handler = Callable[..., Any]
AuthOption = AuthSettings | str | Sequence[str] | Literal[False] | None


class Connection:
    """One listener of a server: a base URI and its own route table.

    Implements the ``RoutingSource`` protocol consumed by the listing.
    """

    __slots__ = ("_server", "_table", "uri")

    def __init__(self, server: "Server", uri: str) -> None:
        self._server = server
        self._table = RouteTable()
        self.uri = uri

    @property
    def default_auth(self) -> str | Sequence[str] | None:
        """Host-wide default strategy, shared by every connection."""
        return self._server.config.default_auth

    def snapshot(self) -> tuple[Route, ...]:
        return self._table.snapshot()

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
        description: str | None = None,
        auth: AuthOption = None,
        scope: Sequence[str] | str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a route on this connection only.

        Same arguments as ``Server.route()``.
        """

        def decorator(func: Handler) -> Handler:
            self._server._check_not_started()
            self._add(path, methods, description, auth, scope)
            return func

        return decorator

    def _add(
        self,
        path: str,
        methods: list[str] | None,
        description: str | None,
        auth: AuthOption,
        scope: Sequence[str] | str | None,
    ) -> None:
        settings = normalize_auth(auth, scope=scope)
        # One table entry per method, in the order given
        for method in methods or ["GET"]:
            self._table.add(
                Route(
                    method=method.upper(),
                    path=path,
                    description=description,
                    auth=settings,
                )
            )

    def __repr__(self) -> str:
        return f"Connection(uri={self.uri!r}, routes={len(self._table)})"


class Server:
    """The roost host server.

    Mutable during setup.  Frozen when ``start()`` is first awaited:
    route tables stop accepting routes and startup hooks run in
    registration order.

    Usage::

        server = Server(ServerConfig(port=3000, default_auth="session"))

        @server.route("/users/{id}", description="Fetch a user")
        def get_user(): ...

        await server.start()
    """

    __slots__ = (
        "_freeze_lock",
        "_frozen",
        "_shutdown_hooks",
        "_started",
        "_startup_hooks",
        "config",
        "connections",
        "plugins",
    )

    def __init__(
        self,
        config: ServerConfig | None = None,
        *,
        uris: Sequence[str] = (),
    ) -> None:
        self.config: ServerConfig = config or ServerConfig()
        self.connections: list[Connection] = [Connection(self, self.config.uri)]
        for uri in uris:
            self.connections.append(Connection(self, uri))
        # Plugin name -> exposed object (e.g. "roost" -> RouteListing)
        self.plugins: dict[str, Any] = {}
        self._startup_hooks: list[Callable[..., Any]] = []
        self._shutdown_hooks: list[Callable[..., Any]] = []
        self._frozen: bool = False
        self._started: bool = False
        self._freeze_lock: threading.Lock = threading.Lock()

    # -- Route registration --

    def connection(self, uri: str) -> Connection:
        """Add another listener.  Routes registered afterwards through
        ``Server.route()`` land on it as well."""
        self._check_not_started()
        conn = Connection(self, uri)
        self.connections.append(conn)
        return conn

    def route(
        self,
        path: str,
        *,
        methods: list[str] | None = None,
        description: str | None = None,
        auth: AuthOption = None,
        scope: Sequence[str] | str | None = None,
    ) -> Callable[[Handler], Handler]:
        """Register a route handler on every connection via decorator.

        Args:
            path: URL path pattern. Use ``{param}`` for path parameters.
            methods: HTTP methods. Defaults to ``["GET"]``.  Each method
                becomes its own table entry.
            description: Free text shown in the route listing.
            auth: ``None`` inherits the server default, ``False`` disables
                auth, a strategy name or list of names sets it explicitly.
            scope: Scope selection required by the route's access rule.
        """

        def decorator(func: Handler) -> Handler:
            self._check_not_started()
            for conn in self.connections:
                conn._add(path, methods, description, auth, scope)
            return func

        return decorator

    def table(self) -> tuple[Route, ...]:
        """Route snapshot of the default connection."""
        return self.connections[0].snapshot()

    @property
    def uri(self) -> str:
        return self.connections[0].uri

    def expose(self, name: str, value: Any) -> None:
        """Publish a plugin's public object as ``server.plugins[name]``."""
        if name in self.plugins:
            msg = f"Plugin {name!r} is already registered on this server"
            raise RuntimeError(msg)
        self.plugins[name] = value

    # -- Lifecycle hooks --

    def on_startup(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync startup hook via decorator.

        Hooks run in registration order once the route tables are frozen.

        Usage::

            @server.on_startup
            async def announce():
                ...
        """
        self._check_not_started()
        self._startup_hooks.append(func)
        return func

    def on_shutdown(self, func: Callable[..., Any]) -> Callable[..., Any]:
        """Register an async or sync shutdown hook via decorator."""
        self._shutdown_hooks.append(func)
        return func

    async def start(self) -> None:
        """Freeze the route tables and run startup hooks.

        Errors raised by a hook propagate to the caller; the server is
        not marked as started in that case.
        """
        if self._started:
            return
        self._ensure_frozen()
        logger.debug(
            "Starting server with %d connection(s), %d startup hook(s)",
            len(self.connections),
            len(self._startup_hooks),
        )
        for hook in self._startup_hooks:
            result = hook()
            if inspect.isawaitable(result):
                await result
        self._started = True

    async def stop(self) -> None:
        """Run shutdown hooks in registration order."""
        if not self._started:
            return
        for hook in self._shutdown_hooks:
            result = hook()
            if inspect.isawaitable(result):
                await result
        self._started = False

    @property
    def started(self) -> bool:
        return self._started

    # -- Internal --

    def _ensure_frozen(self) -> None:
        """Thread-safe freeze with double-check locking."""
        if self._frozen:
            return
        with self._freeze_lock:
            if self._frozen:
                return
            for conn in self.connections:
                conn._table.compile()
            self._frozen = True

    def _check_not_started(self) -> None:
        if self._frozen:
            msg = (
                "Cannot modify the server after it has started. "
                "Register routes, connections, and hooks before calling start()."
            )
            raise RuntimeError(msg)
