"""Roost — route table listings for running servers.

Collects the registered routes of a host server, orders them, and
renders a column-aligned, optionally colored listing.

Basic usage::

    from roost import Server, register

    server = Server()

    @server.route("/users/{id}", description="Fetch a user")
    def get_user():
        ...

    register(server, {"show_auth": True})
    await server.start()   # prints the listing

Programmatic access::

    server.plugins["roost"].info()   # list[ConnectionInfo]
"""

__version__ = "0.1.0-dev"
__all__ = [
    "AuthAccess",
    "AuthSettings",
    "ConfigurationError",
    "ConnectionInfo",
    "ListingConfig",
    "RoostError",
    "Route",
    "RouteListing",
    "RouteRecord",
    "RoutingSource",
    "Server",
    "ServerConfig",
    "register",
]

# Public name -> defining module
_LAZY_IMPORTS: dict[str, str] = {
    "AuthAccess": "roost.routing.route",
    "AuthSettings": "roost.routing.route",
    "ConfigurationError": "roost.errors",
    "ConnectionInfo": "roost.collector",
    "ListingConfig": "roost.config",
    "RoostError": "roost.errors",
    "Route": "roost.routing.route",
    "RouteListing": "roost.listing",
    "RouteRecord": "roost.collector",
    "RoutingSource": "roost.collector",
    "Server": "roost.server",
    "ServerConfig": "roost.config",
    "register": "roost.listing",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API.

    Keeps ``import roost`` fast while providing a clean top-level API.
    """
    module_path = _LAZY_IMPORTS.get(name)
    if module_path is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)

    import importlib

    return getattr(importlib.import_module(module_path), name)


def __dir__() -> list[str]:
    return sorted({*globals(), *__all__})
