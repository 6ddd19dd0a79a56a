"""Locate the roost Server named on the command line."""

import pkgutil

from roost.server import Server

DEFAULT_ATTRIBUTE = "server"


def resolve_server(target: str) -> Server:
    """Resolve ``"package.module:attribute"`` to a Server.

    ``"myapp"`` means ``"myapp:server"``.  Dotted attribute paths after
    the colon are followed (``"myapp:hosts.public"``).  A callable that
    is not a Server is treated as a factory and called with no
    arguments.

    Raises:
        ModuleNotFoundError: The module part cannot be imported.
        AttributeError: The attribute path does not exist.
        TypeError: The target is neither a Server nor a factory for one.
    """
    if ":" not in target:
        target = f"{target}:{DEFAULT_ATTRIBUTE}"
    found = pkgutil.resolve_name(target)

    if isinstance(found, Server):
        return found
    if not callable(found):
        msg = f"{target!r} is a {type(found).__name__}, expected a roost.Server instance"
        raise TypeError(msg)

    try:
        built = found()
    except Exception as exc:
        msg = f"Server factory {target!r} failed: {exc}"
        raise TypeError(msg) from exc
    if not isinstance(built, Server):
        msg = f"Server factory {target!r} returned {type(built).__name__}, expected a roost.Server instance"
        raise TypeError(msg)
    return built
