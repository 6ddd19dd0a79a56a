"""Roost exception hierarchy.

Shared across the route table, server host, and listing plugin so every
module raises and catches the same types.
"""


class RoostError(Exception):
    """Base for all roost-specific errors."""


class ConfigurationError(RoostError):
    """Raised when listing options or route definitions are invalid.

    Typically raised by ``register()`` before any hook is subscribed,
    or by ``Server.route()`` at registration time.
    """
