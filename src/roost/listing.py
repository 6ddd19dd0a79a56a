"""Route listing plugin.

Exposes ``text()`` and ``info()`` on a host server and, unless
disabled, prints the listing once when the server starts.

Usage::

    from roost import Server, register

    server = Server()
    listing = register(server, {"show_auth": True})

    print(listing.text())
    server.plugins["roost"].info()
"""

import logging
import sys
from collections.abc import Mapping, Sequence
from typing import IO, TYPE_CHECKING, Any

from roost.collector import ConnectionInfo, RoutingSource, collect_all
from roost.config import ListingConfig
from roost.ordering import use_environment_collation
from roost.render import Line, render
from roost.terminal import format_lines, use_color

if TYPE_CHECKING:
    from roost.server import Server

logger = logging.getLogger("roost.listing")

PLUGIN_NAME = "roost"


class RouteListing:
    """Collects, orders, and renders the routes of one or more sources.

    Nothing is cached: every call reads fresh snapshots.
    """

    __slots__ = ("_color", "_sources", "_stream", "config")

    def __init__(
        self,
        sources: Sequence[RoutingSource],
        config: ListingConfig | None = None,
        *,
        stream: IO[str] | None = None,
        color: bool | None = None,
    ) -> None:
        self._sources = sources
        self.config: ListingConfig = config or ListingConfig()
        self._stream = stream
        self._color = color

    @property
    def stream(self) -> IO[str]:
        # Resolved per call so a replaced sys.stdout is honored
        return self._stream or sys.stdout

    def info(self) -> list[ConnectionInfo]:
        """Collected and sorted route data, one entry per connection."""
        return collect_all(self._sources, self.config)

    def lines(self) -> list[Line]:
        """Rendered spans for every connection, before styling."""
        return render(self.info(), self.config)

    def text(self, *, color: bool | None = None) -> str:
        """Full listing as text.

        Args:
            color: Force color on/off.  ``None`` uses the listing's
                setting, else auto-detects from its output stream.
        """
        if color is None:
            color = self._color
        if color is None:
            color = use_color(self.stream)
        return format_lines(self.lines(), color=color)

    def write(self) -> None:
        """Write ``text()`` plus a blank separator line to the output stream.

        ``text()`` already ends each line with ``\\n``; the extra newline
        sets the listing apart from the server's startup output.
        """
        out = self.text()
        self.stream.write(out + "\n")
        self.stream.flush()


def register(
    server: "Server",
    options: Mapping[str, Any] | ListingConfig | None = None,
    *,
    stream: IO[str] | None = None,
    color: bool | None = None,
) -> RouteListing:
    """Attach a route listing to *server*.

    Validates *options* before touching the server, exposes the listing
    as ``server.plugins["roost"]``, and subscribes the start hook when
    ``show_start`` is enabled.

    Raises:
        ConfigurationError: *options* failed validation.
    """
    if isinstance(options, ListingConfig):
        config = options
    else:
        config = ListingConfig.from_mapping(options)

    use_environment_collation()
    listing = RouteListing(server.connections, config, stream=stream, color=color)
    server.expose(PLUGIN_NAME, listing)

    if config.show_start:

        @server.on_startup
        def _print_routes() -> None:
            logger.info("Printing route listing for %d connection(s)", len(server.connections))
            listing.write()

    logger.debug("Registered route listing: %s", config)
    return listing
