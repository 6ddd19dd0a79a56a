"""Route table rendering into tagged spans.

The renderer never emits escape codes.  Each line is a tuple of
``Span(text, tone)``; ``roost.terminal`` maps tones to ANSI styling or
drops them for plain output.  Column widths count content characters
only, so styling can never shift the layout.

Column order with auth and scope enabled::

    method(18) path(30) auth(30) scope(50) description
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

from roost.config import ListingConfig

if TYPE_CHECKING:
    from roost.collector import ConnectionInfo, NotConfigured, RouteRecord

METHOD_WIDTH = 18
PATH_WIDTH = 30
AUTH_WIDTH = 30
SCOPE_WIDTH = 50

# Rendered text of the "none configured" sentinel
NONE_LABEL = "none"

_PLACEHOLDER_RE = re.compile(r"({.*?})")


class Tone(Enum):
    """Semantic category of a span; the terminal adapter picks the style."""

    PLAIN = "plain"
    TITLE = "title"
    POSITIVE = "positive"
    NEGATIVE = "negative"
    MUTED = "muted"
    WARNING = "warning"


@dataclass(frozen=True, slots=True)
class Span:
    text: str
    tone: Tone = Tone.PLAIN


Line = tuple[Span, ...]
Column = list[Span]


def ljust(text: str, width: int) -> str:
    """Append spaces until *text* is *width* long.  Never truncates."""
    while len(text) < width:
        text += " "
    return text


def _padded(span: Span, width: int) -> Column:
    """Pad after the styled span with a plain filler span."""
    fill = ljust(span.text, width)[len(span.text):]
    return [span, Span(fill)] if fill else [span]


def format_method(method: str) -> Column:
    return _padded(Span("  " + method.upper(), Tone.POSITIVE), METHOD_WIDTH)


def format_path(path: str) -> Column:
    """Pad, then split ``{param}`` placeholders into muted spans."""
    padded = ljust(path, PATH_WIDTH)
    spans: Column = []
    for i, part in enumerate(_PLACEHOLDER_RE.split(padded)):
        if not part:
            continue
        # re.split puts captured placeholders at odd indexes
        spans.append(Span(part, Tone.MUTED if i % 2 else Tone.PLAIN))
    return spans


def _format_setting(value: str | NotConfigured | None, width: int) -> Column:
    if value is False or value is None:
        span = Span(NONE_LABEL, Tone.NEGATIVE)
    else:
        span = Span(value, Tone.POSITIVE)
    return _padded(span, width)


def format_auth(auth: str | NotConfigured | None) -> Column:
    return _format_setting(auth, AUTH_WIDTH)


def format_scope(scope: str | NotConfigured | None) -> Column:
    return _format_setting(scope, SCOPE_WIDTH)


def format_description(description: str | None) -> Column:
    return [Span(description or "", Tone.WARNING)]


def render_route(record: RouteRecord, config: ListingConfig) -> Line:
    """One listing line.

    Columns start as ``[method, path, description]``; scope and then
    auth are inserted at index 2, giving
    ``[method, path, auth, scope, description]`` with both enabled.
    """
    columns = [
        format_method(record.method),
        format_path(record.path),
        format_description(record.description),
    ]
    if config.show_scope:
        columns.insert(2, format_scope(record.scope))
    if config.show_auth:
        columns.insert(2, format_auth(record.auth))

    spans: Column = []
    for i, column in enumerate(columns):
        if i:
            spans.append(Span(" "))
        spans.extend(column)
    return tuple(spans)


def render_title(connection: ConnectionInfo) -> Line:
    return (Span(connection.uri, Tone.TITLE),)


def render_connection(connection: ConnectionInfo, config: ListingConfig) -> list[Line]:
    """Title line followed by one line per route."""
    lines = [render_title(connection)]
    lines.extend(render_route(record, config) for record in connection.routes)
    return lines


def render(connections: list[ConnectionInfo], config: ListingConfig) -> list[Line]:
    lines: list[Line] = []
    for connection in connections:
        lines.extend(render_connection(connection, config))
    return lines
