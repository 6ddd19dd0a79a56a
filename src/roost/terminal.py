"""Terminal presentation for rendered route listings.

Maps each span's ``Tone`` to ANSI styling.  Respects TTY detection and
the ``NO_COLOR`` convention: no escape codes when piped or redirected.

Example output (with color)::

    http://127.0.0.1:8000            (underlined, cyan)
      GET             /users/{id}    (green method, gray {id})
"""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable

from roost.render import Line, Span, Tone


def use_color(stream: object | None = None) -> bool:
    """True if the output stream supports ANSI color."""
    if os.environ.get("NO_COLOR"):
        return False
    s = stream or sys.stdout
    try:
        return s.isatty()  # type: ignore[union-attr]
    except Exception:
        return False


class _Palette:
    """ANSI escape sequences — empty strings when color is disabled."""

    __slots__ = (
        "cyan",
        "gray",
        "green",
        "red",
        "reset",
        "underline",
        "yellow",
    )

    def __init__(self, *, enabled: bool) -> None:
        if enabled:
            self.reset = "\033[0m"
            self.underline = "\033[4m"
            self.red = "\033[31m"
            self.green = "\033[32m"
            self.yellow = "\033[33m"
            self.cyan = "\033[36m"
            self.gray = "\033[90m"
        else:
            self.reset = ""
            self.underline = ""
            self.red = ""
            self.green = ""
            self.yellow = ""
            self.cyan = ""
            self.gray = ""

    def style(self, tone: Tone) -> str:
        """Opening escape sequence for a tone."""
        match tone:
            case Tone.TITLE:
                return f"{self.cyan}{self.underline}"
            case Tone.POSITIVE:
                return self.green
            case Tone.NEGATIVE:
                return self.red
            case Tone.MUTED:
                return self.gray
            case Tone.WARNING:
                return self.yellow
            case _:
                return ""


def _format_span(span: Span, c: _Palette) -> str:
    opening = c.style(span.tone)
    # Empty text stays empty so an unset description adds no codes
    if not opening or not span.text:
        return span.text
    return f"{opening}{span.text}{c.reset}"


def format_lines(lines: Iterable[Line], *, color: bool | None = None) -> str:
    """Join rendered lines into text, one ``\\n``-terminated line each.

    Args:
        lines: Output of ``roost.render.render()``.
        color: Force color on/off.  ``None`` auto-detects from stdout.
    """
    use = color if color is not None else use_color()
    c = _Palette(enabled=use)
    return "".join(
        "".join(_format_span(span, c) for span in line) + "\n" for line in lines
    )


def plain_text(lines: Iterable[Line]) -> str:
    """Passthrough rendering for non-terminal consumers."""
    return format_lines(lines, color=False)
