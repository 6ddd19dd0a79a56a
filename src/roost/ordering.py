"""Deterministic route ordering.

Paths are compared by reading order: case-folded text collated with
``locale.strxfrm`` first, then the exact path as a case-sensitive
tie-break.  ``/apple`` therefore precedes ``/Users`` even under the
"C" collation every Python process starts in.  Python's sort is
stable, so equal paths keep their routing-table order.
"""

from __future__ import annotations

import locale
import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from roost.collector import RouteRecord

logger = logging.getLogger("roost.ordering")


def use_environment_collation() -> None:
    """Adopt ``LC_COLLATE`` from the environment (``LC_ALL``/``LANG``).

    Called by the entry points (``roost`` CLI, ``register()``).  An
    unavailable locale keeps the current collation.
    """
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as exc:
        logger.debug(
            "Environment collation unavailable (%s); keeping %r",
            exc,
            locale.setlocale(locale.LC_COLLATE),
        )


def path_key(path: str) -> tuple[str, str]:
    """Collation key for a route path."""
    return (locale.strxfrm(path.casefold()), locale.strxfrm(path))


def sort_records(records: Iterable[RouteRecord]) -> tuple[RouteRecord, ...]:
    """Stable sort by path; no secondary key."""
    return tuple(sorted(records, key=lambda record: path_key(record.path)))
