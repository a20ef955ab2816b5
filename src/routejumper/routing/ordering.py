"""Deterministic ordering of route entries.

Entries sort by route path under the Unicode Collation Algorithm, then
by kind: page, layout, template, route.  Collation ignores case at the
primary level, so ``/apple`` sorts before ``/Zoo``, and punctuation sorts
before letters.  The ordering does not depend on process locale state.
"""

from collections.abc import Iterable
from functools import cache

from pyuca import Collator

from routejumper.routing.types import RouteEntry, RouteKind

KIND_SORT_ORDER: dict[RouteKind, int] = {
    RouteKind.PAGE: 0,
    RouteKind.LAYOUT: 1,
    RouteKind.TEMPLATE: 2,
    RouteKind.ROUTE: 3,
}


@cache
def _collator() -> Collator:
    # Loads the bundled collation table once
    return Collator()


def collation_key(route_path: str) -> tuple[int, ...]:
    """Collation key for a route path."""
    return _collator().sort_key(route_path)


def sort_key(entry: RouteEntry) -> tuple[tuple[int, ...], int]:
    return collation_key(entry.route_path), KIND_SORT_ORDER[entry.kind]


def sort_entries(entries: Iterable[RouteEntry]) -> list[RouteEntry]:
    """Return a new, stably sorted list of *entries*."""
    return sorted(entries, key=sort_key)
