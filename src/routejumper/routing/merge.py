"""Merge ``app/`` and ``pages/`` routes.

When both conventions define the same route path *and* kind, the
``app/`` entry wins and the ``pages/`` entry is dropped.  Different
kinds at the same path (an app layout over a pages page) both survive.
"""

from collections.abc import Iterable, Sequence

from routejumper.routing.ordering import sort_entries
from routejumper.routing.types import RouteEntry, RouteKind


def _key(entry: RouteEntry) -> tuple[str, RouteKind]:
    return entry.route_path, entry.kind


def merge_routes(
    app_routes: Sequence[RouteEntry],
    pages_routes: Iterable[RouteEntry],
) -> list[RouteEntry]:
    """Union two entry collections with ``app_routes`` taking precedence.

    Args:
        app_routes: Entries from the nested convention (primary).
        pages_routes: Entries from the flat convention (secondary).

    Returns:
        Sorted merged list.
    """
    app_keys = {_key(entry) for entry in app_routes}
    merged = list(app_routes)
    merged.extend(entry for entry in pages_routes if _key(entry) not in app_keys)
    return sort_entries(merged)


def app_file_paths(app_routes: Iterable[RouteEntry]) -> frozenset[str]:
    """File paths that came from the ``app/`` convention.

    Used to decide which root directory a merged entry resolves against.
    """
    return frozenset(entry.file_path for entry in app_routes)
