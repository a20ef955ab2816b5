"""Route inference for the nested-folder ``app/`` convention.

Only four file names define routes: ``page``, ``layout``, ``template``
and ``route`` with a ``.tsx``, ``.ts``, ``.jsx`` or ``.js`` extension.
The URL comes from the directory segments above the file.

Segment handling:

- Route groups ``(name)``: stripped from the URL, files included
- Parallel slots ``@name``: stripped from the URL, files included
- Private folders ``_name``: entire subtree excluded
- Intercepting ``(.)name``, ``(..)name``, ``(...)name``: kept in the URL
- Dynamic ``[param]``, ``[...param]``, ``[[...param]]``: kept in the URL
"""

import re
from collections.abc import Iterable

from routejumper.routing.ordering import sort_entries
from routejumper.routing.paths import join_route, normalize_path
from routejumper.routing.types import RouteEntry, RouteKind

# Disjoint, so checking order does not matter
_FILE_KIND_PATTERNS: tuple[tuple[re.Pattern[str], RouteKind], ...] = (
    (re.compile(r"^page\.(tsx|ts|jsx|js)$"), RouteKind.PAGE),
    (re.compile(r"^layout\.(tsx|ts|jsx|js)$"), RouteKind.LAYOUT),
    (re.compile(r"^template\.(tsx|ts|jsx|js)$"), RouteKind.TEMPLATE),
    (re.compile(r"^route\.(tsx|ts|jsx|js)$"), RouteKind.ROUTE),
)

# Dots are not allowed inside, so (.)foo and (..)foo never match
_ROUTE_GROUP_RE = re.compile(r"^\([a-zA-Z0-9_-]+\)$")


def _file_kind(file_name: str) -> RouteKind | None:
    for pattern, kind in _FILE_KIND_PATTERNS:
        if pattern.match(file_name):
            return kind
    return None


def _is_url_segment(segment: str) -> bool:
    """Whether a directory segment contributes to the URL."""
    if _ROUTE_GROUP_RE.match(segment):
        return False
    return not segment.startswith("@")


def compute_app_route(file_path: str) -> RouteEntry | None:
    """Classify one file path relative to the ``app/`` directory.

    Returns ``None`` when the file is not a route convention file or
    lives inside a private folder.
    """
    normalized = normalize_path(file_path)
    *dir_segments, file_name = normalized.split("/")

    kind = _file_kind(file_name)
    if kind is None:
        return None

    if any(segment.startswith("_") for segment in dir_segments):
        return None

    route_segments = [s for s in dir_segments if _is_url_segment(s)]
    return RouteEntry(
        route_path=join_route(route_segments),
        file_path=normalized,
        kind=kind,
    )


def discover_app_routes(file_paths: Iterable[str]) -> list[RouteEntry]:
    """Classify every path relative to ``app/`` and return the routes sorted.

    Args:
        file_paths: Paths relative to the ``app/`` directory.

    Returns:
        Sorted list of :class:`RouteEntry`; unrecognized files are dropped.
    """
    results: list[RouteEntry] = []
    for file_path in file_paths:
        entry = compute_app_route(file_path)
        if entry is not None:
            results.append(entry)
    return sort_entries(results)
