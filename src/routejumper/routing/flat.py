"""Route inference for the flat-file ``pages/`` convention.

Every ``.tsx``/``.ts``/``.jsx``/``.js`` file is a route, except the
framework-reserved ``_app``, ``_document`` and ``_error`` files.

Route mapping::

    index.tsx        -> /            (page)
    about.tsx        -> /about       (page)
    blog/index.tsx   -> /blog        (page)
    blog/[slug].tsx  -> /blog/[slug] (page)
    api/users.ts     -> /api/users   (route)
    [[...slug]].tsx  -> /[[...slug]] (page)
"""

import re
from collections.abc import Iterable

from routejumper.routing.ordering import sort_entries
from routejumper.routing.paths import join_route, normalize_path
from routejumper.routing.types import RouteEntry, RouteKind

_JS_EXTENSION_RE = re.compile(r"\.(tsx|ts|jsx|js)$")

_SPECIAL_FILES = frozenset({"_app", "_document", "_error"})

_API_PREFIX = "api"
_INDEX_NAME = "index"


def compute_pages_route(file_path: str) -> RouteEntry | None:
    """Classify one file path relative to the ``pages/`` directory.

    Returns ``None`` for non-script files and reserved special files.
    """
    normalized = normalize_path(file_path)
    if not _JS_EXTENSION_RE.search(normalized):
        return None

    segments = _JS_EXTENSION_RE.sub("", normalized).split("/")
    base_name = segments[-1]
    if base_name in _SPECIAL_FILES:
        return None

    kind = RouteKind.ROUTE if segments[0] == _API_PREFIX else RouteKind.PAGE

    route_segments = segments[:-1] if base_name == _INDEX_NAME else segments
    return RouteEntry(
        route_path=join_route(route_segments),
        file_path=normalized,
        kind=kind,
    )


def discover_pages_routes(file_paths: Iterable[str]) -> list[RouteEntry]:
    """Classify every path relative to ``pages/`` and return the routes sorted."""
    results: list[RouteEntry] = []
    for file_path in file_paths:
        entry = compute_pages_route(file_path)
        if entry is not None:
            results.append(entry)
    return sort_entries(results)
