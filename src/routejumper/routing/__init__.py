"""Routing — route inference from file-system conventions.

Pure functions over relative path strings.  Nothing here touches the
file system; the workspace layer feeds these functions.
"""

from routejumper.routing.flat import compute_pages_route, discover_pages_routes
from routejumper.routing.merge import app_file_paths, merge_routes
from routejumper.routing.nested import compute_app_route, discover_app_routes
from routejumper.routing.ordering import KIND_SORT_ORDER, sort_entries
from routejumper.routing.paths import normalize_path
from routejumper.routing.types import RouteEntry, RouteKind

__all__ = [
    "KIND_SORT_ORDER",
    "RouteEntry",
    "RouteKind",
    "app_file_paths",
    "compute_app_route",
    "compute_pages_route",
    "discover_app_routes",
    "discover_pages_routes",
    "merge_routes",
    "normalize_path",
    "sort_entries",
]
