"""Routejumper — infer URL routes from app/ and pages/ source trees.

Turns the files of a nested-folder (``app/``) and a flat-file
(``pages/``) routing convention into one sorted, deduplicated route list,
and maps a chosen route back to its file.

Basic usage::

    from routejumper import discover_app_routes, discover_pages_routes, merge_routes

    app_routes = discover_app_routes(["page.tsx", "blog/[slug]/page.tsx"])
    pages_routes = discover_pages_routes(["index.tsx", "api/users.ts"])
    routes = merge_routes(app_routes, pages_routes)

Scanning a workspace on disk::

    from routejumper import build_index, scan_workspace_sync

    index = build_index(scan_workspace_sync("."))
"""

from importlib import import_module

__version__ = "0.1.0"
__all__ = [
    "ConfigurationError",
    "JumperConfig",
    "NoRoutesFound",
    "NotAProject",
    "RouteEntry",
    "RouteIndex",
    "RouteJumperError",
    "RouteKind",
    "UnresolvableRoute",
    "WorkspaceNotFound",
    "build_index",
    "compute_app_route",
    "compute_pages_route",
    "discover_app_routes",
    "discover_pages_routes",
    "merge_routes",
    "scan_workspace",
    "scan_workspace_sync",
    "sort_entries",
]

# Public name -> defining module.  Keeps ``import routejumper`` cheap.
_LAZY_IMPORTS: dict[str, str] = {
    "ConfigurationError": "routejumper.errors",
    "NoRoutesFound": "routejumper.errors",
    "NotAProject": "routejumper.errors",
    "RouteJumperError": "routejumper.errors",
    "UnresolvableRoute": "routejumper.errors",
    "WorkspaceNotFound": "routejumper.errors",
    "JumperConfig": "routejumper.config",
    "RouteEntry": "routejumper.routing.types",
    "RouteKind": "routejumper.routing.types",
    "compute_app_route": "routejumper.routing.nested",
    "discover_app_routes": "routejumper.routing.nested",
    "compute_pages_route": "routejumper.routing.flat",
    "discover_pages_routes": "routejumper.routing.flat",
    "merge_routes": "routejumper.routing.merge",
    "sort_entries": "routejumper.routing.ordering",
    "RouteIndex": "routejumper.workspace.index",
    "build_index": "routejumper.workspace.index",
    "scan_workspace": "routejumper.workspace.scan",
    "scan_workspace_sync": "routejumper.workspace.scan",
}


def __getattr__(name: str) -> object:
    """Lazy imports for public API."""
    module_name = _LAZY_IMPORTS.get(name)
    if module_name is None:
        msg = f"module {__name__!r} has no attribute {name!r}"
        raise AttributeError(msg)
    return getattr(import_module(module_name), name)
