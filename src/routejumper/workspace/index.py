"""Route index — the merged, presentable view of a scanned workspace.

Only the first discovered root per convention is used.  A workspace
holding several independent projects therefore lists the routes of one
``app/`` and one ``pages/`` directory.
"""

import logging
from dataclasses import dataclass
from pathlib import Path

from routejumper.config import JumperConfig
from routejumper.errors import UnresolvableRoute
from routejumper.routing import (
    RouteEntry,
    RouteKind,
    app_file_paths,
    discover_app_routes,
    discover_pages_routes,
    merge_routes,
)
from routejumper.workspace.grouping import group_by_directory
from routejumper.workspace.types import RouteItem, Workspace

logger = logging.getLogger("routejumper.workspace")


@dataclass(frozen=True, slots=True)
class RouteIndex:
    """Merged routes plus what is needed to map them back to files.

    Attributes:
        routes: Merged, sorted entries from both conventions.
        app_routes: Sorted entries from the ``app/`` convention.
        pages_routes: Sorted entries from the ``pages/`` convention.
        app_root: The ``app/`` directory used, if any.
        pages_root: The ``pages/`` directory used, if any.
    """

    routes: tuple[RouteEntry, ...] = ()
    app_routes: tuple[RouteEntry, ...] = ()
    pages_routes: tuple[RouteEntry, ...] = ()
    app_root: Path | None = None
    pages_root: Path | None = None

    def is_app_router(self, entry: RouteEntry) -> bool:
        return entry.file_path in app_file_paths(self.app_routes)

    def resolve(self, entry: RouteEntry) -> Path:
        """Absolute path of the file behind *entry*.

        Raises:
            UnresolvableRoute: If the entry's convention root is unknown.
        """
        base = self.app_root if self.is_app_router(entry) else self.pages_root
        if base is None:
            msg = f"Could not resolve file path for {entry.route_path} ({entry.file_path})"
            raise UnresolvableRoute(msg)
        return base / entry.file_path

    def to_items(self) -> list[RouteItem]:
        """Presentation records, one per merged route, in sorted order."""
        app_paths = app_file_paths(self.app_routes)
        return [RouteItem(entry=e, is_app_router=e.file_path in app_paths) for e in self.routes]

    def find(self, route_path: str, kind: RouteKind | None = None) -> RouteEntry | None:
        """First entry (in sort order) at exactly *route_path*."""
        for entry in self.routes:
            if entry.route_path == route_path and (kind is None or entry.kind is kind):
                return entry
        return None


def build_index(workspace: Workspace, config: JumperConfig | None = None) -> RouteIndex:
    """Group a workspace's candidates by root and infer the merged routes."""
    cfg = config or JumperConfig()

    app_root: Path | None = None
    app_routes: list[RouteEntry] = []
    app_groups = group_by_directory(workspace.app_files, cfg.app_dir, cfg.src_dir, workspace.root)
    if app_groups:
        first = app_groups[0]
        app_root = first.root
        app_routes = discover_app_routes(first.relative_paths)
        if len(app_groups) > 1:
            logger.info(
                "Found %d %s/ directories, using %s",
                len(app_groups), cfg.app_dir, app_root,
            )

    pages_root: Path | None = None
    pages_routes: list[RouteEntry] = []
    pages_groups = group_by_directory(workspace.pages_files, cfg.pages_dir, cfg.src_dir, workspace.root)
    if pages_groups:
        first = pages_groups[0]
        pages_root = first.root
        pages_routes = discover_pages_routes(first.relative_paths)
        if len(pages_groups) > 1:
            logger.info(
                "Found %d %s/ directories, using %s",
                len(pages_groups), cfg.pages_dir, pages_root,
            )

    routes = merge_routes(app_routes, pages_routes)
    logger.info(
        "Discovered %d app route(s), %d pages route(s), %d merged",
        len(app_routes), len(pages_routes), len(routes),
    )

    return RouteIndex(
        routes=tuple(routes),
        app_routes=tuple(app_routes),
        pages_routes=tuple(pages_routes),
        app_root=app_root,
        pages_root=pages_root,
    )
