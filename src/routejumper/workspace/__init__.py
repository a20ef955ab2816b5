"""Workspace — locate route files on disk and map routes back to them.

Usage::

    workspace = scan_workspace_sync(".")
    index = build_index(workspace)
    for item in index.to_items():
        print(item.label, item.description)
"""

from routejumper.workspace.grouping import find_directory, group_by_directory
from routejumper.workspace.index import RouteIndex, build_index
from routejumper.workspace.scan import scan_workspace, scan_workspace_sync
from routejumper.workspace.types import DirGroup, RouteItem, Workspace

__all__ = [
    "DirGroup",
    "RouteIndex",
    "RouteItem",
    "Workspace",
    "build_index",
    "find_directory",
    "group_by_directory",
    "scan_workspace",
    "scan_workspace_sync",
]
