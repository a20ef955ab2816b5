"""Data models for workspace scanning and presentation.

Frozen dataclasses built once per scan.
"""

from dataclasses import dataclass
from pathlib import Path

from routejumper.routing.types import RouteEntry


@dataclass(frozen=True, slots=True)
class DirGroup:
    """Files that share one convention root.

    Attributes:
        root: Absolute path of the ``app/`` or ``pages/`` directory.
        relative_paths: File paths relative to ``root``, in discovery order.
    """

    root: Path
    relative_paths: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Workspace:
    """Raw scan result for one workspace directory.

    Attributes:
        root: Resolved workspace directory.
        marker: The project config file that was found, if any.
        app_files: Absolute paths of ``app/`` convention candidates.
        pages_files: Absolute paths of ``pages/`` convention candidates.
    """

    root: Path
    marker: Path | None = None
    app_files: tuple[Path, ...] = ()
    pages_files: tuple[Path, ...] = ()

    @property
    def is_project(self) -> bool:
        return self.marker is not None


@dataclass(frozen=True, slots=True)
class RouteItem:
    """One selectable line in a route listing."""

    entry: RouteEntry
    is_app_router: bool

    @property
    def label(self) -> str:
        return self.entry.route_path

    @property
    def description(self) -> str:
        return f"[{self.entry.kind.label}] {self.entry.file_path}"

    def matches(self, query: str) -> bool:
        """Case-insensitive substring match over label and description."""
        needle = query.lower()
        return needle in self.label.lower() or needle in self.description.lower()
