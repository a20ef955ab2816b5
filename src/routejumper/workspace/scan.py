"""Workspace scanning — find candidate route files on disk.

Walks the workspace tree once per convention, pruning excluded
directories (``node_modules`` by default).  Both walks run concurrently
in worker threads via ``anyio.to_thread``.  Directories are visited in
sorted order so that "the first root found" is deterministic.
"""

from collections.abc import Callable, Iterator
from pathlib import Path

import anyio

from routejumper.config import JumperConfig
from routejumper.errors import WorkspaceNotFound
from routejumper.workspace.types import Workspace

# File names that can define an app/ route (extension checked separately)
_APP_FILE_STEMS = frozenset({"page", "layout", "template", "route"})


def _walk_files(directory: Path, exclude: frozenset[str]) -> Iterator[Path]:
    """Yield every file below *directory*, depth-first, in sorted order."""
    dirs: list[Path] = []
    for item in sorted(directory.iterdir()):
        if item.is_dir():
            if item.name not in exclude:
                dirs.append(item)
        elif item.is_file():
            yield item
    for sub in dirs:
        yield from _walk_files(sub, exclude)


def _has_extension(file: Path, config: JumperConfig) -> bool:
    return file.suffix[1:] in config.extensions


def find_project_marker(root: Path, config: JumperConfig) -> Path | None:
    """Return the first project config file (``next.config.*``) in the workspace."""
    markers = frozenset(config.project_markers)
    for file in _walk_files(root, frozenset(config.exclude_dirs)):
        if file.name in markers:
            return file
    return None


def collect_app_files(root: Path, config: JumperConfig) -> list[Path]:
    """Files under an ``app/`` directory named page/layout/template/route."""
    found: list[Path] = []
    for file in _walk_files(root, frozenset(config.exclude_dirs)):
        if config.app_dir not in file.relative_to(root).parts[:-1]:
            continue
        if file.stem in _APP_FILE_STEMS and _has_extension(file, config):
            found.append(file)
    return found


def collect_pages_files(root: Path, config: JumperConfig) -> list[Path]:
    """Every script file under a ``pages/`` directory."""
    found: list[Path] = []
    for file in _walk_files(root, frozenset(config.exclude_dirs)):
        if config.pages_dir not in file.relative_to(root).parts[:-1]:
            continue
        if _has_extension(file, config):
            found.append(file)
    return found


async def scan_workspace(root: str | Path, config: JumperConfig | None = None) -> Workspace:
    """Scan a workspace directory for a project marker and route candidates.

    Args:
        root: Workspace directory.
        config: Scanner configuration (defaults to :class:`JumperConfig`).

    Returns:
        A :class:`Workspace` with absolute candidate paths.  If no project
        marker exists, the file lists are left empty.

    Raises:
        WorkspaceNotFound: If *root* is not a directory.
    """
    cfg = config or JumperConfig()
    workspace_root = Path(root).resolve()
    if not workspace_root.is_dir():
        raise WorkspaceNotFound(f"Workspace directory not found: {workspace_root}")

    marker = await anyio.to_thread.run_sync(find_project_marker, workspace_root, cfg)
    if marker is None:
        return Workspace(root=workspace_root)

    results: dict[str, list[Path]] = {}

    async def _collect(key: str, collector: Callable[[Path, JumperConfig], list[Path]]) -> None:
        results[key] = await anyio.to_thread.run_sync(collector, workspace_root, cfg)

    async with anyio.create_task_group() as tg:
        tg.start_soon(_collect, "app", collect_app_files)
        tg.start_soon(_collect, "pages", collect_pages_files)

    return Workspace(
        root=workspace_root,
        marker=marker,
        app_files=tuple(results["app"]),
        pages_files=tuple(results["pages"]),
    )


def scan_workspace_sync(root: str | Path, config: JumperConfig | None = None) -> Workspace:
    """Blocking wrapper around :func:`scan_workspace`."""
    return anyio.run(scan_workspace, root, config)
