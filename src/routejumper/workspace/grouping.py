"""Group discovered files by their convention root.

A project may keep its routes in ``src/app/`` or ``app/`` (likewise
``pages/``).  Each file is attributed to the nearest such directory in
its path, preferring the ``src/`` form.  Only the part of the path below
the workspace is searched, so a workspace that itself lives under a
folder named ``app`` does not treat that ancestor as a root.
"""

import logging
from collections.abc import Iterable
from pathlib import Path

from routejumper.workspace.types import DirGroup

logger = logging.getLogger("routejumper.workspace")


def find_directory(file_path: Path, dir_name: str, src_dir: str = "src") -> Path | None:
    """Find the convention root containing *file_path*.

    The first ``<src_dir>/<dir_name>/`` in the path wins; failing that,
    the first ``<dir_name>/``.  The file name itself never counts as a
    directory.

    Returns:
        The root directory, or ``None`` if the path has no such component.
    """
    parts = file_path.parts
    dir_parts = parts[:-1]

    for i in range(len(dir_parts) - 1):
        if dir_parts[i] == src_dir and dir_parts[i + 1] == dir_name:
            return Path(*parts[: i + 2])

    for i, part in enumerate(dir_parts):
        if part == dir_name:
            return Path(*parts[: i + 1])

    return None


def group_by_directory(
    files: Iterable[Path],
    dir_name: str,
    src_dir: str = "src",
    base: Path | None = None,
) -> list[DirGroup]:
    """Group files by convention root, in first-seen order.

    Args:
        files: Absolute file paths.
        dir_name: Convention root folder name (``app`` or ``pages``).
        src_dir: Preferred parent folder of the root.
        base: Workspace directory.  When given, only path components
            below it are searched for the root.

    Files that are not inside a ``dir_name`` directory are skipped.
    """
    groups: dict[Path, list[str]] = {}
    for file in files:
        searched = file.relative_to(base) if base is not None else file
        found = find_directory(searched, dir_name, src_dir)
        if found is None:
            logger.debug("Skipping %s: not inside a %s/ directory", file, dir_name)
            continue
        root = base / found if base is not None else found
        groups.setdefault(root, []).append(str(file.relative_to(root)))

    return [DirGroup(root=root, relative_paths=tuple(paths)) for root, paths in groups.items()]
