"""Open a resolved route file, or print its path."""

import logging
import shlex
import subprocess
from pathlib import Path

from routejumper.config import JumperConfig
from routejumper.errors import RouteJumperError

logger = logging.getLogger("routejumper.cli")


def open_file(path: Path, config: JumperConfig, *, print_only: bool = False) -> None:
    """Open *path* in the configured editor.

    With ``print_only`` the path is written to stdout instead.

    Raises:
        RouteJumperError: If no editor is configured or it exits non-zero.
    """
    if print_only:
        print(path)
        return

    command = config.editor_command()
    if command is None:
        raise RouteJumperError("No editor configured. Set $EDITOR or pass --print.")

    argv = [*shlex.split(command), str(path)]
    logger.info("Opening %s", path)
    result = subprocess.run(argv, check=False)
    if result.returncode != 0:
        msg = f"Editor {argv[0]!r} exited with status {result.returncode}"
        raise RouteJumperError(msg)
