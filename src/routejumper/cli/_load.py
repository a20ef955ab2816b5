"""Workspace loading shared by ``list``, ``pick`` and ``open``.

Builds the config from the environment, sets up logging, scans the
workspace and returns the merged route index.
"""

import argparse
import logging

from routejumper.config import JumperConfig
from routejumper.errors import NoRoutesFound, NotAProject
from routejumper.workspace import RouteIndex, build_index, scan_workspace_sync

logger = logging.getLogger("routejumper.cli")


def configure_logging(verbose: bool, level: str) -> None:
    """Send log records to stderr at *level*, or DEBUG when *verbose*."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


def load_config(args: argparse.Namespace) -> JumperConfig:
    """Read ``ROUTEJUMPER_*`` settings, validate them and configure logging."""
    config = JumperConfig.from_env()
    config.validate()
    configure_logging(getattr(args, "verbose", False), config.log_level)
    return config


def load_index(args: argparse.Namespace, config: JumperConfig) -> RouteIndex:
    """Scan ``args.workspace`` and build its route index.

    Raises:
        WorkspaceNotFound: If the workspace directory does not exist.
        NotAProject: If no project marker file exists in the workspace.
        NoRoutesFound: If there are no candidate files, or all were filtered out.
    """
    workspace = scan_workspace_sync(args.workspace, config)
    if not workspace.is_project:
        logger.debug("No project marker found under %s", workspace.root)
        markers = ", ".join(config.project_markers)
        raise NotAProject(f"No project config ({markers}) found in {workspace.root}")

    logger.info("Found project config: %s", workspace.marker)
    logger.info(
        "Found %d app file(s), %d pages file(s)",
        len(workspace.app_files), len(workspace.pages_files),
    )
    if not workspace.app_files and not workspace.pages_files:
        logger.warning("No route files found in %s/ or %s/ directories", config.app_dir, config.pages_dir)
        raise NoRoutesFound(f"No routes found in {workspace.root}")

    index = build_index(workspace, config)
    if not index.routes:
        logger.warning("All files were filtered out, no routes to show")
        raise NoRoutesFound(f"No routes found in {workspace.root}")
    return index
