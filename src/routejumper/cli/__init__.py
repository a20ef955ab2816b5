"""Routejumper CLI — list routes and jump to the file behind one.

Entry point registered as ``routejumper`` in ``pyproject.toml``::

    [project.scripts]
    routejumper = "routejumper.cli:main"
"""

import argparse
import sys

from routejumper.routing.types import RouteKind


def main(argv: list[str] | None = None) -> None:
    """CLI entry point for the ``routejumper`` command."""
    parser = argparse.ArgumentParser(
        prog="routejumper",
        description="Routejumper — list app/ and pages/ routes and open their files.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command")

    # -- routejumper list -------------------------------------------------
    list_parser = subparsers.add_parser("list", help="List discovered routes")
    list_parser.add_argument("workspace", nargs="?", default=".", help="Workspace directory")
    list_parser.add_argument("--json", action="store_true", help="Print routes as JSON")

    # -- routejumper pick -------------------------------------------------
    pick_parser = subparsers.add_parser("pick", help="Choose a route and open its file")
    pick_parser.add_argument("workspace", nargs="?", default=".", help="Workspace directory")
    pick_parser.add_argument(
        "query",
        nargs="?",
        default="",
        help="Only offer routes whose path or file contains this text",
    )
    pick_parser.add_argument(
        "--print",
        action="store_true",
        dest="print_only",
        help="Print the file path instead of opening an editor",
    )

    # -- routejumper open -------------------------------------------------
    open_parser = subparsers.add_parser("open", help="Open the file behind a route path")
    open_parser.add_argument("route_path", help="Route path (e.g. /blog/[slug])")
    open_parser.add_argument("workspace", nargs="?", default=".", help="Workspace directory")
    open_parser.add_argument(
        "--kind",
        choices=[kind.value for kind in RouteKind],
        default=None,
        help="Restrict to one route kind",
    )
    open_parser.add_argument(
        "--print",
        action="store_true",
        dest="print_only",
        help="Print the file path instead of opening an editor",
    )

    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        sys.exit(0)

    if args.command == "list":
        from routejumper.cli._list import run_list

        run_list(args)
    elif args.command == "pick":
        from routejumper.cli._pick import run_pick

        run_pick(args)
    elif args.command == "open":
        from routejumper.cli._open import run_open

        run_open(args)
