"""``routejumper open`` — open the file behind an exact route path."""

import argparse
import sys

from routejumper.cli._editor import open_file
from routejumper.cli._load import load_config, load_index
from routejumper.errors import RouteJumperError, UnresolvableRoute
from routejumper.routing.types import RouteKind


def run_open(args: argparse.Namespace) -> None:
    """Resolve ``args.route_path`` and open (or print) its file.

    When several kinds share the path, the first in sort order wins
    (page, layout, template, route) unless ``--kind`` narrows it.
    """
    kind = RouteKind(args.kind) if args.kind else None
    try:
        config = load_config(args)
        index = load_index(args, config)

        entry = index.find(args.route_path, kind)
        if entry is None:
            suffix = f" ({kind.value})" if kind else ""
            raise UnresolvableRoute(f"No route {args.route_path}{suffix}")

        open_file(index.resolve(entry), config, print_only=args.print_only)
    except RouteJumperError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
