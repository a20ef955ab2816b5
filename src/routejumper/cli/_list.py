"""``routejumper list`` — print the merged routes of a workspace."""

import argparse
import json
import sys

from routejumper.cli._load import load_config, load_index
from routejumper.errors import RouteJumperError


def run_list(args: argparse.Namespace) -> None:
    """Print a ROUTE / TYPE / FILE table, or JSON records with ``--json``."""
    try:
        config = load_config(args)
        index = load_index(args, config)
    except RouteJumperError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc

    items = index.to_items()

    if args.json:
        records = [
            {
                "route_path": item.entry.route_path,
                "file_path": item.entry.file_path,
                "kind": item.entry.kind.value,
                "app_router": item.is_app_router,
            }
            for item in items
        ]
        print(json.dumps(records, indent=2))
        return

    rows = [(item.label, item.entry.kind.label, item.entry.file_path) for item in items]

    # Column widths
    max_route = max(max(len(r[0]) for r in rows), 5)  # "ROUTE" header
    max_kind = max(max(len(r[1]) for r in rows), 4)  # "TYPE" header

    fmt = f"{{:<{max_route}}}  {{:<{max_kind}}}  {{}}"
    print(fmt.format("ROUTE", "TYPE", "FILE"))
    sep_len = max_route + max_kind + 4 + max(len(r[2]) for r in rows)
    print("-" * min(sep_len, 80))
    for route_path, kind_label, file_path in rows:
        print(fmt.format(route_path, kind_label, file_path))
