"""``routejumper pick`` — choose a route from a numbered list and open it."""

import argparse
import sys

from routejumper.cli._editor import open_file
from routejumper.cli._load import load_config, load_index
from routejumper.errors import NoRoutesFound, RouteJumperError
from routejumper.workspace import RouteItem


def _prompt(items: list[RouteItem]) -> RouteItem | None:
    """Show a numbered list and read a choice from stdin.

    Returns ``None`` when the user enters nothing or input ends.

    Raises:
        RouteJumperError: If the answer is not a listed number.
    """
    width = len(str(len(items)))
    for number, item in enumerate(items, start=1):
        print(f"{number:>{width}}  {item.label}  {item.description}")

    try:
        answer = input("Select a route to open: ").strip()
    except EOFError:
        return None
    if not answer:
        return None
    if not answer.isdigit() or not 1 <= int(answer) <= len(items):
        raise RouteJumperError(f"Invalid selection {answer!r}: expected 1-{len(items)}")
    return items[int(answer) - 1]


def run_pick(args: argparse.Namespace) -> None:
    """Offer matching routes, then open (or print) the selected file.

    A single match is chosen without prompting.  An empty answer
    cancels and exits cleanly.
    """
    try:
        config = load_config(args)
        index = load_index(args, config)

        items = index.to_items()
        if args.query:
            items = [item for item in items if item.matches(args.query)]
            if not items:
                raise NoRoutesFound(f"No routes match {args.query!r}")

        selected = items[0] if len(items) == 1 else _prompt(items)
        if selected is None:
            return

        open_file(index.resolve(selected.entry), config, print_only=args.print_only)
    except RouteJumperError as exc:
        print(f"Error: {exc}", file=sys.stderr)
        raise SystemExit(1) from exc
