"""Path separator normalization."""

import os


def normalize_path(path: str, sep: str = os.sep) -> str:
    """Return *path* with every *sep* replaced by ``/``.

    Idempotent: a path that already uses ``/`` comes back unchanged.
    """
    if sep == "/":
        return path
    return path.replace(sep, "/")


def join_route(segments: list[str]) -> str:
    """Build a URL path from retained segments (``[]`` becomes ``/``)."""
    return "/" + "/".join(segments)
