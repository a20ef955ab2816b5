"""Data models for inferred routes.

Immutable frozen dataclasses produced by the classifiers and passed
unchanged through sorting and merging.
"""

from dataclasses import dataclass
from enum import Enum


class RouteKind(Enum):
    """What a route file contributes at its URL."""

    PAGE = "page"
    LAYOUT = "layout"
    TEMPLATE = "template"
    ROUTE = "route"

    @property
    def label(self) -> str:
        """Human-readable label for listings."""
        if self is RouteKind.ROUTE:
            return "route handler"
        return self.value


@dataclass(frozen=True, slots=True)
class RouteEntry:
    """A route inferred from a single source file.

    Attributes:
        route_path: URL path (e.g., ``/blog/[slug]``).  Always starts
            with ``/``; route groups and parallel slots are already
            stripped.
        file_path: Forward-slash path of the source file relative to
            its convention root (``app/`` or ``pages/``), kept verbatim.
        kind: Page, layout, template, or route handler.
    """

    route_path: str
    file_path: str
    kind: RouteKind
