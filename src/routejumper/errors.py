"""Routejumper exception hierarchy.

Raised by the workspace layer and the CLI.  The routing core never
raises: a path that is not a route classifies as ``None``.
"""


class RouteJumperError(Exception):
    """Base for all routejumper-specific errors."""


class ConfigurationError(RouteJumperError):
    """Raised when a :class:`~routejumper.config.JumperConfig` is invalid."""


class WorkspaceNotFound(RouteJumperError):  # noqa: N818
    """The workspace root does not exist or is not a directory."""


class NotAProject(RouteJumperError):  # noqa: N818
    """No project marker (``next.config.*``) was found in the workspace."""


class NoRoutesFound(RouteJumperError):  # noqa: N818
    """Scanning succeeded but produced nothing to show."""


class UnresolvableRoute(RouteJumperError):  # noqa: N818
    """A selected route cannot be mapped back to a file on disk."""
