"""Scanner configuration.

JumperConfig is a frozen dataclass: immutable after creation, no
string-key dict lookups.
"""

import os
from collections.abc import Mapping
from dataclasses import dataclass

from routejumper.errors import ConfigurationError

_LOG_LEVELS = frozenset({"debug", "info", "warning", "error", "critical"})

_ENV_PREFIX = "ROUTEJUMPER_"


@dataclass(frozen=True, slots=True)
class JumperConfig:
    """Workspace scanning configuration. Immutable after creation.

    All fields have sensible defaults. Override what you need::

        config = JumperConfig(exclude_dirs=("node_modules", "dist"))
    """

    # Convention roots
    app_dir: str = "app"
    pages_dir: str = "pages"
    src_dir: str = "src"  # src/app/ is preferred over app/

    # Candidate files
    extensions: tuple[str, ...] = ("tsx", "ts", "jsx", "js")
    project_markers: tuple[str, ...] = (
        "next.config.ts",
        "next.config.mts",
        "next.config.js",
        "next.config.mjs",
        "next.config.cjs",
    )
    exclude_dirs: tuple[str, ...] = ("node_modules", ".git")

    # Opening files
    editor: str | None = None  # Falls back to $VISUAL, then $EDITOR

    log_level: str = "warning"

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> "JumperConfig":
        """Build a config from ``ROUTEJUMPER_*`` environment variables.

        Unset variables keep their defaults.  ``ROUTEJUMPER_EXCLUDE_DIRS``
        is a comma-separated list.
        """
        env = os.environ if environ is None else environ
        overrides: dict[str, object] = {}
        for name in ("app_dir", "pages_dir", "src_dir", "editor", "log_level"):
            value = env.get(_ENV_PREFIX + name.upper())
            if value is not None:
                overrides[name] = value
        exclude = env.get(_ENV_PREFIX + "EXCLUDE_DIRS")
        if exclude is not None:
            overrides["exclude_dirs"] = tuple(p.strip() for p in exclude.split(",") if p.strip())
        return cls(**overrides)  # type: ignore[arg-type]

    def validate(self) -> None:
        """Raise :class:`ConfigurationError` if the config is unusable."""
        for name in ("app_dir", "pages_dir", "src_dir"):
            value = getattr(self, name)
            if not value or "/" in value or os.sep in value:
                msg = f"{name} must be a single directory name, got {value!r}"
                raise ConfigurationError(msg)
        if self.app_dir == self.pages_dir:
            msg = f"app_dir and pages_dir must differ (both {self.app_dir!r})"
            raise ConfigurationError(msg)
        if not self.extensions:
            raise ConfigurationError("extensions must not be empty")
        if self.log_level.lower() not in _LOG_LEVELS:
            msg = f"Unknown log level {self.log_level!r}. Expected one of: {', '.join(sorted(_LOG_LEVELS))}"
            raise ConfigurationError(msg)

    def editor_command(self, environ: Mapping[str, str] | None = None) -> str | None:
        """Resolve the editor: explicit setting, then ``$VISUAL``, then ``$EDITOR``."""
        if self.editor:
            return self.editor
        env = os.environ if environ is None else environ
        return env.get("VISUAL") or env.get("EDITOR") or None
