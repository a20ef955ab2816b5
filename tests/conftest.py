"""Shared fixtures for routejumper tests."""

from collections.abc import Callable
from pathlib import Path

import pytest


@pytest.fixture
def make_tree(tmp_path: Path) -> Callable[..., Path]:
    """Create empty files under ``tmp_path`` from relative paths.

    Returns the tree root.  A ``next.config.js`` marker is added unless
    ``marker=False``.
    """

    def _make(*relative_paths: str, marker: bool = True) -> Path:
        if marker:
            (tmp_path / "next.config.js").write_text("module.exports = {}\n")
        for rel in relative_paths:
            file = tmp_path / rel
            file.parent.mkdir(parents=True, exist_ok=True)
            file.write_text("export default function Page() {}\n")
        return tmp_path

    return _make
