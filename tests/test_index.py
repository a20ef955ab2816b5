"""Tests for routejumper.workspace.index — merged index and file resolution."""

from collections.abc import Callable
from pathlib import Path

import pytest

from routejumper.config import JumperConfig
from routejumper.errors import UnresolvableRoute
from routejumper.routing.types import RouteEntry, RouteKind
from routejumper.workspace.index import RouteIndex, build_index
from routejumper.workspace.scan import scan_workspace_sync
from routejumper.workspace.types import RouteItem, Workspace


@pytest.fixture
def mixed_project(make_tree: Callable[..., Path]) -> Path:
    return make_tree(
        "src/app/page.tsx",
        "src/app/layout.tsx",
        "src/app/(web)/blog/page.tsx",
        "src/app/api/users/route.ts",
        "src/pages/index.tsx",
        "src/pages/about.tsx",
        "src/pages/_app.tsx",
        "src/pages/api/users.ts",
        "src/pages/api/health.ts",
    )


class TestBuildIndex:
    def test_merged_routes(self, mixed_project: Path) -> None:
        index = build_index(scan_workspace_sync(mixed_project))

        assert [(e.route_path, e.kind, e.file_path) for e in index.routes] == [
            ("/", RouteKind.PAGE, "page.tsx"),
            ("/", RouteKind.LAYOUT, "layout.tsx"),
            ("/about", RouteKind.PAGE, "about.tsx"),
            ("/api/health", RouteKind.ROUTE, "api/health.ts"),
            ("/api/users", RouteKind.ROUTE, "api/users/route.ts"),
            ("/blog", RouteKind.PAGE, "(web)/blog/page.tsx"),
        ]
        assert len(index.app_routes) == 4
        assert len(index.pages_routes) == 4

    def test_roots(self, mixed_project: Path) -> None:
        index = build_index(scan_workspace_sync(mixed_project))
        root = mixed_project.resolve()
        assert index.app_root == root / "src" / "app"
        assert index.pages_root == root / "src" / "pages"

    def test_first_root_only(self, make_tree: Callable[..., Path]) -> None:
        root = make_tree("a/app/page.tsx", "b/app/about/page.tsx")
        index = build_index(scan_workspace_sync(root))
        assert index.app_root == root.resolve() / "a" / "app"
        assert [e.route_path for e in index.routes] == ["/"]

    def test_workspace_nested_under_root_folder_name(self, tmp_path: Path) -> None:
        workspace_dir = tmp_path / "app" / "proj"
        for rel in ("next.config.js", "app/blog/page.tsx", "pages/about.tsx"):
            file = workspace_dir / rel
            file.parent.mkdir(parents=True, exist_ok=True)
            file.write_text("export default function Page() {}\n")

        index = build_index(scan_workspace_sync(workspace_dir))

        assert [e.route_path for e in index.routes] == ["/about", "/blog"]
        assert index.app_root == workspace_dir.resolve() / "app"
        entry = index.find("/blog")
        assert entry is not None
        assert index.resolve(entry) == workspace_dir.resolve() / "app" / "blog" / "page.tsx"

    def test_empty_workspace(self, tmp_path: Path) -> None:
        index = build_index(Workspace(root=tmp_path))
        assert index.routes == ()
        assert index.app_root is None
        assert index.pages_root is None

    def test_custom_config(self, make_tree: Callable[..., Path]) -> None:
        root = make_tree("routes/page.tsx")
        cfg = JumperConfig(app_dir="routes")
        index = build_index(scan_workspace_sync(root, cfg), cfg)
        assert [e.file_path for e in index.routes] == ["page.tsx"]

    def test_logs_counts(self, mixed_project: Path, caplog: pytest.LogCaptureFixture) -> None:
        with caplog.at_level("INFO", logger="routejumper.workspace"):
            build_index(scan_workspace_sync(mixed_project))
        assert "4 app route(s), 4 pages route(s), 6 merged" in caplog.text


class TestResolve:
    def test_app_entry_resolves_against_app_root(self, mixed_project: Path) -> None:
        index = build_index(scan_workspace_sync(mixed_project))
        entry = index.find("/blog")
        assert entry is not None
        assert index.resolve(entry) == mixed_project.resolve() / "src/app/(web)/blog/page.tsx"
        assert index.resolve(entry).is_file()

    def test_pages_entry_resolves_against_pages_root(self, mixed_project: Path) -> None:
        index = build_index(scan_workspace_sync(mixed_project))
        entry = index.find("/about")
        assert entry is not None
        assert index.resolve(entry) == mixed_project.resolve() / "src/pages/about.tsx"

    def test_missing_root(self) -> None:
        entry = RouteEntry("/", "index.tsx", RouteKind.PAGE)
        index = RouteIndex(routes=(entry,), pages_routes=(entry,))
        with pytest.raises(UnresolvableRoute, match="Could not resolve"):
            index.resolve(entry)


class TestFind:
    def test_first_kind_in_sort_order(self, mixed_project: Path) -> None:
        index = build_index(scan_workspace_sync(mixed_project))
        entry = index.find("/")
        assert entry is not None
        assert entry.kind is RouteKind.PAGE

    def test_restricted_kind(self, mixed_project: Path) -> None:
        index = build_index(scan_workspace_sync(mixed_project))
        entry = index.find("/", RouteKind.LAYOUT)
        assert entry is not None
        assert entry.file_path == "layout.tsx"

    def test_not_found(self, mixed_project: Path) -> None:
        index = build_index(scan_workspace_sync(mixed_project))
        assert index.find("/nope") is None
        assert index.find("/about", RouteKind.ROUTE) is None


class TestRouteItems:
    def test_items(self, mixed_project: Path) -> None:
        index = build_index(scan_workspace_sync(mixed_project))
        items = index.to_items()

        assert [item.label for item in items] == [e.route_path for e in index.routes]
        health = next(item for item in items if item.label == "/api/health")
        assert health.description == "[route handler] api/health.ts"
        assert health.is_app_router is False
        blog = next(item for item in items if item.label == "/blog")
        assert blog.description == "[page] (web)/blog/page.tsx"
        assert blog.is_app_router is True

    def test_matches_label_and_description(self) -> None:
        item = RouteItem(entry=RouteEntry("/blog", "(web)/blog/layout.tsx", RouteKind.LAYOUT), is_app_router=True)
        assert item.matches("BLOG")
        assert item.matches("[layout]")
        assert item.matches("(web)")
        assert not item.matches("page")
