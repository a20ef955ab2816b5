"""Tests for routejumper.routing.ordering and routejumper.routing.paths."""

import dataclasses
import locale

import pytest

from routejumper.routing.ordering import KIND_SORT_ORDER, collation_key, sort_entries
from routejumper.routing.paths import join_route, normalize_path
from routejumper.routing.types import RouteEntry, RouteKind


def _entry(route_path: str, kind: RouteKind = RouteKind.PAGE, file_path: str = "f.tsx") -> RouteEntry:
    return RouteEntry(route_path=route_path, file_path=file_path, kind=kind)


class TestNormalizePath:
    def test_forward_slashes_unchanged(self) -> None:
        assert normalize_path("blog/[slug]/page.tsx") == "blog/[slug]/page.tsx"

    def test_windows_separator(self) -> None:
        assert normalize_path("blog\\[slug]\\page.tsx", sep="\\") == "blog/[slug]/page.tsx"

    def test_idempotent(self) -> None:
        once = normalize_path("a\\b\\c.tsx", sep="\\")
        assert normalize_path(once, sep="\\") == once

    def test_empty(self) -> None:
        assert normalize_path("") == ""

    def test_join_route(self) -> None:
        assert join_route([]) == "/"
        assert join_route(["blog", "[slug]"]) == "/blog/[slug]"


class TestRouteEntry:
    def test_frozen(self) -> None:
        entry = _entry("/")
        with pytest.raises(dataclasses.FrozenInstanceError):
            entry.route_path = "/other"  # type: ignore[misc]

    def test_equality(self) -> None:
        assert _entry("/a") == _entry("/a")
        assert _entry("/a") != _entry("/a", RouteKind.LAYOUT)

    def test_kind_labels(self) -> None:
        assert RouteKind.PAGE.label == "page"
        assert RouteKind.LAYOUT.label == "layout"
        assert RouteKind.TEMPLATE.label == "template"
        assert RouteKind.ROUTE.label == "route handler"


class TestSortEntries:
    def test_kind_priority(self) -> None:
        assert [KIND_SORT_ORDER[k] for k in RouteKind] == [0, 1, 2, 3]

    def test_by_path_then_kind(self) -> None:
        entries = [
            _entry("/blog", RouteKind.ROUTE),
            _entry("/", RouteKind.LAYOUT),
            _entry("/blog", RouteKind.PAGE),
            _entry("/", RouteKind.PAGE),
        ]
        result = sort_entries(entries)
        assert [(e.route_path, e.kind) for e in result] == [
            ("/", RouteKind.PAGE),
            ("/", RouteKind.LAYOUT),
            ("/blog", RouteKind.PAGE),
            ("/blog", RouteKind.ROUTE),
        ]

    def test_stable_for_equal_keys(self) -> None:
        first = _entry("/", file_path="page.tsx")
        second = _entry("/", file_path="@modal/page.tsx")
        assert sort_entries([first, second]) == [first, second]
        assert sort_entries([second, first]) == [second, first]

    def test_does_not_mutate_input(self) -> None:
        entries = [_entry("/b"), _entry("/a")]
        result = sort_entries(entries)
        assert [e.route_path for e in entries] == ["/b", "/a"]
        assert [e.route_path for e in result] == ["/a", "/b"]

    def test_idempotent(self) -> None:
        entries = [_entry("/z"), _entry("/a", RouteKind.TEMPLATE), _entry("/a"), _entry("/m")]
        once = sort_entries(entries)
        assert sort_entries(once) == once

    def test_adjacent_pairs_ordered(self) -> None:
        entries = [
            _entry(path, kind)
            for path in ("/docs", "/", "/api/users", "/blog/[slug]", "/blog")
            for kind in reversed(RouteKind)
        ]
        result = sort_entries(entries)
        for a, b in zip(result, result[1:]):
            assert collation_key(a.route_path) < collation_key(b.route_path) or (
                a.route_path == b.route_path and KIND_SORT_ORDER[a.kind] <= KIND_SORT_ORDER[b.kind]
            )

    def test_empty(self) -> None:
        assert sort_entries([]) == []


class TestCollation:
    def test_case_insensitive_primary_order(self) -> None:
        result = sort_entries([_entry("/Zoo"), _entry("/apple")])
        assert [e.route_path for e in result] == ["/apple", "/Zoo"]

    def test_mixed_case_interleaves(self) -> None:
        result = sort_entries([_entry("/Blog"), _entry("/contact"), _entry("/About")])
        assert [e.route_path for e in result] == ["/About", "/Blog", "/contact"]

    def test_prefix_sorts_first(self) -> None:
        result = sort_entries([_entry("/blog/[slug]"), _entry("/blog"), _entry("/")])
        assert [e.route_path for e in result] == ["/", "/blog", "/blog/[slug]"]

    def test_punctuation_before_letters(self) -> None:
        result = sort_entries([_entry("/about"), _entry("/[slug]")])
        assert [e.route_path for e in result] == ["/[slug]", "/about"]

    def test_independent_of_process_locale(self) -> None:
        saved = locale.setlocale(locale.LC_COLLATE)
        try:
            locale.setlocale(locale.LC_COLLATE, "C")
            result = sort_entries([_entry("/Zoo"), _entry("/apple")])
        finally:
            locale.setlocale(locale.LC_COLLATE, saved)
        assert [e.route_path for e in result] == ["/apple", "/Zoo"]
