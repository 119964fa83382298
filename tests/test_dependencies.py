"""Tests for DependencyGraph and ResolutionCache."""

from __future__ import annotations

from sass_import_resolver import DependencyGraph, ResolutionCache, ResolvedFile


class TestDependencyGraph:
    def test_add_creates_and_appends(self):
        graph = DependencyGraph()
        graph.add("/a.scss", "/b.scss")
        graph.add("/a.scss", "/c.scss")

        assert graph.dependencies_of("/a.scss") == ["/b.scss", "/c.scss"]
        assert "/a.scss" in graph
        assert len(graph) == 1

    def test_duplicates_are_kept(self):
        graph = DependencyGraph()
        graph.add("/a.scss", "/b.scss")
        graph.add("/a.scss", "/b.scss")

        assert graph.dependencies_of("/a.scss") == ["/b.scss", "/b.scss"]

    def test_mutual_reference_is_circular(self):
        graph = DependencyGraph()
        graph.add("/a.scss", "/b.scss")

        assert graph.is_circular("/b.scss", "/a.scss")

    def test_edges_are_directional(self):
        graph = DependencyGraph()
        graph.add("/a.scss", "/b.scss")

        assert not graph.is_circular("/a.scss", "/b.scss")
        assert not graph.is_circular("/c.scss", "/a.scss")

    def test_unknown_dependency_is_not_circular(self):
        assert not DependencyGraph().is_circular("/a.scss", "/b.scss")

    def test_three_file_cycle_is_not_detected(self):
        graph = DependencyGraph()
        graph.add("/a.scss", "/b.scss")
        graph.add("/b.scss", "/c.scss")

        # c -> a closes a -> b -> c -> a, which the one-hop check misses
        assert not graph.is_circular("/c.scss", "/a.scss")

    def test_dependencies_of_returns_copy(self):
        graph = DependencyGraph()
        graph.add("/a.scss", "/b.scss")

        graph.dependencies_of("/a.scss").append("/x.scss")

        assert graph.dependencies_of("/a.scss") == ["/b.scss"]

    def test_clear(self):
        graph = DependencyGraph()
        graph.add("/a.scss", "/b.scss")
        graph.clear()

        assert len(graph) == 0
        assert graph.dependencies_of("/a.scss") == []


class TestResolutionCache:
    def test_get_missing_is_none(self):
        assert ResolutionCache().get("second") is None

    def test_set_and_get(self):
        cache = ResolutionCache()
        cache.set("second", ResolvedFile("/proj/second.scss"))

        assert cache.get("second") == ResolvedFile("/proj/second.scss")
        assert "second" in cache
        assert len(cache) == 1

    def test_keys_are_raw_specifiers(self):
        cache = ResolutionCache()
        cache.set("second", ResolvedFile("/proj/second.scss"))

        assert cache.get("second.scss") is None

    def test_specifiers_in_insertion_order(self):
        cache = ResolutionCache()
        cache.set("b", ResolvedFile("/b.scss"))
        cache.set("a", ResolvedFile("/a.scss"))

        assert cache.specifiers() == ["b", "a"]

    def test_clear(self):
        cache = ResolutionCache()
        cache.set("a", ResolvedFile("/a.scss"))
        cache.clear()

        assert len(cache) == 0
