"""Tests for DependencyGraph."""

import pytest

from sccsort import CycleError, DependencyGraph, Edge


class TestDependencyGraphConstruction:
    """Tests for DependencyGraph construction."""

    def test_empty_graph(self) -> None:
        graph = DependencyGraph.from_edges([])
        assert graph.vertices == ()
        assert len(graph) == 0

    def test_single_edge(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b")])
        assert graph.vertices == ("a", "b")
        assert len(graph) == 2

    def test_accepts_edge_objects(self) -> None:
        graph = DependencyGraph.from_edges([Edge("a", "b"), Edge("b", "c")])
        assert graph.vertices == ("a", "b", "c")

    def test_extra_vertices_come_first(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b")], vertices=["z"])
        assert graph.vertices == ("z", "a", "b")

    def test_parallel_edges_collapse(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b"), ("a", "b")])
        assert graph.edges() == [Edge("a", "b")]

    def test_contains(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b")])
        assert "a" in graph
        assert "b" in graph
        assert "c" not in graph


class TestDependencyGraphQueries:
    """Tests for DependencyGraph query methods."""

    def test_dependencies_simple(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b")])
        assert graph.dependencies("a") == frozenset({"b"})
        assert graph.dependencies("b") == frozenset()

    def test_dependencies_nonexistent_vertex(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b")])
        assert graph.dependencies("nonexistent") == frozenset()

    def test_dependents_multiple(self) -> None:
        graph = DependencyGraph.from_edges([("a", "c"), ("b", "c")])
        assert graph.dependents("c") == frozenset({"a", "b"})

    def test_roots_and_leaves(self) -> None:
        # a depends on b, b depends on c
        graph = DependencyGraph.from_edges([("a", "b"), ("b", "c")])
        assert graph.roots() == frozenset({"c"})
        assert graph.leaves() == frozenset({"a"})

    def test_roots_empty_graph(self) -> None:
        graph = DependencyGraph.from_edges([])
        assert graph.roots() == frozenset()
        assert graph.leaves() == frozenset()


class TestDependencyGraphTransitiveQueries:
    """Tests for transitive dependency queries (ancestors/descendants)."""

    def test_ancestors_simple(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b"), ("b", "c")])
        assert graph.ancestors("a") == frozenset({"b", "c"})
        assert graph.ancestors("c") == frozenset()

    def test_ancestors_diamond(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b"), ("a", "c"), ("b", "d"), ("c", "d")])
        assert graph.ancestors("a") == frozenset({"b", "c", "d"})

    def test_descendants_simple(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b"), ("b", "c")])
        assert graph.descendants("c") == frozenset({"a", "b"})
        assert graph.descendants("a") == frozenset()

    def test_vertex_on_cycle_is_its_own_ancestor(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b"), ("b", "a")])
        assert graph.ancestors("a") == frozenset({"a", "b"})


class TestDependencyGraphOrdering:
    """Tests for component and topological ordering of the graph."""

    def test_topological_order_linear(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b"), ("b", "c")])
        assert graph.topological_order() == ["c", "b", "a"]

    def test_topological_order_respects_dependencies(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b"), ("a", "c"), ("b", "d"), ("c", "d")])
        order = graph.topological_order()
        assert order.index("d") < order.index("b") < order.index("a")
        assert order.index("d") < order.index("c") < order.index("a")

    def test_topological_order_rejects_cycle(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b"), ("b", "a")])
        with pytest.raises(CycleError, match="Cycles in graph"):
            graph.topological_order()

    def test_strongly_connected_components(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b"), ("b", "a"), ("b", "c")])
        components = [set(c) for c in graph.strongly_connected_components()]
        assert components == [{"c"}, {"a", "b"}]

    def test_has_cycle_false(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b"), ("b", "c")])
        assert graph.has_cycle() is False
        assert graph.cycles() == []

    def test_has_cycle_true(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b"), ("b", "c"), ("c", "a")])
        assert graph.has_cycle() is True
        assert [set(c) for c in graph.cycles()] == [{"a", "b", "c"}]

    def test_self_dependency_is_a_cycle(self) -> None:
        graph = DependencyGraph.from_edges([("a", "a"), ("a", "b")])
        assert graph.cycles() == [["a"]]
        # The strict sort only rejects multi-vertex components
        assert graph.topological_order() == ["b", "a"]


class TestDependencyGraphCondensation:
    """Tests for collapsing components into single vertices."""

    def test_condensation_is_acyclic(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b"), ("b", "a"), ("b", "c"), ("d", "a")])
        condensed = graph.condensation()
        assert condensed.has_cycle() is False
        assert condensed.vertices == (
            frozenset({"c"}),
            frozenset({"a", "b"}),
            frozenset({"d"}),
        )

    def test_condensation_keeps_edges_between_components(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b"), ("b", "a"), ("b", "c")])
        condensed = graph.condensation()
        assert condensed.dependencies(frozenset({"a", "b"})) == frozenset({frozenset({"c"})})

    def test_condensation_of_acyclic_graph(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b")])
        condensed = graph.condensation()
        assert condensed.topological_order() == [frozenset({"b"}), frozenset({"a"})]


class TestDependencyGraphSubgraph:
    """Tests for subgraph extraction."""

    def test_subgraph_keeps_internal_edges(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b"), ("b", "c"), ("c", "d")])
        sub = graph.subgraph({"b", "c"})
        assert set(sub.vertices) == {"b", "c"}
        assert sub.dependencies("b") == frozenset({"c"})

    def test_subgraph_removes_external_edges(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b"), ("b", "c")])
        sub = graph.subgraph({"b", "c"})
        assert sub.dependents("b") == frozenset()

    def test_subgraph_empty(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b")])
        sub = graph.subgraph(frozenset())
        assert len(sub) == 0


class TestDependencyGraphImmutability:
    """Tests ensuring the graph is immutable."""

    def test_dependencies_returns_frozenset(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b")])
        assert isinstance(graph.dependencies("a"), frozenset)

    def test_cannot_assign_fields(self) -> None:
        graph = DependencyGraph.from_edges([("a", "b")])
        with pytest.raises(AttributeError):
            graph._dependencies = {}  # type: ignore[misc]
