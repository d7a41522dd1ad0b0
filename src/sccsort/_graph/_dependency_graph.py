"""Generic dependency graph abstraction."""

from __future__ import annotations

from collections.abc import Hashable, Iterable
from dataclasses import dataclass, field

from sccsort._edge import Edge, EdgeInput, endpoints

from ._sort import find_and_sort_strongly_connected_components, topological_sort


@dataclass(frozen=True, slots=True)
class DependencyGraph[T: Hashable]:
    """An immutable directed graph of dependencies between vertices.

    Unlike the sorting functions, the graph may contain cycles and exposes them
    through :meth:`cycles` and :meth:`condensation`. Vertices are compared with
    their natural equality.

    The graph represents "depends on" relationships:
    - an edge (a, b) means "a depends on b"
    - dependencies[a] = (b,) and dependents[b] = (a,)

    Vertex and neighbour order follow insertion order, so every derived
    ordering is deterministic.

    Attributes:
        _dependencies: Mapping from vertex to its direct dependencies.
        _dependents: Mapping from vertex to the vertices that depend on it.

    """

    _dependencies: dict[T, tuple[T, ...]] = field(default_factory=dict)
    _dependents: dict[T, tuple[T, ...]] = field(default_factory=dict)

    @classmethod
    def from_edges(cls, edges: Iterable[EdgeInput[T]], vertices: Iterable[T] = ()) -> DependencyGraph[T]:
        """Build a graph from edges and, optionally, extra vertices.

        An edge (a, b) means "a depends on b". Parallel edges are collapsed.

        Args:
            edges: Edge objects or (source, target) tuples.
            vertices: Vertices to include even if no edge touches them.
                They come first in :attr:`vertices`.

        Returns:
            A new DependencyGraph instance.

        Example:
            >>> graph = DependencyGraph.from_edges([("app", "lib"), ("lib", "core")])
            >>> graph.dependencies("app")
            frozenset({'lib'})

        """
        # dicts used as ordered sets
        dependencies: dict[T, dict[T, None]] = {}
        dependents: dict[T, dict[T, None]] = {}

        for vertex in vertices:
            dependencies.setdefault(vertex, {})
            dependents.setdefault(vertex, {})

        for e in edges:
            src, dst = endpoints(e)
            for vertex in (src, dst):
                dependencies.setdefault(vertex, {})
                dependents.setdefault(vertex, {})
            dependencies[src][dst] = None
            dependents[dst][src] = None

        return cls(
            _dependencies={k: tuple(v) for k, v in dependencies.items()},
            _dependents={k: tuple(v) for k, v in dependents.items()},
        )

    @property
    def vertices(self) -> tuple[T, ...]:
        """All vertices in insertion order."""
        return tuple(self._dependencies)

    def edges(self) -> list[Edge[T]]:
        """All edges, grouped by source vertex."""
        return [Edge(src, dst) for src, targets in self._dependencies.items() for dst in targets]

    def dependencies(self, vertex: T) -> frozenset[T]:
        """Get direct dependencies of a vertex (vertices it depends on)."""
        return frozenset(self._dependencies.get(vertex, ()))

    def dependents(self, vertex: T) -> frozenset[T]:
        """Get direct dependents of a vertex (vertices that depend on it)."""
        return frozenset(self._dependents.get(vertex, ()))

    def roots(self) -> frozenset[T]:
        """Get vertices with no dependencies.

        Returns:
            Set of vertices that depend on nothing.

        """
        return frozenset(v for v, deps in self._dependencies.items() if not deps)

    def leaves(self) -> frozenset[T]:
        """Get vertices nothing depends on.

        Returns:
            Set of vertices with no dependents.

        """
        return frozenset(v for v, deps in self._dependents.items() if not deps)

    def ancestors(self, vertex: T) -> frozenset[T]:
        """Get all transitive dependencies of a vertex.

        A vertex on a cycle is its own ancestor.

        Args:
            vertex: The vertex to query.

        Returns:
            Set of all vertices that this vertex transitively depends on.

        """
        return self._reachable(vertex, self._dependencies)

    def descendants(self, vertex: T) -> frozenset[T]:
        """Get all transitive dependents of a vertex.

        Args:
            vertex: The vertex to query.

        Returns:
            Set of all vertices that transitively depend on this vertex.

        """
        return self._reachable(vertex, self._dependents)

    @staticmethod
    def _reachable(vertex: T, adjacency: dict[T, tuple[T, ...]]) -> frozenset[T]:
        visited: set[T] = set()
        stack = list(adjacency.get(vertex, ()))
        while stack:
            current = stack.pop()
            if current not in visited:
                visited.add(current)
                stack.extend(adjacency.get(current, ()))
        return frozenset(visited)

    def strongly_connected_components(self) -> list[list[T]]:
        """Return the strongly connected components, dependencies first."""
        return find_and_sort_strongly_connected_components(self.vertices, self.edges())

    def topological_order(self) -> list[T]:
        """Return vertices in topological order (dependencies before dependents).

        Raises:
            CycleError: If the graph contains a cycle of two or more vertices.

        """
        return topological_sort(self.vertices, self.edges())

    def cycles(self) -> list[list[T]]:
        """Return every cycle as a component, including single self-dependent vertices."""
        return [
            component
            for component in self.strongly_connected_components()
            if len(component) > 1 or component[0] in self._dependencies[component[0]]
        ]

    def has_cycle(self) -> bool:
        """Check if the graph contains a cycle (self-dependencies included)."""
        return bool(self.cycles())

    def condensation(self) -> DependencyGraph[frozenset[T]]:
        """Collapse each strongly connected component into a single vertex.

        The result is always acyclic, and its vertices are in dependency order.
        """
        component_of: dict[T, frozenset[T]] = {}
        for component in self.strongly_connected_components():
            members = frozenset(component)
            for vertex in component:
                component_of[vertex] = members

        edges = [
            (component_of[src], component_of[dst])
            for src, dst in self.edges()
            if component_of[src] != component_of[dst]
        ]
        return DependencyGraph.from_edges(edges, vertices=component_of.values())

    def subgraph(self, vertices: Iterable[T]) -> DependencyGraph[T]:
        """Create a subgraph containing only the specified vertices.

        Edges are kept only if both endpoints are in the vertex set.
        """
        keep = frozenset(vertices)

        def restrict(adjacency: dict[T, tuple[T, ...]]) -> dict[T, tuple[T, ...]]:
            return {v: tuple(n for n in neighbours if n in keep) for v, neighbours in adjacency.items() if v in keep}

        return DependencyGraph(
            _dependencies=restrict(self._dependencies),
            _dependents=restrict(self._dependents),
        )

    def __len__(self) -> int:
        """Return the number of vertices in the graph."""
        return len(self._dependencies)

    def __contains__(self, vertex: object) -> bool:
        """Check if a vertex is in the graph."""
        return vertex in self._dependencies
