"""Dependency-ordered sorting built on the strongly connected components search."""

import logging
from collections.abc import Callable, Hashable, Iterable

from sccsort._edge import EdgeInput, endpoints
from sccsort._equivalence import Equivalence, key_function
from sccsort._errors import CycleError, DuplicateKeyError, InvalidArgumentError

from ._tarjan import tarjan

logger = logging.getLogger(__name__)


def _successor_lookup[T](
    edges: Iterable[EdgeInput[T]],
    key: Callable[[T], Hashable],
) -> Callable[[T], list[T]]:
    """Group edge targets by source, keeping insertion order."""
    targets: dict[Hashable, list[T]] = {}
    n_edges = 0
    for e in edges:
        source, target = endpoints(e)
        targets.setdefault(key(source), []).append(target)
        n_edges += 1
    logger.debug("Grouped %d edges under %d source vertices", n_edges, len(targets))

    def successors(vertex: T) -> list[T]:
        return targets.get(key(vertex), [])

    return successors


def find_and_sort_strongly_connected_components[T](
    vertices: Iterable[T],
    edges: Iterable[EdgeInput[T]],
    equivalence: Equivalence[T] | None = None,
) -> list[list[T]]:
    """Find the strongly connected components of a graph in dependency order.

    This is a topological sort that tolerates cycles: all vertices of a cycle
    are returned together as one component.

    Args:
        vertices: Vertices of the graph. Vertices only reachable through
            ``edges`` are included in the result too.
        edges: Edges of the graph, as :class:`~sccsort.Edge` objects or
            ``(source, target)`` pairs. For an edge ``(a, b)``, ``b``'s
            component appears no later than ``a``'s.
        equivalence: Decides when two values are the same vertex.
            Defaults to natural equality.

    Returns:
        List of components, dependencies first.

    Raises:
        InvalidArgumentError: If ``vertices`` or ``edges`` is None.

    Example:
        >>> find_and_sort_strongly_connected_components(["a", "b", "c"], [("a", "b"), ("b", "a"), ("b", "c")])
        [['c'], ['b', 'a']]

    """
    if vertices is None:
        raise InvalidArgumentError("vertices")
    if edges is None:
        raise InvalidArgumentError("edges")

    successors = _successor_lookup(edges, key_function(equivalence))
    return tarjan(vertices, successors, equivalence)


class _Projection[S, T]:
    """Backreferences from projected vertices to the objects they came from."""

    def __init__(
        self,
        source: Iterable[S],
        project: Callable[[S], T],
        equivalence: Equivalence[T] | None,
    ) -> None:
        self._key = key_function(equivalence)
        self._backref: dict[Hashable, tuple[T, S]] = {}
        for item in source:
            vertex = project(item)
            k = self._key(vertex)
            if k in self._backref:
                raise DuplicateKeyError(vertex, self._backref[k][1], item)
            self._backref[k] = (vertex, item)

    @property
    def vertices(self) -> list[T]:
        return [vertex for vertex, _ in self._backref.values()]

    def objects(self, component: list[T]) -> list[S]:
        """Map a component back to source objects, skipping vertices without one."""
        found = (self._backref.get(self._key(vertex)) for vertex in component)
        return [entry[1] for entry in found if entry is not None]


def _check_projection_arguments(source: object, project: object, edges: object) -> None:
    if source is None:
        raise InvalidArgumentError("source")
    if project is None:
        raise InvalidArgumentError("project")
    if edges is None:
        raise InvalidArgumentError("edges")


def find_and_sort_strongly_connected_components_by[S, T](
    source: Iterable[S],
    project: Callable[[S], T],
    edges: Iterable[EdgeInput[T]],
    equivalence: Equivalence[T] | None = None,
) -> list[list[S]]:
    """Sort arbitrary objects into strongly connected components.

    Each object is identified by the vertex ``project`` returns for it, and
    ``edges`` are expressed between those vertices.

    Vertices that are only reachable through ``edges`` have no source object
    and are left out of the result; a component made up solely of such
    vertices is left out entirely.

    Raises:
        InvalidArgumentError: If ``source``, ``project`` or ``edges`` is None.
        DuplicateKeyError: If two objects project to equivalent vertices.

    """
    _check_projection_arguments(source, project, edges)
    projection = _Projection(source, project, equivalence)
    components = find_and_sort_strongly_connected_components(projection.vertices, edges, equivalence)
    return [items for items in map(projection.objects, components) if items]


def _reject_cycles[T](components: list[list[T]]) -> None:
    cyclic = [component for component in components if len(component) > 1]
    if cyclic:
        logger.debug("Found %d cyclic components", len(cyclic))
        raise CycleError(cyclic)


def topological_sort[T](
    vertices: Iterable[T],
    edges: Iterable[EdgeInput[T]],
    equivalence: Equivalence[T] | None = None,
) -> list[T]:
    """Sort vertices topologically (dependencies before dependents).

    Args:
        vertices: Vertices of the graph.
        edges: Edges of the graph. For an edge ``(a, b)``, ``b`` appears
            before ``a`` in the result.
        equivalence: Decides when two values are the same vertex.
            Defaults to natural equality.

    Returns:
        List of vertices in topological order.

    Raises:
        InvalidArgumentError: If ``vertices`` or ``edges`` is None.
        CycleError: If the graph contains a cycle.

    Example:
        >>> topological_sort(["a", "b", "c"], [("a", "b"), ("b", "c")])
        ['c', 'b', 'a']

    """
    components = find_and_sort_strongly_connected_components(vertices, edges, equivalence)
    _reject_cycles(components)
    return [component[0] for component in components]


def topological_sort_by[S, T](
    source: Iterable[S],
    project: Callable[[S], T],
    edges: Iterable[EdgeInput[T]],
    equivalence: Equivalence[T] | None = None,
) -> list[S]:
    """Sort arbitrary objects topologically by the vertices ``project`` returns.

    Cycles are detected between vertices, so a cycle running through a vertex
    without a source object is still rejected.

    Raises:
        InvalidArgumentError: If ``source``, ``project`` or ``edges`` is None.
        DuplicateKeyError: If two objects project to equivalent vertices.
        CycleError: If the graph contains a cycle.

    """
    _check_projection_arguments(source, project, edges)
    projection = _Projection(source, project, equivalence)
    components = find_and_sort_strongly_connected_components(projection.vertices, edges, equivalence)
    _reject_cycles(components)
    return [item for component in components for item in projection.objects(component)]
