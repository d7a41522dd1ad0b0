"""Tarjan's strongly connected components algorithm.

See https://en.wikipedia.org/wiki/Tarjan%27s_strongly_connected_components_algorithm
"""

import logging
from collections.abc import Callable, Hashable, Iterable, Iterator
from dataclasses import dataclass

from sccsort._equivalence import Equivalence, key_function

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Frame[T]:
    """One vertex on the depth-first path, with its position among its successors."""

    vertex: T
    key: Hashable
    successors: Iterator[T]


class _Search[T]:
    """State of a single traversal. Never shared between calls."""

    def __init__(
        self,
        successors: Callable[[T], Iterable[T]],
        equivalence: Equivalence[T] | None,
    ) -> None:
        self._successors = successors
        self._key = key_function(equivalence)
        self._index: dict[Hashable, int] = {}
        self._lowlink: dict[Hashable, int] = {}
        self._on_stack: set[Hashable] = set()
        self._stack: list[tuple[Hashable, T]] = []
        self._frames: list[_Frame[T]] = []
        self._result: list[list[T]] = []

    def run(self, vertices: Iterable[T]) -> list[list[T]]:
        for v in vertices:
            if self._key(v) not in self._index:
                self._strong_connect(v)
        return self._result

    def _discover(self, vertex: T, key: Hashable) -> None:
        index = len(self._index)
        self._index[key] = index
        self._lowlink[key] = index
        self._stack.append((key, vertex))
        self._on_stack.add(key)
        self._frames.append(_Frame(vertex, key, iter(self._successors(vertex))))

    def _strong_connect(self, root: T) -> None:
        self._discover(root, self._key(root))
        frames = self._frames
        lowlink = self._lowlink

        while frames:
            frame = frames[-1]
            v = frame.key
            for w in frame.successors:
                w_key = self._key(w)
                if w_key not in self._index:
                    # Descend; this frame resumes from the same iterator position.
                    self._discover(w, w_key)
                    break
                if w_key in self._on_stack:
                    lowlink[v] = min(lowlink[v], self._index[w_key])
            else:
                frames.pop()
                if lowlink[v] == self._index[v]:
                    self._pop_component(v)
                if frames:
                    parent = frames[-1].key
                    lowlink[parent] = min(lowlink[parent], lowlink[v])

    def _pop_component(self, root: Hashable) -> None:
        component: list[T] = []
        while True:
            key, vertex = self._stack.pop()
            self._on_stack.discard(key)
            component.append(vertex)
            if key is root or key == root:
                break
        self._result.append(component)


def tarjan[T](
    vertices: Iterable[T],
    successors: Callable[[T], Iterable[T]],
    equivalence: Equivalence[T] | None = None,
) -> list[list[T]]:
    """Find the strongly connected components reachable from ``vertices``.

    Components are returned in dependency order: a component is emitted only
    after every component reachable from it. Vertices reachable through
    ``successors`` but missing from ``vertices`` are included as well.

    Args:
        vertices: Seed vertices, visited in iteration order.
        successors: Returns the direct successors (dependencies) of a vertex.
        equivalence: Decides when two values are the same vertex.
            Defaults to natural equality.

    Returns:
        List of components; each component lists its vertices in stack-pop order.

    Example:
        >>> graph = {"a": ["b"], "b": ["a", "c"], "c": []}
        >>> tarjan(graph, graph.__getitem__)
        [['c'], ['b', 'a']]

    """
    result = _Search(successors, equivalence).run(vertices)
    logger.debug("Found %d strongly connected components", len(result))
    return result
