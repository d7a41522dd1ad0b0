"""Directed edges between vertices."""

from collections.abc import Iterator
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class EdgeLike[T](Protocol):
    """Anything with ``source`` and ``target`` attributes can be used as an edge."""

    @property
    def source(self) -> T: ...

    @property
    def target(self) -> T: ...


@dataclass(frozen=True, slots=True)
class Edge[T]:
    """A directed edge: ``source`` depends on ``target``.

    In every sorted result, ``target`` appears no later than ``source``.
    """

    source: T
    target: T

    def __iter__(self) -> Iterator[T]:
        yield self.source
        yield self.target


def edge[T](source: T, target: T) -> Edge[T]:
    """Create an :class:`Edge` from ``source`` to ``target``."""
    return Edge(source, target)


type EdgeInput[T] = EdgeLike[T] | tuple[T, T] | list[T]


def endpoints[T](e: EdgeInput[T]) -> tuple[T, T]:
    """Return ``(source, target)`` for an edge object or a two-item tuple or list."""
    if isinstance(e, tuple | list):
        source, target = e
        return source, target
    return e.source, e.target
