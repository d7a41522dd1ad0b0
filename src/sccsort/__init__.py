"""Strongly connected components and dependency-ordered sorting."""

__all__ = [
    "NATURAL",
    "CycleError",
    "DependencyGraph",
    "DuplicateKeyError",
    "Edge",
    "EdgeLike",
    "EdgeSpec",
    "Equivalence",
    "GraphDocument",
    "GraphFileError",
    "IdentityEquivalence",
    "InvalidArgumentError",
    "KeyEquivalence",
    "NaturalEquivalence",
    "SortError",
    "edge",
    "find_and_sort_strongly_connected_components",
    "find_and_sort_strongly_connected_components_by",
    "load_graph",
    "tarjan",
    "topological_sort",
    "topological_sort_by",
]

from ._edge import Edge, EdgeLike, edge
from ._equivalence import NATURAL, Equivalence, IdentityEquivalence, KeyEquivalence, NaturalEquivalence
from ._errors import CycleError, DuplicateKeyError, GraphFileError, InvalidArgumentError, SortError
from ._graph import (
    DependencyGraph,
    find_and_sort_strongly_connected_components,
    find_and_sort_strongly_connected_components_by,
    tarjan,
    topological_sort,
    topological_sort_by,
)
from ._io import EdgeSpec, GraphDocument, load_graph
