"""Graph module providing strongly connected components and dependency sorting.

This module contains:
- tarjan: Tarjan's strongly connected components search
- find_and_sort_strongly_connected_components[_by]: Cycle-tolerant dependency sort
- topological_sort[_by]: Strict dependency sort rejecting cycles
- DependencyGraph[T]: A generic, immutable dependency graph
"""

from ._dependency_graph import DependencyGraph
from ._sort import (
    find_and_sort_strongly_connected_components,
    find_and_sort_strongly_connected_components_by,
    topological_sort,
    topological_sort_by,
)
from ._tarjan import tarjan

__all__ = [
    "DependencyGraph",
    "find_and_sort_strongly_connected_components",
    "find_and_sort_strongly_connected_components_by",
    "tarjan",
    "topological_sort",
    "topological_sort_by",
]
