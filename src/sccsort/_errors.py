"""Exceptions raised by sccsort."""

from collections.abc import Sequence


class SortError(Exception):
    """Base class for sccsort errors."""


class InvalidArgumentError(SortError, ValueError):
    """Raised when a required argument is missing (``None``)."""

    def __init__(self, argument: str) -> None:
        self.argument = argument
        super().__init__(f"Argument '{argument}' must not be None")


class DuplicateKeyError(SortError, ValueError):
    """Raised when two source objects project to equivalent vertex keys."""

    def __init__(self, key: object, first: object, second: object) -> None:
        self.key = key
        self.first = first
        self.second = second
        super().__init__(f"Duplicate vertex key {key!r} for {first!r} and {second!r}")


class CycleError(SortError, ValueError):
    """Raised by the strict topological sort when the graph contains cycles.

    Attributes:
        components: The strongly connected components with more than one vertex.

    """

    def __init__(self, components: Sequence[Sequence[object]]) -> None:
        self.components = [list(component) for component in components]
        n = len(self.components)
        super().__init__(f"Cycles in graph ({n} cyclic component{'s' if n != 1 else ''})")


class GraphFileError(SortError):
    """Raised when a graph document cannot be read or is invalid."""
