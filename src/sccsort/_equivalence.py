"""Equivalence relations used to identify vertices.

Every map and set the algorithms keep internally is keyed through an
:class:`Equivalence`, so callers can decide when two values denote the same
vertex without changing the values' own ``__eq__``/``__hash__``.
"""

from collections.abc import Callable, Hashable
from dataclasses import dataclass
from typing import Protocol, runtime_checkable


@runtime_checkable
class Equivalence[T](Protocol):
    """An equality predicate paired with a compatible hash function.

    Values for which ``equals`` returns True must have equal ``hash`` values.
    """

    def equals(self, a: T, b: T) -> bool: ...

    def hash(self, value: T) -> int: ...


@dataclass(frozen=True, slots=True)
class NaturalEquivalence:
    """The values' own ``==`` and ``hash()``."""

    def equals(self, a: object, b: object) -> bool:
        return a == b

    def hash(self, value: object) -> int:
        return hash(value)


@dataclass(frozen=True, slots=True)
class KeyEquivalence[T]:
    """Values are equivalent when their keys compare equal.

    Example:
        >>> names = KeyEquivalence(str.casefold)
        >>> names.equals("Core", "CORE")
        True

    """

    key: Callable[[T], Hashable]

    def equals(self, a: T, b: T) -> bool:
        return self.key(a) == self.key(b)

    def hash(self, value: T) -> int:
        return hash(self.key(value))


@dataclass(frozen=True, slots=True)
class IdentityEquivalence:
    """Values are equivalent only when they are the same object.

    Useful for unhashable vertices or objects with an overly broad ``__eq__``.
    """

    def equals(self, a: object, b: object) -> bool:
        return a is b

    def hash(self, value: object) -> int:
        return id(value)


NATURAL = NaturalEquivalence()


class _Keyed[T]:
    """Wraps a vertex so dict/set lookups go through an equivalence."""

    __slots__ = ("_equivalence", "_hash", "value")

    def __init__(self, value: T, equivalence: Equivalence[T]) -> None:
        self.value = value
        self._equivalence = equivalence
        self._hash = equivalence.hash(value)

    def __hash__(self) -> int:
        return self._hash

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, _Keyed):
            return NotImplemented
        return self._equivalence.equals(self.value, other.value)

    def __repr__(self) -> str:
        return f"_Keyed({self.value!r})"


def key_function[T](equivalence: Equivalence[T] | None) -> Callable[[T], Hashable]:
    """Return a function mapping vertices to dictionary keys for ``equivalence``.

    ``None`` and :data:`NATURAL` use the vertex itself as the key.
    """
    if equivalence is None or isinstance(equivalence, NaturalEquivalence):
        return _identity
    return lambda value: _Keyed(value, equivalence)


def _identity[T](value: T) -> T:
    return value
