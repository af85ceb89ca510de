from __future__ import annotations
from typing import Iterable, Iterator, TYPE_CHECKING

if TYPE_CHECKING:
    from .ast import Variable


class VariableSet:
    """Immutable set of Variables. Every operation returns a new set."""
    __slots__ = ("_items",)

    def __init__(self, variables: Iterable["Variable"] = ()):
        self._items = frozenset(variables)

    @classmethod
    def of(cls, *names: str) -> "VariableSet":
        from .ast import Variable
        return cls(Variable(n) for n in names)

    def union(self, other: "VariableSet") -> "VariableSet":
        """Elements in self or other."""
        return VariableSet(self._items | other._items)

    def complement(self, other: "VariableSet") -> "VariableSet":
        """Elements in self but not in other."""
        return VariableSet(self._items - other._items)

    def intersection(self, other: "VariableSet") -> "VariableSet":
        """Elements in both self and other."""
        return VariableSet(self._items & other._items)

    def symmetric_difference(self, other: "VariableSet") -> "VariableSet":
        """Elements in self or other, but not both."""
        return self.complement(other).union(other.complement(self))

    __or__ = union
    __sub__ = complement
    __and__ = intersection
    __xor__ = symmetric_difference

    def names(self) -> list[str]:
        return sorted(v.name for v in self._items)

    def __iter__(self) -> Iterator["Variable"]:
        return iter(sorted(self._items, key=lambda v: v.name))

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, item) -> bool:
        return item in self._items

    def __eq__(self, other) -> bool:
        if not isinstance(other, VariableSet):
            return NotImplemented
        return self._items == other._items

    def __hash__(self) -> int:
        return hash(self._items)

    def __str__(self) -> str:
        return "[" + " ".join(self.names()) + "]"

    def __repr__(self) -> str:
        return f"VariableSet.of({', '.join(repr(n) for n in self.names())})"
