"""Terms and formulas of Typographical Number Theory.

    term           := NUMERAL | VARIABLE | (term + term) | (term * term) | SUCCESSOR term
    atom           := term = term
    negation       := ~ formula
    compound       := < formula ( AND | OR | IF_THEN ) formula >
    quantification := (THERE_EXISTS | FOR_ALL) VARIABLE : formula
    formula        := atom | negation | compound | quantification
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Literal, Union

from .varset import VariableSet

CompoundTermKind = Literal["sum", "product"]
CompoundKind = Literal["and", "or", "implies"]
QuantificationKind = Literal["forall", "exists"]

EMPTY = VariableSet()


@dataclass(frozen=True)
class Numeral:
    """0, S0, SS0, ... held as the number of successors applied to zero."""
    value: int

    def __post_init__(self):
        if self.value < 0:
            raise ValueError(f"numeral must be non-negative, got {self.value}")

    def variables(self) -> VariableSet:
        return EMPTY


@dataclass(frozen=True)
class Variable:
    """a, b, c, d, e, a', b'', ..."""
    name: str

    def variables(self) -> VariableSet:
        return VariableSet([self])


@dataclass(frozen=True)
class Successor:
    """S...S applied to a term that is not a Numeral."""
    quantity: int
    term: "Term"

    def __post_init__(self):
        if self.quantity < 1:
            raise ValueError(f"successor quantity must be positive, got {self.quantity}")
        if isinstance(self.term, Numeral):
            raise ValueError("successor of a numeral must be folded into a Numeral")

    def variables(self) -> VariableSet:
        return self.term.variables()


@dataclass(frozen=True)
class CompoundTerm:
    """(x+y) or (x*y)."""
    kind: CompoundTermKind
    left: "Term"
    right: "Term"

    def variables(self) -> VariableSet:
        return self.left.variables().union(self.right.variables())


Term = Union[Numeral, Variable, Successor, CompoundTerm]


def successor(quantity: int, term: Term) -> Term:
    """Apply `quantity` successors to `term`, folding into a Numeral when possible."""
    if isinstance(term, Numeral):
        return Numeral(term.value + quantity)
    return Successor(quantity, term)


@dataclass(frozen=True)
class Atom:
    """x=y. Atoms contain no quantifiers, so every variable in them is free."""
    left: Term
    right: Term

    def variables(self) -> VariableSet:
        return self.left.variables().union(self.right.variables())

    def free_variables(self) -> VariableSet:
        return self.variables()

    def is_open(self) -> bool:
        return len(self.variables()) != 0

    def is_well_formed(self) -> bool:
        return True


@dataclass(frozen=True)
class Negation:
    formula: "Formula"

    def variables(self) -> VariableSet:
        return self.formula.variables()

    def free_variables(self) -> VariableSet:
        return self.formula.free_variables()

    def is_open(self) -> bool:
        return self.formula.is_open()

    def is_well_formed(self) -> bool:
        return self.formula.is_well_formed()


@dataclass(frozen=True)
class Compound:
    """<x∧y>, <x∨y> or <x⊃y>."""
    kind: CompoundKind
    left: "Formula"
    right: "Formula"

    def variables(self) -> VariableSet:
        return self.left.variables().union(self.right.variables())

    def free_variables(self) -> VariableSet:
        # Only meaningful when the compound is well-formed.
        return self.left.free_variables().union(self.right.free_variables())

    def is_open(self) -> bool:
        return self.left.is_open() or self.right.is_open()

    def captured_variables(self) -> VariableSet:
        """Variables quantified on one side and free on the other."""
        lf, rf = self.left.free_variables(), self.right.free_variables()
        lq = self.left.variables().complement(lf)
        rq = self.right.variables().complement(rf)
        return lq.intersection(rf).union(rq.intersection(lf))

    def is_well_formed(self) -> bool:
        if not self.left.is_well_formed() or not self.right.is_well_formed():
            return False
        return len(self.captured_variables()) == 0


@dataclass(frozen=True)
class Quantification:
    """∀a:x or ∃a:x."""
    kind: QuantificationKind
    variable: Variable
    formula: "Formula"

    def variables(self) -> VariableSet:
        return self.formula.variables()

    def free_variables(self) -> VariableSet:
        return self.formula.free_variables().complement(self.variable.variables())

    def is_open(self) -> bool:
        # True when nothing is left free. Not the textbook notion of "open".
        return len(self.free_variables()) == 0

    def is_well_formed(self) -> bool:
        if not self.formula.is_well_formed():
            return False
        return self.variable in self.formula.free_variables()


Formula = Union[Atom, Negation, Compound, Quantification]
