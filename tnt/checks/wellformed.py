# tnt/checks/wellformed.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List

from ..syntax.ast import Formula, Atom, Negation, Compound, Quantification


@dataclass
class Issue:
    code: str         # "VARIABLE_CAPTURE" or "VACUOUS_QUANTIFIER"
    path: str         # dotted path from the root, e.g. "formula.left.formula"
    message: str
    variables: List[str] = field(default_factory=list)


def check(phi: Formula, path: str = "formula") -> List[Issue]:
    """List every reason `phi` is not well-formed; empty iff phi.is_well_formed()."""
    issues: List[Issue] = []
    _walk(phi, path, issues)
    return issues


def _walk(phi: Formula, path: str, issues: List[Issue]) -> None:
    if isinstance(phi, Atom):
        return
    if isinstance(phi, Negation):
        _walk(phi.formula, f"{path}.formula", issues)
        return
    if isinstance(phi, Compound):
        _walk(phi.left, f"{path}.left", issues)
        _walk(phi.right, f"{path}.right", issues)
        captured = phi.captured_variables()
        if captured:
            issues.append(Issue(
                code="VARIABLE_CAPTURE", path=path,
                message=f"Variables {captured} are quantified on one side of the "
                        f"{phi.kind} and free on the other",
                variables=captured.names()))
        return
    if isinstance(phi, Quantification):
        _walk(phi.formula, f"{path}.formula", issues)
        if phi.variable not in phi.formula.free_variables():
            issues.append(Issue(
                code="VACUOUS_QUANTIFIER", path=path,
                message=f"Quantified variable {phi.variable.name} is not free in its body",
                variables=[phi.variable.name]))
        return
    raise TypeError(type(phi))
