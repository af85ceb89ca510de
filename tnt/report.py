from __future__ import annotations
from typing import List, Literal, Optional
from pydantic import BaseModel, Field

from .checks.wellformed import check
from .syntax.ast import Formula
from .syntax.parse import parse_formula

FormulaKind = Literal["Atom", "Negation", "Compound", "Quantification"]


class IssueModel(BaseModel):
    code: Literal["VARIABLE_CAPTURE", "VACUOUS_QUANTIFIER"]
    path: str
    message: str
    variables: List[str] = Field(default_factory=list)


class FormulaReport(BaseModel):
    source: str
    kind: FormulaKind
    variables: List[str] = Field(default_factory=list)
    free_variables: List[str] = Field(default_factory=list)
    open: bool
    well_formed: bool
    issues: List[IssueModel] = Field(default_factory=list)


def report_for(source: str, phi: Formula) -> FormulaReport:
    return FormulaReport(
        source=source,
        kind=type(phi).__name__,
        variables=phi.variables().names(),
        free_variables=phi.free_variables().names(),
        open=phi.is_open(),
        well_formed=phi.is_well_formed(),
        issues=[IssueModel(code=i.code, path=i.path, message=i.message, variables=i.variables)
                for i in check(phi)],
    )


def describe(source: str, max_depth: Optional[int] = None) -> FormulaReport:
    """Parse `source` and summarise its semantic properties. Raises ParseError."""
    return report_for(source, parse_formula(source, max_depth=max_depth))
