"""Parse and analyse formulas of Typographical Number Theory."""
from .errors import ParseError
from .syntax.parse import parse_formula
from .report import describe

__version__ = "0.1.0"

__all__ = ["ParseError", "parse_formula", "describe", "__version__"]
