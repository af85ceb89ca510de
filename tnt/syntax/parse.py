from __future__ import annotations
import logging
from contextlib import contextmanager
from typing import Optional, Tuple

from ..config import load_settings
from ..errors import (ParseError, UnexpectedToken, UnexpectedEndOfInput,
                      TrailingInput, IllegalCharacter, NestingTooDeep)
from .ast import (Term, Formula, Numeral, Variable, CompoundTerm, Atom, Negation,
                  Compound, Quantification, successor)
from .token import Scanner, Token

log = logging.getLogger(__name__)

COMPOUND_TERM_KINDS = {Token.PLUS: "sum", Token.MULTIPLY: "product"}
COMPOUND_KINDS = {Token.AND: "and", Token.OR: "or", Token.IF_THEN: "implies"}
QUANTIFIER_KINDS = {Token.FOR_ALL: "forall", Token.THERE_EXISTS: "exists"}


def parse_formula(src: str, max_depth: Optional[int] = None) -> Formula:
    """Parse `src` as exactly one formula, raising ParseError otherwise."""
    settings = load_settings(max_depth)
    parser = Parser(Scanner(src), max_depth=settings.max_depth)
    try:
        try:
            formula = parser.formula()
        except RecursionError:
            # max_depth set above what the interpreter stack can hold
            raise NestingTooDeep(parser.deepest, parser.scanner.offset) from None
        parser.expect_eof()
    except ParseError as ex:
        log.debug("failed to parse %r: %s", src, ex)
        raise
    log.debug("parsed %r as %s", src, type(formula).__name__)
    return formula


class Parser:
    """Recursive-descent parser over a Scanner.

    Each method consumes exactly the tokens of one nonterminal and does not
    look at what follows it; `expect_eof` checks that nothing is left.
    """
    def __init__(self, scanner: Scanner, max_depth: int):
        self.scanner = scanner
        self.max_depth = max_depth
        self.depth = 0
        self.deepest = 0

    def next(self) -> Tuple[Token, str]:
        return self.scanner.scan()

    @contextmanager
    def nested(self):
        self.depth += 1
        self.deepest = max(self.deepest, self.depth)
        try:
            if self.depth > self.max_depth:
                raise NestingTooDeep(self.max_depth, self.scanner.offset)
            yield
        finally:
            self.depth -= 1

    def unexpected(self, expected: str, tok: Token, val: str) -> ParseError:
        pos = self.scanner.offset
        if tok == Token.EOF:
            return UnexpectedEndOfInput(expected, pos)
        if tok == Token.ILLEGAL:
            return IllegalCharacter(val, pos)
        return UnexpectedToken(expected, tok, val, pos)

    def expect(self, want: Token, expected: str) -> str:
        tok, val = self.next()
        if tok != want:
            raise self.unexpected(expected, tok, val)
        return val

    def expect_eof(self) -> None:
        tok, val = self.next()
        if tok != Token.EOF:
            raise TrailingInput(tok, val, self.scanner.offset)

    # ---- formulas ----

    def formula(self) -> Formula:
        tok, val = self.next()
        with self.nested():
            if tok == Token.NEGATION:
                return Negation(self.formula())
            if tok == Token.OPEN_ANGLE:
                return self.compound()
            if tok in QUANTIFIER_KINDS:
                return self.quantification(QUANTIFIER_KINDS[tok])
            return self.atom(tok, val)

    def atom(self, tok: Token, val: str) -> Atom:
        left = self.term_from(tok, val)
        self.expect(Token.EQUALS, "=")
        right = self.term()
        return Atom(left, right)

    def compound(self) -> Compound:
        left = self.formula()
        tok, val = self.next()
        if tok not in COMPOUND_KINDS:
            raise self.unexpected("AND, OR or IF_THEN in compound formula", tok, val)
        right = self.formula()
        self.expect(Token.CLOSE_ANGLE, ">")
        return Compound(COMPOUND_KINDS[tok], left, right)

    def quantification(self, kind) -> Quantification:
        name = self.expect(Token.VARIABLE, "VARIABLE")
        self.expect(Token.COLON, ":")
        return Quantification(kind, Variable(name), self.formula())

    # ---- terms ----

    def term(self) -> Term:
        tok, val = self.next()
        return self.term_from(tok, val)

    def term_from(self, tok: Token, val: str) -> Term:
        """Parse a term whose first token has already been scanned."""
        with self.nested():
            if tok == Token.ZERO:
                return Numeral(0)
            if tok == Token.SUCCESSOR:
                return successor(len(val), self.term())
            if tok == Token.VARIABLE:
                return Variable(val)
            if tok == Token.OPEN_PAREN:
                left = self.term()
                op, op_val = self.next()
                if op not in COMPOUND_TERM_KINDS:
                    raise self.unexpected("+ or *", op, op_val)
                right = self.term()
                self.expect(Token.CLOSE_PAREN, ")")
                return CompoundTerm(COMPOUND_TERM_KINDS[op], left, right)
            raise self.unexpected("term", tok, val)
