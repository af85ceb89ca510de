# tnt/syntax/token.py
"""Scanner for Typographical Number Theory strings.

Besides the symbols used in the book, a few look-alike characters found on a
normal keyboard are accepted (``*`` for ``·``, ``A`` for ``∀`` and so on).
"""
from __future__ import annotations
from enum import Enum
from typing import Iterator, List, Tuple


class Token(Enum):
    ILLEGAL = 0
    EOF = 1

    ZERO = 2           # 0
    SUCCESSOR = 3      # S*
    VARIABLE = 4       # [a-e]'*
    OPEN_PAREN = 5     # (
    CLOSE_PAREN = 6    # )
    PLUS = 7           # +
    MULTIPLY = 8       # * . ·
    EQUALS = 9         # =
    NEGATION = 10      # ~
    OPEN_ANGLE = 11    # <
    CLOSE_ANGLE = 12   # >
    THERE_EXISTS = 13  # ∃ E
    FOR_ALL = 14       # ∀ A
    COLON = 15         # :
    AND = 16           # ∧ ^
    OR = 17            # ∨ V
    IF_THEN = 18       # ⊃


SINGLE_CHARS = {
    "0": Token.ZERO,
    "(": Token.OPEN_PAREN,
    ")": Token.CLOSE_PAREN,
    "+": Token.PLUS,
    "*": Token.MULTIPLY, ".": Token.MULTIPLY, "·": Token.MULTIPLY,
    "=": Token.EQUALS,
    "~": Token.NEGATION,
    "<": Token.OPEN_ANGLE,
    ">": Token.CLOSE_ANGLE,
    "E": Token.THERE_EXISTS, "∃": Token.THERE_EXISTS,
    "A": Token.FOR_ALL, "∀": Token.FOR_ALL,
    ":": Token.COLON,
    "^": Token.AND, "∧": Token.AND,
    "V": Token.OR, "∨": Token.OR,
    "⊃": Token.IF_THEN,
}

VARIABLE_LETTERS = "abcde"
PRIME = "'"
SUCCESSOR_CHAR = "S"


class Scanner:
    def __init__(self, src: str):
        self.src = src
        self.pos = 0
        self.offset = 0  # start of the last token returned

    def scan(self) -> Tuple[Token, str]:
        """Return the next token and its text.

        The text is only interesting for VARIABLE and SUCCESSOR, which can
        take many values, and for ILLEGAL, where it is the offending
        character.

        Once an illegal character is met no further progress is made and
        every later call returns the same ILLEGAL token. Once the end of
        input is reached, EOF is returned for every later call.
        """
        src = self.src
        while self.pos < len(src) and src[self.pos].isspace():
            self.pos += 1
        self.offset = self.pos

        if self.pos >= len(src):
            return Token.EOF, ""

        ch = src[self.pos]
        if ch in SINGLE_CHARS:
            self.pos += 1
            return SINGLE_CHARS[ch], ch
        if ch in VARIABLE_LETTERS:
            end = self.pos + 1
            while end < len(src) and src[end] == PRIME:
                end += 1
            return self._take(Token.VARIABLE, end)
        if ch == SUCCESSOR_CHAR:
            end = self.pos + 1
            while end < len(src) and src[end] == SUCCESSOR_CHAR:
                end += 1
            return self._take(Token.SUCCESSOR, end)
        return Token.ILLEGAL, ch

    def _take(self, tok: Token, end: int) -> Tuple[Token, str]:
        text = self.src[self.pos:end]
        self.pos = end
        return tok, text

    def __iter__(self) -> Iterator[Tuple[Token, str]]:
        while True:
            tok, text = self.scan()
            if tok == Token.EOF:
                return
            yield tok, text
            if tok == Token.ILLEGAL:
                return


def tokenize(src: str) -> List[Tuple[Token, str]]:
    return list(Scanner(src))
