from __future__ import annotations
from typing import Optional


class ParseError(Exception):
    """Error while parsing a formula, with the offset where it was detected."""
    def __init__(self, message: str, position: Optional[int] = None):
        self.position = position
        if position is not None:
            message = f"{message} at offset {position}"
        super().__init__(message)


class UnexpectedToken(ParseError):
    def __init__(self, expected: str, actual, lexeme: str = "", position: Optional[int] = None):
        self.expected = expected
        self.actual = actual
        self.lexeme = lexeme
        super().__init__(f"expected {expected} but got {actual.name} {lexeme!r}", position)


class UnexpectedEndOfInput(ParseError):
    def __init__(self, expected: str, position: Optional[int] = None):
        self.expected = expected
        super().__init__(f"expected {expected} but reached end of input", position)


class TrailingInput(ParseError):
    def __init__(self, remaining, lexeme: str = "", position: Optional[int] = None):
        self.remaining = remaining
        self.lexeme = lexeme
        super().__init__(f"expected end of input but got {remaining.name} {lexeme!r}", position)


class IllegalCharacter(ParseError):
    def __init__(self, character: str, position: Optional[int] = None):
        self.character = character
        super().__init__(f"illegal character {character!r}", position)


class NestingTooDeep(ParseError):
    def __init__(self, max_depth: int, position: Optional[int] = None):
        self.max_depth = max_depth
        super().__init__(f"formula nested deeper than {max_depth} levels", position)


class ConfigurationError(ValueError):
    """Invalid parser settings, e.g. a malformed TNT_MAX_DEPTH."""
