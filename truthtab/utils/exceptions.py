# coding: utf-8
"""
Public subclasses of different Exceptions
"""
from typing import Optional


class TruthTabException(Exception):
    """Base class for truthtab exceptions"""

    pass


class LexError(TruthTabException):
    """Raised when the expression contains a character that is not a letter,
    whitespace, parenthesis or recognized connective symbol."""

    def __init__(self, character: str, position: int):
        self.character = character
        self.position = position
        super().__init__(f"unrecognized character '{character}' at position {position}")


class ParseError(TruthTabException):
    """Structurally invalid formula (unbalanced parentheses, missing operand, ...)."""

    def __init__(self, reason: str, position: Optional[int] = None):
        self.reason = reason
        self.position = position
        if position is None:
            super().__init__(reason)
        else:
            super().__init__(f"{reason} at position {position}")


class NoVariablesError(ParseError):
    """The expression does not mention a single variable."""

    def __init__(self):
        super().__init__("no variables found in expression")


class EvalError(TruthTabException):
    """An assignment does not match the variables of the formula."""

    def __init__(self, variable: str, message: Optional[str] = None):
        self.variable = variable
        super().__init__(message or f"no truth value assigned to variable '{variable}'")


class VariableLimitExceeded(TruthTabException):
    """The expression has more distinct variables than the configured bound."""

    def __init__(self, count: int, limit: int):
        self.count = count
        self.limit = limit
        super().__init__(
            f"expression has {count} distinct variables, the limit is {limit}")
