# coding: utf-8
"""Token types produced by the lexer."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from truthtab.logic.connectives import Connective


class TokenType(Enum):
    """Token types."""

    VARIABLE = auto()
    UNARY_OP = auto()
    BINARY_OP = auto()
    LPAREN = auto()
    RPAREN = auto()


@dataclass(frozen=True)
class Token:
    """A lexical token.

    Attributes:
        type: Kind of token
        value: Source text of the token (the letter for variables)
        position: 0-based offset of the token in the expression
        connective: Connective of an operator token, ``None`` otherwise
    """

    type: TokenType
    value: str
    position: int
    connective: Optional[Connective] = None

    def __repr__(self):
        return f"Token({self.type.name}, '{self.value}', pos={self.position})"
