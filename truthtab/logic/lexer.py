# coding: utf-8
"""
Tokenizer for propositional formulas.

Variables are single ASCII letters and are case-sensitive (``p`` and ``P``
are different variables). Connectives may be written with their canonical
symbol or an ASCII alias, see ``truthtab.logic.connectives``.
"""
import logging
import re
from typing import List

from truthtab.logic.connectives import SYMBOLS
from truthtab.logic.tokens import Token, TokenType
from truthtab.utils.exceptions import LexError

logger = logging.getLogger(__name__)

# longest spellings first so that "<->" wins over "->"
_OPERATOR_PATTERN = "|".join(
    re.escape(symbol) for symbol in sorted(SYMBOLS, key=len, reverse=True))

_TOKEN_SPEC = [
    ("VARIABLE", r"[A-Za-z]"),
    ("OPERATOR", _OPERATOR_PATTERN),
    ("LPAREN", r"\("),
    ("RPAREN", r"\)"),
    ("WHITESPACE", r"\s+"),
    ("INVALID", r"."),
]

_TOKEN_REGEX = re.compile(
    "|".join(f"(?P<{name}>{pattern})" for name, pattern in _TOKEN_SPEC), re.DOTALL)


def tokenize(expression: str) -> List[Token]:
    """Split an expression into tokens.

    Args:
        expression: Raw formula text

    Returns:
        Tokens in source order, whitespace removed

    Raises:
        LexError: On a character that is not a letter, whitespace,
            parenthesis or connective symbol
    """
    tokens = []
    for match in _TOKEN_REGEX.finditer(expression):
        kind = match.lastgroup
        value = match.group(kind)
        position = match.start()

        if kind == "WHITESPACE":
            continue
        if kind == "INVALID":
            raise LexError(value, position)

        if kind == "VARIABLE":
            tokens.append(Token(TokenType.VARIABLE, value, position))
        elif kind == "OPERATOR":
            connective = SYMBOLS[value]
            token_type = TokenType.UNARY_OP if connective.is_unary else TokenType.BINARY_OP
            tokens.append(Token(token_type, value, position, connective))
        elif kind == "LPAREN":
            tokens.append(Token(TokenType.LPAREN, value, position))
        else:
            tokens.append(Token(TokenType.RPAREN, value, position))

    logger.debug("Tokenized %r into %d tokens", expression, len(tokens))
    return tokens
