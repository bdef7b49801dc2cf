# coding: utf-8
"""
Recursive-descent parser for propositional formulas.

Grammar, loosest binding first::

    iff      := implies ("↔" implies)*      left-associative
    implies  := xor ("→" xor)*              left-associative
    xor      := or ("⊕" or)*                left-associative
    or       := and ("∨" and)*              left-associative
    and      := unary ("∧" unary)*          left-associative
    unary    := "~" unary | atom
    atom     := VARIABLE | "(" iff ")"
"""
import logging
from typing import List, Optional, Sequence

from truthtab.global_params import Settings, global_settings
from truthtab.logic.ast import BinOp, Node, Not, VarRef
from truthtab.logic.connectives import Connective
from truthtab.logic.lexer import tokenize
from truthtab.logic.tokens import Token, TokenType
from truthtab.utils.exceptions import NoVariablesError, ParseError

logger = logging.getLogger(__name__)

# binary connectives from loosest to tightest binding
PRECEDENCE: List[Connective] = [
    Connective.IFF,
    Connective.IMPLIES,
    Connective.XOR,
    Connective.OR,
    Connective.AND,
]


class Parser:
    """Builds a formula AST from a token sequence.

    A parser instance is single-use: create one per token sequence.
    """

    def __init__(self, tokens: Sequence[Token], max_depth: int = global_settings.max_depth,
                 max_height: int = global_settings.max_height):
        self.tokens = list(tokens)
        self.pos = 0
        self.depth = 0
        self.max_depth = max_depth
        self.max_height = max_height

    def parse(self) -> Node:
        """Parse the whole token sequence.

        Raises:
            ParseError: If the tokens do not form exactly one well-formed formula
        """
        if not self.tokens:
            raise ParseError("empty expression")
        if not any(tok.type == TokenType.VARIABLE for tok in self.tokens):
            raise NoVariablesError()

        node = self._binary(0)
        if self.pos < len(self.tokens):
            self._trailing(self.tokens[self.pos])
        return node

    # ------------------------------------------------------------------ #

    def _peek(self) -> Optional[Token]:
        if self.pos < len(self.tokens):
            return self.tokens[self.pos]
        return None

    def _advance(self) -> Token:
        tok = self.tokens[self.pos]
        self.pos += 1
        return tok

    def _binary(self, level: int) -> Node:
        if level == len(PRECEDENCE):
            return self._unary()
        connective = PRECEDENCE[level]
        left = self._binary(level + 1)
        while True:
            tok = self._peek()
            if tok is None or tok.type != TokenType.BINARY_OP or tok.connective != connective:
                return left
            self._advance()
            if self._peek() is None:
                raise ParseError(f"missing operand after '{tok.value}'", tok.position)
            right = self._binary(level + 1)
            left = self._check_height(BinOp(connective, left, right), tok)

    def _unary(self) -> Node:
        tok = self._peek()
        if tok is not None and tok.type == TokenType.UNARY_OP:
            self._advance()
            if self._peek() is None:
                raise ParseError(f"missing operand after '{tok.value}'", tok.position)
            self._enter(tok)
            operand = self._unary()
            self.depth -= 1
            return self._check_height(Not(operand), tok)
        return self._atom()

    def _atom(self) -> Node:
        tok = self._peek()
        if tok is None:
            # callers check for a following token before descending
            raise ParseError("unexpected end of expression")
        if tok.type == TokenType.VARIABLE:
            self._advance()
            return VarRef(tok.value)
        if tok.type == TokenType.LPAREN:
            self._advance()
            closing = self._peek()
            if closing is None:
                raise ParseError("unbalanced parentheses: '(' is never closed", tok.position)
            if closing.type == TokenType.RPAREN:
                raise ParseError("empty parentheses", tok.position)
            self._enter(tok)
            node = self._binary(0)
            self.depth -= 1
            closing = self._peek()
            if closing is None:
                raise ParseError("unbalanced parentheses: '(' is never closed", tok.position)
            if closing.type != TokenType.RPAREN:
                self._trailing(closing)
            self._advance()
            return node
        previous = self.tokens[self.pos - 1] if self.pos > 0 else None
        if previous is not None and previous.type in (TokenType.BINARY_OP, TokenType.UNARY_OP):
            raise ParseError(f"missing operand after '{previous.value}'", previous.position)
        if tok.type == TokenType.RPAREN:
            raise ParseError("unbalanced parentheses: unexpected ')'", tok.position)
        if tok.type == TokenType.BINARY_OP:
            raise ParseError(f"missing operand before '{tok.value}'", tok.position)
        raise ParseError(f"unexpected token '{tok.value}'", tok.position)

    def _enter(self, tok: Token) -> None:
        self.depth += 1
        if self.depth > self.max_depth:
            raise ParseError(f"expression nested deeper than {self.max_depth} levels",
                             tok.position)

    def _check_height(self, node: Node, tok: Token) -> Node:
        if node.height > self.max_height:
            raise ParseError(f"formula has more than {self.max_height} nested connectives",
                             tok.position)
        return node

    def _trailing(self, tok: Token) -> None:
        """Report a token left over after a complete sub-formula."""
        if tok.type == TokenType.RPAREN:
            raise ParseError("unbalanced parentheses: unexpected ')'", tok.position)
        if tok.type in (TokenType.VARIABLE, TokenType.LPAREN, TokenType.UNARY_OP):
            previous = self.tokens[self.pos - 1]
            raise ParseError(
                f"missing operator between '{previous.value}' and '{tok.value}'", tok.position)
        raise ParseError(f"unexpected token '{tok.value}'", tok.position)


def parse_tokens(tokens: Sequence[Token], settings: Optional[Settings] = None) -> Node:
    """Parse an already tokenized formula."""
    settings = settings or global_settings
    return Parser(tokens, max_depth=settings.max_depth,
                  max_height=settings.max_height).parse()


def parse(expression: str, settings: Optional[Settings] = None) -> Node:
    """Parse a formula string into an AST.

    Args:
        expression: Formula text, e.g. ``"(P ∧ Q) → R"``
        settings: Limits to apply (defaults to ``global_settings``)

    Returns:
        The root node of the formula

    Raises:
        LexError: On an unrecognized character
        ParseError: On a structurally invalid formula
        NoVariablesError: If the formula mentions no variable
    """
    settings = settings or global_settings
    if len(expression) > settings.max_expression_length:
        raise ParseError(
            f"expression is longer than {settings.max_expression_length} characters")
    node = parse_tokens(tokenize(expression), settings)
    logger.debug("Parsed %r as %s", expression, node)
    return node
