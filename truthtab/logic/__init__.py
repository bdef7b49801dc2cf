"""Tokenizer, parser and evaluator for propositional formulas."""

from .ast import BinOp, Node, Not, VarRef
from .connectives import CONNECTIVES, Connective
from .evaluator import evaluate
from .lexer import tokenize
from .parser import parse, parse_tokens

__all__ = [
    "BinOp", "Node", "Not", "VarRef",
    "CONNECTIVES", "Connective",
    "evaluate", "tokenize", "parse", "parse_tokens",
]
