# coding: utf-8
"""Logical connectives, their symbols and the reference catalogue shown to users."""

from dataclasses import dataclass
from enum import Enum, auto
from typing import Dict, Tuple


class Connective(Enum):
    """Logical connectives."""

    NOT = auto()
    AND = auto()
    OR = auto()
    IMPLIES = auto()
    IFF = auto()
    XOR = auto()

    @property
    def is_unary(self) -> bool:
        return self is Connective.NOT

    @property
    def symbol(self) -> str:
        """Canonical symbol of the connective."""
        return CONNECTIVES[self].symbol


@dataclass(frozen=True)
class ConnectiveInfo:
    """Display information for a connective."""

    connective: Connective
    symbol: str
    aliases: Tuple[str, ...]
    name: str
    description: str


CONNECTIVES: Dict[Connective, ConnectiveInfo] = {
    info.connective: info for info in (
        ConnectiveInfo(Connective.AND, "∧", ("&",), "Conjunction", "logical AND"),
        ConnectiveInfo(Connective.OR, "∨", ("|",), "Disjunction", "logical OR"),
        ConnectiveInfo(Connective.NOT, "~", ("¬", "!"), "Negation", "logical NOT"),
        ConnectiveInfo(Connective.IMPLIES, "→", ("->",), "Implication", "if ... then"),
        ConnectiveInfo(Connective.IFF, "↔", ("<->",), "Biconditional", "if and only if"),
        ConnectiveInfo(Connective.XOR, "⊕", ("^",), "Exclusive or", "exactly one of"),
    )
}

# every accepted spelling -> connective
SYMBOLS: Dict[str, Connective] = {}
for _info in CONNECTIVES.values():
    for _spelling in (_info.symbol,) + _info.aliases:
        if _spelling in SYMBOLS:
            raise ValueError(f"symbol {_spelling!r} bound to two connectives")
        SYMBOLS[_spelling] = _info.connective
del _info, _spelling
