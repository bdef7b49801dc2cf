# coding: utf-8
"""AST classes for propositional formulas."""

from dataclasses import dataclass, field
from typing import FrozenSet, Tuple

from truthtab.logic.connectives import Connective

BINARY_CONNECTIVES = frozenset({
    Connective.AND, Connective.OR, Connective.IMPLIES, Connective.IFF, Connective.XOR,
})


class Node:
    """Base class for all formula nodes.

    Every node records its ``height``: the number of connectives on the
    longest path down to a variable (0 for a variable).
    """

    height: int

    def children(self) -> Tuple["Node", ...]:
        return ()

    def variables(self) -> FrozenSet[str]:
        """Names of all variables occurring in the formula."""
        names = set()
        stack = [self]
        while stack:
            node = stack.pop()
            if isinstance(node, VarRef):
                names.add(node.name)
            else:
                stack.extend(node.children())
        return frozenset(names)

    def sorted_variables(self) -> Tuple[str, ...]:
        """Variable names in lexicographic order, the column order of a truth table."""
        return tuple(sorted(self.variables()))


@dataclass(frozen=True)
class VarRef(Node):
    """Reference to a propositional variable."""

    name: str
    height: int = field(default=0, init=False, repr=False, compare=False)

    def __str__(self):
        return self.name


@dataclass(frozen=True)
class Not(Node):
    """Negation."""

    operand: Node
    height: int = field(default=0, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "height", self.operand.height + 1)

    def children(self) -> Tuple[Node, ...]:
        return (self.operand,)

    def __str__(self):
        return f"{Connective.NOT.symbol}{self.operand}"


@dataclass(frozen=True)
class BinOp(Node):
    """Binary connective applied to two sub-formulas."""

    connective: Connective
    left: Node
    right: Node
    height: int = field(default=0, init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.connective not in BINARY_CONNECTIVES:
            raise ValueError(f"{self.connective.name} is not a binary connective")
        object.__setattr__(self, "height", max(self.left.height, self.right.height) + 1)

    def children(self) -> Tuple[Node, ...]:
        return (self.left, self.right)

    def __str__(self):
        return f"({self.left} {self.connective.symbol} {self.right})"
