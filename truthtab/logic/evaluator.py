# coding: utf-8
"""Evaluation of formulas under a truth assignment."""

from typing import Callable, Dict, Mapping

from truthtab.logic.ast import BinOp, Node, Not, VarRef
from truthtab.logic.connectives import Connective
from truthtab.utils.exceptions import EvalError

SEMANTICS: Dict[Connective, Callable[[bool, bool], bool]] = {
    Connective.AND: lambda a, b: a and b,
    Connective.OR: lambda a, b: a or b,
    Connective.XOR: lambda a, b: a != b,
    Connective.IFF: lambda a, b: a == b,
    Connective.IMPLIES: lambda a, b: (not a) or b,
}


def evaluate(node: Node, assignment: Mapping[str, bool]) -> bool:
    """Compute the truth value of a formula.

    Args:
        node: Root of the formula
        assignment: Truth value of every variable in the formula

    Returns:
        The truth value of the formula under the assignment

    Raises:
        EvalError: If a variable of the formula has no value in the assignment
    """
    if isinstance(node, VarRef):
        try:
            return bool(assignment[node.name])
        except KeyError:
            raise EvalError(node.name) from None
    if isinstance(node, Not):
        return not evaluate(node.operand, assignment)
    if isinstance(node, BinOp):
        # both sides are evaluated so a missing variable is always reported
        left = evaluate(node.left, assignment)
        right = evaluate(node.right, assignment)
        return SEMANTICS[node.connective](left, right)
    raise TypeError(f"not a formula node: {node!r}")
