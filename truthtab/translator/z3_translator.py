"""
Bridge from truthtab formulas to z3.

The truth-table generator decides everything by enumeration; z3 gives an
independent answer that does not depend on the number of variables, which
is used to classify formulas and to cross-check generated tables.
"""

import logging
from enum import Enum
from typing import Dict, List, Optional

import z3

from truthtab.logic.ast import BinOp, Node, Not, VarRef
from truthtab.logic.connectives import Connective
from truthtab.table.generator import TruthTable

logger = logging.getLogger(__name__)


class FormulaKind(Enum):
    """Classification of a propositional formula."""

    TAUTOLOGY = "tautology"
    CONTRADICTION = "contradiction"
    CONTINGENT = "contingent"


def to_z3(node: Node, symbols: Optional[Dict[str, z3.BoolRef]] = None) -> z3.BoolRef:
    """Translate a formula into a z3 boolean expression.

    Args:
        node: Root of the formula
        symbols: Cache of z3 constants by variable name, filled in as needed

    Returns:
        An equivalent z3 expression over ``z3.Bool`` constants named after the variables
    """
    if symbols is None:
        symbols = {}
    if isinstance(node, VarRef):
        if node.name not in symbols:
            symbols[node.name] = z3.Bool(node.name)
        return symbols[node.name]
    if isinstance(node, Not):
        return z3.Not(to_z3(node.operand, symbols))
    if isinstance(node, BinOp):
        left = to_z3(node.left, symbols)
        right = to_z3(node.right, symbols)
        if node.connective == Connective.AND:
            return z3.And(left, right)
        if node.connective == Connective.OR:
            return z3.Or(left, right)
        if node.connective == Connective.XOR:
            return z3.Xor(left, right)
        if node.connective == Connective.IFF:
            return left == right
        if node.connective == Connective.IMPLIES:
            return z3.Implies(left, right)
    raise TypeError(f"not a formula node: {node!r}")


def _is_sat(expr: z3.BoolRef) -> bool:
    solver = z3.Solver()
    solver.add(expr)
    result = solver.check()
    if result == z3.unknown:
        raise RuntimeError(f"z3 returned unknown: {solver.reason_unknown()}")
    return result == z3.sat


def is_equivalent(first: Node, second: Node) -> bool:
    """Whether two formulas agree under every assignment of their variables."""
    symbols: Dict[str, z3.BoolRef] = {}
    return not _is_sat(z3.Xor(to_z3(first, symbols), to_z3(second, symbols)))


def classify(node: Node) -> FormulaKind:
    """Decide whether a formula is a tautology, a contradiction or contingent."""
    expr = to_z3(node)
    if not _is_sat(expr):
        return FormulaKind.CONTRADICTION
    if not _is_sat(z3.Not(expr)):
        return FormulaKind.TAUTOLOGY
    return FormulaKind.CONTINGENT


def verify_table(table: TruthTable, node: Node) -> List[int]:
    """Re-evaluate every row of ``table`` with z3.

    Returns:
        Indices of the rows whose result disagrees with z3 (empty when the table is correct)
    """
    symbols = {name: z3.Bool(name) for name in table.variables}
    expr = to_z3(node, symbols)
    mismatches = []
    for index, row in enumerate(table):
        substitution = [(symbols[name], z3.BoolVal(value))
                        for name, value in row.assignment.items()]
        value = z3.is_true(z3.simplify(z3.substitute(expr, *substitution)))
        if value != row.result:
            mismatches.append(index)
    if mismatches:
        logger.warning("%d of %d rows disagree with z3", len(mismatches), len(table))
    return mismatches
