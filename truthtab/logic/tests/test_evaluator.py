# coding: utf-8
"""Tests for formula evaluation"""

import itertools

from truthtab.logic.ast import BinOp, Not, VarRef
from truthtab.logic.connectives import Connective
from truthtab.logic.evaluator import evaluate
from truthtab.logic.parser import parse
from truthtab.tests import TestCase, main
from truthtab.utils.exceptions import EvalError

BOOLS = (False, True)


class TestEvaluate(TestCase):
    """Truth semantics of every node kind"""

    def check_binary(self, connective, expected):
        node = BinOp(connective, VarRef("a"), VarRef("b"))
        for (a, b), want in zip(itertools.product(BOOLS, repeat=2), expected):
            with self.subTest(connective=connective, a=a, b=b):
                self.assertIs(evaluate(node, {"a": a, "b": b}), want)

    def test_variable(self):
        self.assertIs(evaluate(VarRef("p"), {"p": True}), True)
        self.assertIs(evaluate(VarRef("p"), {"p": False}), False)

    def test_not(self):
        self.assertIs(evaluate(Not(VarRef("p")), {"p": True}), False)
        self.assertIs(evaluate(Not(VarRef("p")), {"p": False}), True)

    def test_and(self):
        self.check_binary(Connective.AND, [False, False, False, True])

    def test_or(self):
        self.check_binary(Connective.OR, [False, True, True, True])

    def test_xor(self):
        self.check_binary(Connective.XOR, [False, True, True, False])

    def test_iff(self):
        self.check_binary(Connective.IFF, [True, False, False, True])

    def test_implies(self):
        self.check_binary(Connective.IMPLIES, [True, True, False, True])

    def test_compound(self):
        node = parse("(P ∧ Q) → R")
        self.assertIs(evaluate(node, {"P": True, "Q": True, "R": False}), False)
        self.assertIs(evaluate(node, {"P": True, "Q": True, "R": True}), True)
        self.assertIs(evaluate(node, {"P": False, "Q": False, "R": False}), True)

    def test_missing_variable(self):
        with self.assertRaises(EvalError) as ctx:
            evaluate(parse("p ∧ q"), {"p": True})
        self.assertEqual(ctx.exception.variable, "q")
        self.assertIn("'q'", str(ctx.exception))

    def test_missing_variable_is_reported_despite_short_circuit(self):
        with self.assertRaises(EvalError):
            evaluate(parse("p ∨ q"), {"p": True})

    def test_case_sensitive_lookup(self):
        with self.assertRaises(EvalError):
            evaluate(VarRef("P"), {"p": True})

    def test_rejects_non_nodes(self):
        with self.assertRaises(TypeError):
            evaluate("p", {"p": True})


if __name__ == '__main__':
    main()
