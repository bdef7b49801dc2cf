# coding: utf-8
"""Tests for the formula tokenizer"""

import unittest

from truthtab.logic.connectives import Connective
from truthtab.logic.lexer import tokenize
from truthtab.logic.tokens import TokenType
from truthtab.utils.exceptions import LexError


class TestTokenize(unittest.TestCase):
    """Test cases for tokenize"""

    def test_canonical_symbols(self):
        tokens = tokenize("(P ∧ Q) → ~R")
        self.assertEqual([t.type for t in tokens], [
            TokenType.LPAREN, TokenType.VARIABLE, TokenType.BINARY_OP, TokenType.VARIABLE,
            TokenType.RPAREN, TokenType.BINARY_OP, TokenType.UNARY_OP, TokenType.VARIABLE,
        ])
        self.assertEqual(tokens[2].connective, Connective.AND)
        self.assertEqual(tokens[5].connective, Connective.IMPLIES)
        self.assertEqual(tokens[6].connective, Connective.NOT)

    def test_whitespace_is_discarded(self):
        self.assertEqual(len(tokenize("  p\t∨\nq  ")), 3)
        self.assertEqual(tokenize("   "), [])

    def test_positions(self):
        tokens = tokenize("p  ⊕ q")
        self.assertEqual([t.position for t in tokens], [0, 3, 5])

    def test_variables_are_case_sensitive(self):
        tokens = tokenize("pP")
        self.assertEqual([t.value for t in tokens], ["p", "P"])

    def test_each_letter_is_a_variable(self):
        tokens = tokenize("pq")
        self.assertEqual([t.type for t in tokens], [TokenType.VARIABLE] * 2)

    def test_ascii_aliases(self):
        expected = {
            "&": Connective.AND, "|": Connective.OR, "!": Connective.NOT,
            "¬": Connective.NOT, "->": Connective.IMPLIES, "<->": Connective.IFF,
            "^": Connective.XOR,
        }
        for spelling, connective in expected.items():
            with self.subTest(spelling=spelling):
                tokens = tokenize(f"p {spelling} q")
                self.assertEqual(tokens[1].connective, connective)
                self.assertEqual(tokens[1].value, spelling)

    def test_biconditional_alias_is_not_split(self):
        tokens = tokenize("p<->q")
        self.assertEqual(len(tokens), 3)
        self.assertEqual(tokens[1].connective, Connective.IFF)

    def test_unrecognized_character(self):
        with self.assertRaises(LexError) as ctx:
            tokenize("p ∧ 1")
        self.assertEqual(ctx.exception.character, "1")
        self.assertEqual(ctx.exception.position, 4)

    def test_lone_dash_and_angle_are_rejected(self):
        for text in ("p - q", "p < q", "p > q", "p = q"):
            with self.subTest(text=text):
                with self.assertRaises(LexError):
                    tokenize(text)

    def test_non_ascii_letters_are_rejected(self):
        with self.assertRaises(LexError):
            tokenize("é")


if __name__ == '__main__':
    unittest.main()
