# coding: utf-8
"""Shared helpers for the truthtab test-suite."""
import unittest

from truthtab.global_params import Settings

main = unittest.main


class TestCase(unittest.TestCase):
    """Base test case with a fresh default ``Settings`` per test."""

    def setUp(self):
        self.settings = Settings()

    def assertSameTable(self, first, second):  # pylint: disable=invalid-name
        """Tables over the same variables with identical results, row by row."""
        self.assertEqual(first.variables, second.variables)
        self.assertEqual(first.results, second.results)
