"""truthtab: truth tables for propositional formulas.

Typical use::

    from truthtab import generate_truth_table
    table = generate_truth_table("(P ∧ Q) → R")
"""
from .global_params import Settings, global_settings, TRUTHTAB_DEBUG
from .logic import parse
from .table import TruthTable, Row, compute_truth_table, generate_truth_table
from .utils.exceptions import (
    TruthTabException,
    LexError,
    ParseError,
    NoVariablesError,
    EvalError,
    VariableLimitExceeded,
)

__version__ = "0.1.0"

__all__ = [
    "Settings",
    "global_settings",
    "parse",
    "compute_truth_table",
    "generate_truth_table",
    "TruthTable",
    "Row",
    "TruthTabException",
    "LexError",
    "ParseError",
    "NoVariablesError",
    "EvalError",
    "VariableLimitExceeded",
]
