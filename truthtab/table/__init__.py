"""Truth-table generation and rendering."""

from .generator import Row, TruthTable, build, compute_truth_table, generate_truth_table
from .render import FORMATS, render
