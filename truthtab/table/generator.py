# coding: utf-8
"""Truth-table generation.

Rows are enumerated in conventional order: with the variables sorted
``v0 < v1 < ... < v(n-1)``, row ``i`` assigns ``v_k`` the bit ``n-1-k``
of ``i``, so the first column changes slowest.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Tuple

from truthtab.global_params import Settings, global_settings
from truthtab.logic.ast import Node
from truthtab.logic.evaluator import evaluate
from truthtab.logic.parser import parse
from truthtab.utils.exceptions import EvalError, NoVariablesError, VariableLimitExceeded

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Row:
    """One assignment together with the value of the formula under it.

    The assignment is stored as a read-only mapping, so rows are hashable.
    """

    assignment: Mapping[str, bool]
    result: bool

    def __post_init__(self) -> None:
        object.__setattr__(self, "assignment", MappingProxyType(dict(self.assignment)))

    def __hash__(self) -> int:
        return hash((tuple(self.assignment.items()), self.result))

    def values(self) -> Tuple[bool, ...]:
        """Cell values in column order, result last."""
        return tuple(self.assignment.values()) + (self.result,)


@dataclass(frozen=True)
class TruthTable:
    """A complete truth table.

    Attributes:
        variables: Column variables, sorted
        rows: Rows in enumeration order
        expression: Source text of the formula, if known
    """

    variables: Tuple[str, ...]
    rows: Tuple[Row, ...] = field(repr=False)
    expression: Optional[str] = None

    def __len__(self) -> int:
        return len(self.rows)

    def __iter__(self) -> Iterator[Row]:
        return iter(self.rows)

    def __getitem__(self, index: int) -> Row:
        return self.rows[index]

    @property
    def results(self) -> List[bool]:
        return [row.result for row in self.rows]

    def columns(self, result_header: str = global_settings.result_header) -> List[str]:
        """Column headers: the variables followed by the result column.

        Raises:
            ValueError: If ``result_header`` is also the name of a variable
        """
        self._check_header(result_header)
        return list(self.variables) + [result_header]

    def _check_header(self, result_header: str) -> None:
        if result_header in self.variables:
            raise ValueError(
                f"result header '{result_header}' clashes with a variable of the same name")

    def is_tautology(self) -> bool:
        return all(self.results)

    def is_contradiction(self) -> bool:
        return not any(self.results)

    def is_satisfiable(self) -> bool:
        return any(self.results)

    def satisfying_rows(self) -> List[Row]:
        """Rows under which the formula is true."""
        return [row for row in self.rows if row.result]

    def to_dict(self, result_header: str = global_settings.result_header) -> Dict[str, Any]:
        """Plain-data form of the table, suitable for JSON.

        Raises:
            ValueError: If ``result_header`` is also the name of a variable
        """
        self._check_header(result_header)
        return {
            "expression": self.expression,
            "variables": list(self.variables),
            "rows": [dict(row.assignment, **{result_header: row.result}) for row in self.rows],
        }


def assignments(variables: Tuple[str, ...]) -> Iterable[Dict[str, bool]]:
    """Yield the 2^n assignments of ``variables`` in table order."""
    n = len(variables)
    for i in range(2 ** n):
        yield {var: bool((i >> (n - 1 - k)) & 1) for k, var in enumerate(variables)}


def build(node: Node, variables: Iterable[str],
          settings: Optional[Settings] = None, expression: Optional[str] = None) -> TruthTable:
    """Evaluate ``node`` under every assignment of ``variables``.

    Args:
        node: Parsed formula
        variables: Variables of the formula; sorted and deduplicated here
        settings: Limits to apply (defaults to ``global_settings``)
        expression: Source text to record on the table

    Returns:
        The complete truth table

    Raises:
        NoVariablesError: If ``variables`` is empty
        VariableLimitExceeded: If there are more variables than ``settings.max_variables``
        EvalError: If ``variables`` and the variables of ``node`` differ
    """
    settings = settings or global_settings
    columns = tuple(sorted(set(variables)))
    if not columns:
        raise NoVariablesError()
    if len(columns) > settings.max_variables:
        raise VariableLimitExceeded(len(columns), settings.max_variables)

    extra = set(columns) - node.variables()
    if extra:
        name = min(extra)
        raise EvalError(name, f"variable '{name}' does not occur in the formula")

    logger.debug("Building %d rows over %s", 2 ** len(columns), ", ".join(columns))
    rows = tuple(Row(assignment, evaluate(node, assignment))
                 for assignment in assignments(columns))
    return TruthTable(columns, rows, expression)


def compute_truth_table(node: Node, settings: Optional[Settings] = None,
                        expression: Optional[str] = None) -> TruthTable:
    """Truth table of a parsed formula over its own variables."""
    return build(node, node.variables(), settings, expression)


def generate_truth_table(expression: str, settings: Optional[Settings] = None) -> TruthTable:
    """Parse ``expression`` and compute its truth table.

    Raises:
        LexError, ParseError: If the expression is malformed
        VariableLimitExceeded: If it has too many distinct variables
    """
    node = parse(expression, settings)
    return compute_truth_table(node, settings, expression)
