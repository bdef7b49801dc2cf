# coding: utf-8
"""Text renditions of a truth table: aligned text, CSV, JSON and Markdown."""

import csv
import io
import json
from typing import Callable, Dict, List, Optional

from truthtab.global_params import Settings, global_settings
from truthtab.table.generator import TruthTable


def _label(value: bool, settings: Settings) -> str:
    return settings.true_label if value else settings.false_label


def _cells(table: TruthTable, settings: Settings) -> List[List[str]]:
    return [[_label(value, settings) for value in row.values()] for row in table]


def render_text(table: TruthTable, settings: Optional[Settings] = None) -> str:
    """Aligned plain-text table with a header rule."""
    settings = settings or global_settings
    header = table.columns(settings.result_header)
    body = _cells(table, settings)
    widths = [max([len(title)] + [len(line[i]) for line in body])
              for i, title in enumerate(header)]

    def fmt(cells):
        # variables | result
        left = " ".join(cell.center(width) for cell, width in zip(cells[:-1], widths[:-1]))
        return f"{left} | {cells[-1].center(widths[-1])}".rstrip()

    lines = [fmt(header), "-" * len(fmt(header))]
    lines.extend(fmt(line) for line in body)
    return "\n".join(lines) + "\n"


def render_csv(table: TruthTable, settings: Optional[Settings] = None) -> str:
    settings = settings or global_settings
    out = io.StringIO()
    writer = csv.writer(out, lineterminator="\n")
    writer.writerow(table.columns(settings.result_header))
    writer.writerows(_cells(table, settings))
    return out.getvalue()


def render_json(table: TruthTable, settings: Optional[Settings] = None) -> str:
    """JSON object with the expression, the variables and one object per row.

    Cells are JSON booleans; the truth labels of ``settings`` are not used.
    """
    settings = settings or global_settings
    return json.dumps(table.to_dict(settings.result_header), ensure_ascii=False, indent=2) + "\n"


def render_markdown(table: TruthTable, settings: Optional[Settings] = None) -> str:
    settings = settings or global_settings
    header = table.columns(settings.result_header)
    lines = ["| " + " | ".join(header) + " |",
             "|" + "|".join(":---:" for _ in header) + "|"]
    lines.extend("| " + " | ".join(line) + " |" for line in _cells(table, settings))
    return "\n".join(lines) + "\n"


FORMATS: Dict[str, Callable[[TruthTable, Optional[Settings]], str]] = {
    "text": render_text,
    "csv": render_csv,
    "json": render_json,
    "markdown": render_markdown,
}


def render(table: TruthTable, fmt: str = "text", settings: Optional[Settings] = None) -> str:
    """Render ``table`` in one of ``FORMATS``.

    Raises:
        ValueError: On an unknown format name
    """
    try:
        renderer = FORMATS[fmt]
    except KeyError:
        raise ValueError(f"Unknown format: {fmt}") from None
    return renderer(table, settings)
