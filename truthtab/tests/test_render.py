# coding: utf-8
"""Tests for table rendering"""

import csv
import io
import json

from truthtab import generate_truth_table
from truthtab.table.render import FORMATS, render, render_csv, render_markdown, render_text
from truthtab.tests import TestCase, main


class TestRender(TestCase):
    """Text, CSV, JSON and Markdown output"""

    def setUp(self):
        super().setUp()
        self.table = generate_truth_table("P ⊕ Q")

    def test_text(self):
        lines = render_text(self.table).splitlines()
        self.assertEqual(lines[0], "P Q | result")
        self.assertEqual(set(lines[1]), {"-"})
        self.assertEqual(lines[2], "F F |   F")
        self.assertEqual(lines[3], "F T |   T")
        self.assertEqual(len(lines), 2 + 4)

    def test_text_with_spanish_labels(self):
        settings = self.settings.replace(true_label="V", result_header="resultado")
        lines = render_text(self.table, settings).splitlines()
        self.assertEqual(lines[0], "P Q | resultado")
        self.assertEqual(lines[-1], "V V |     F")

    def test_csv(self):
        rows = list(csv.reader(io.StringIO(render_csv(self.table))))
        self.assertEqual(rows[0], ["P", "Q", "result"])
        self.assertEqual(rows[1:], [["F", "F", "F"], ["F", "T", "T"],
                                    ["T", "F", "T"], ["T", "T", "F"]])

    def test_json(self):
        data = json.loads(render(self.table, "json"))
        self.assertEqual(data["expression"], "P ⊕ Q")
        self.assertEqual(data["variables"], ["P", "Q"])
        self.assertEqual([row["result"] for row in data["rows"]], [False, True, True, False])

    def test_markdown(self):
        lines = render_markdown(self.table).splitlines()
        self.assertEqual(lines[0], "| P | Q | result |")
        self.assertEqual(lines[1], "|:---:|:---:|:---:|")
        self.assertEqual(lines[2], "| F | F | F |")

    def test_numeric_labels(self):
        settings = self.settings.replace(true_label="1", false_label="0")
        self.assertIn("1,0,1", render_csv(self.table, settings).splitlines())

    def test_dispatch(self):
        self.assertEqual(sorted(FORMATS), ["csv", "json", "markdown", "text"])
        self.assertEqual(render(self.table), render_text(self.table))
        with self.assertRaises(ValueError):
            render(self.table, "html")


if __name__ == '__main__':
    main()
