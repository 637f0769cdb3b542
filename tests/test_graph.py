"""
Test suite for Graphviz export.

Author: exprparser contributors
"""

import unittest
import sys
import os
import tempfile
from pathlib import Path
from unittest import mock

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprparser.parser import parse_string
from exprparser.graph import to_dot, write_graph


class TestToDot(unittest.TestCase):
    """Test cases for the dot description."""

    def test_single_operation(self):
        self.assertEqual(
            to_dot(parse_string("1+2")),
            "graph {\n"
            "\tn0 [label = \"+\"]\n"
            "\tn1 [label = \"1\", shape = box]\n"
            "\tn2 [label = \"2\", shape = box]\n"
            "\tn0 -- n1\n"
            "\tn0 -- n2\n"
            "}\n"
        )

    def test_single_literal_has_no_edges(self):
        self.assertEqual(to_dot(parse_string("7")), "graph {\n\tn0 [label = \"7\", shape = box]\n}\n")

    def test_named_graph(self):
        self.assertTrue(to_dot(parse_string("7"), name="ast").startswith("graph ast {\n"))

    def test_nested_edges_follow_the_tree(self):
        dot = to_dot(parse_string("(1-2)*3"))
        # n0 '*', n1 '-', n2 '1', n3 '2', n4 '3'
        edges = [line.strip() for line in dot.splitlines() if "--" in line]
        self.assertEqual(edges, ["n0 -- n1", "n1 -- n2", "n1 -- n3", "n0 -- n4"])
        self.assertIn('n1 [label = "-"]', dot)

    def test_labels_are_pre_order(self):
        dot = to_dot(parse_string("2^3*4"))
        labels = [line.split('"')[1] for line in dot.splitlines() if "label" in line]
        self.assertEqual(labels, ["*", "^", "2", "3", "4"])

    def test_deep_tree(self):
        dot = to_dot(parse_string("-".join(["9"] * 3000)))
        self.assertEqual(dot.count(" -- "), 2 * 2999)


class TestWriteGraph(unittest.TestCase):
    """Test cases for writing graph files."""

    def setUp(self):
        self.tmpdir = tempfile.TemporaryDirectory()
        self.addCleanup(self.tmpdir.cleanup)
        self.ast = parse_string("(1+2)*3")

    def test_writes_description(self):
        path = Path(self.tmpdir.name) / "tree.gv"
        self.assertEqual(write_graph(self.ast, path), path)
        self.assertEqual(path.read_text(encoding="utf-8"), to_dot(self.ast))

    def test_requires_gv_suffix(self):
        with self.assertRaises(ValueError):
            write_graph(self.ast, os.path.join(self.tmpdir.name, "tree.dot"))

    def test_pdf_runs_dot(self):
        path = Path(self.tmpdir.name) / "tree.gv"
        with mock.patch("exprparser.graph.subprocess.run") as run:
            result = write_graph(self.ast, str(path), pdf=True)

        pdf_path = path.with_suffix(".pdf")
        self.assertEqual(result, pdf_path)
        run.assert_called_once_with(["dot", "-Tpdf", str(path), "-o", str(pdf_path)], check=True)


if __name__ == '__main__':
    unittest.main()
