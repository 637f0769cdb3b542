"""
Test suite for the command line interface.

Tests cover:
- One-shot evaluation and exit status
- Debug output and graph export flags
- Limit flags
- The interactive session

Author: exprparser contributors
"""

import io
import unittest
import sys
import os
import tempfile

# Add the project root to the Python path
project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))
sys.path.insert(0, project_root)

from exprparser import __version__
from exprparser.cli import main


class TestCLI(unittest.TestCase):
    """Test cases for one-shot evaluation."""

    def setUp(self):
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()

    def _main(self, *argv, stdin=None) -> int:
        return main(list(argv), stdin=stdin, stdout=self.stdout, stderr=self.stderr)

    def test_expression(self):
        self.assertEqual(self._main("-e", "2+3*4"), 0)
        self.assertEqual(self.stdout.getvalue(), "14\n")
        self.assertEqual(self.stderr.getvalue(), "")

    def test_syntax_error_exit_status(self):
        self.assertEqual(self._main("-e", "2123^sdkfj"), 1)
        self.assertEqual(self.stdout.getvalue(), "")
        self.assertEqual(
            self.stderr.getvalue(),
            "Token 3: Unexpected character `s'.\n\t2123^sdkfj\n\t-----^\n"
        )

    def test_evaluation_error_exit_status(self):
        self.assertEqual(self._main("--expression", "5/0"), 1)
        self.assertIn("Evaluation error: Division by zero.", self.stderr.getvalue())

    def test_debug_prints_tree(self):
        self.assertEqual(self._main("-e", "1+2", "-d"), 0)
        self.assertEqual(self.stdout.getvalue(), "Op=ADD\n  Literal=1\n  Literal=2\n3\n")

    def test_graph(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = os.path.join(tmpdir, "sum.gv")
            self.assertEqual(self._main("-e", "1+2", "-g", "-f", path), 0)
            self.assertTrue(os.path.exists(path))
        self.assertEqual(self.stdout.getvalue(), "3\n")
        self.assertIn("Successfully wrote graph data", self.stderr.getvalue())

    def test_graph_failure_does_not_stop_evaluation(self):
        self.assertEqual(self._main("-e", "1+2", "-g", "-f", "tree.txt"), 0)
        self.assertEqual(self.stdout.getvalue(), "3\n")
        self.assertIn("Failed to create graph", self.stderr.getvalue())

    def test_overflow_flags(self):
        self.assertEqual(self._main("-e", "9223372036854775807+1", "--overflow", "wrap"), 0)
        self.assertEqual(self.stdout.getvalue(), "-9223372036854775808\n")

    def test_bits_flag(self):
        self.assertEqual(self._main("-e", "100+28", "--bits", "8"), 1)
        self.assertIn("does not fit in 8 bits", self.stderr.getvalue())

    def test_max_depth_flag(self):
        self.assertEqual(self._main("-e", "((1))", "--max-depth", "1"), 1)
        self.assertIn("Nesting depth exceeds 1", self.stderr.getvalue())

    def test_max_depth_beyond_interpreter_stack(self):
        depth = sys.getrecursionlimit() * 2
        source = "(" * depth + "1" + ")" * depth
        self.assertEqual(self._main("-e", source, "--max-depth", str(depth * 10)), 1)
        self.assertEqual(self.stdout.getvalue(), "")
        self.assertTrue(self.stderr.getvalue().startswith("Token "))
        self.assertIn("Nesting depth exceeds", self.stderr.getvalue())

    def test_invalid_config_is_a_usage_error(self):
        with self.assertRaises(SystemExit) as ctx:
            self._main("-e", "1", "--max-depth", "0")
        self.assertEqual(ctx.exception.code, 2)

    def test_version(self):
        stdout = io.StringIO()
        with self.assertRaises(SystemExit) as ctx:
            sys_stdout, sys.stdout = sys.stdout, stdout
            try:
                self._main("--version")
            finally:
                sys.stdout = sys_stdout
        self.assertEqual(ctx.exception.code, 0)
        self.assertIn(__version__, stdout.getvalue())


class TestInteractiveSession(unittest.TestCase):
    """Test cases for the read-eval-print loop."""

    def setUp(self):
        self.stdout = io.StringIO()
        self.stderr = io.StringIO()

    def _repl(self, text: str) -> int:
        return main([], stdin=io.StringIO(text), stdout=self.stdout, stderr=self.stderr)

    def test_session_until_quit(self):
        status = self._repl("1+1\n\n5/0\n2*3\nquit\n9\n")

        self.assertEqual(status, 0)
        self.assertEqual(self.stdout.getvalue(), "> 2\n> > > 6\n> ")
        self.assertIn("Evaluation error: Division by zero.", self.stderr.getvalue())

    def test_short_quit_keyword(self):
        self._repl("q\n1\n")
        self.assertEqual(self.stdout.getvalue(), "> ")

    def test_end_of_input_ends_session(self):
        self.assertEqual(self._repl("3\n"), 0)
        self.assertEqual(self.stdout.getvalue(), "> 3\n> \n")

    def test_errors_do_not_end_session(self):
        self._repl("(1\n1 1\n4\n")
        self.assertTrue(self.stdout.getvalue().endswith("4\n> \n"))
        self.assertIn("Expected `)', found end of input", self.stderr.getvalue())
        self.assertIn("Expected end of input, found `1'", self.stderr.getvalue())


if __name__ == '__main__':
    unittest.main()
