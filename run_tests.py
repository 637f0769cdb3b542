#!/usr/bin/env python3
"""
Main test runner for the exprparser test suite.

Author: exprparser contributors
"""

import sys
import os
import unittest

# Add the project root to the Python path
project_root = os.path.abspath(os.path.dirname(__file__))
sys.path.insert(0, project_root)


def run_all_tests():
    """Run all exprparser tests."""

    print("exprparser Test Suite")
    print("=" * 60)

    try:
        from exprparser.lexer import Lexer
        from exprparser.parser import Parser
        from exprparser.evaluator import Evaluator
        print("All modules imported successfully")
        print()
    except ImportError as e:
        print(f"Failed to import exprparser modules: {e}")
        return False

    print("Testing simple pipeline...")
    tokens = Lexer("2 + 3 * 4").tokenize()
    result = Evaluator().evaluate(Parser(tokens).parse())
    if result != 14:
        print(f"Pipeline returned {result}, expected 14")
        return False
    print("Pipeline ok")
    print()

    suite = unittest.defaultTestLoader.discover(os.path.join(project_root, "tests"))
    runner = unittest.TextTestRunner(verbosity=2)
    outcome = runner.run(suite)

    print()
    print("=" * 60)
    print(f"Tests run: {outcome.testsRun}, failures: {len(outcome.failures)}, "
          f"errors: {len(outcome.errors)}")
    return outcome.wasSuccessful()


if __name__ == "__main__":
    sys.exit(0 if run_all_tests() else 1)
