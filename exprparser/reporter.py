"""
Error reporter.

Renders an error next to the input it came from, with a caret under the
offending character:

    Token 3: Unexpected character `s'.
            2123^sdkfj(141+22-(5998)-142
            -----^

Rendering only formats what the error already records; it never looks
at the input to re-validate it.

Author: exprparser contributors
"""

import sys
from typing import TextIO

from .lexer.errors import ExprError
from .evaluator.errors import EvaluationError


def render(error: ExprError, source: str) -> str:
    """Format `error` as a three line diagnostic for `source`."""
    if error.token_number is not None:
        header = f"Token {error.token_number}: {error.message}."
    elif isinstance(error, EvaluationError):
        header = f"Evaluation error: {error.message}."
    else:
        header = f"Error: {error.message}."

    indicator = "-" * max(0, min(error.position, len(source)))
    return f"{header}\n\t{source}\n\t{indicator}^"


def report(error: ExprError, source: str, stream: TextIO = None) -> None:
    """Write the rendered diagnostic to `stream` (stderr by default)."""
    stream = stream or sys.stderr
    stream.write(render(error, source) + "\n")
