"""
Command line interface.

With -e the given expression is evaluated once; without it an
interactive session reads one expression per line until `quit`, `q` or
end of input.

Author: exprparser contributors
"""

import argparse
import logging
import subprocess
import sys
from typing import List, Optional, TextIO

from . import __version__
from .config import ParserConfig, EvaluatorConfig, OverflowPolicy
from .lexer import ExprError
from .parser import Parser, dump
from .evaluator import Evaluator
from .graph import write_graph
from .reporter import report

logger = logging.getLogger(__name__)

PROGNAME = "exprparser"
PROMPT = "> "
QUIT_KEYWORDS = {"quit", "q"}


def build_parser() -> argparse.ArgumentParser:
    """Create the argument parser."""
    parser = argparse.ArgumentParser(
        prog=PROGNAME,
        description="Parse and evaluate simple integer arithmetic expressions. "
                    "Without -e, an interactive session is started.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    exprparser -e "2 + 3 * 4"                 # Prints 14
    exprparser -e "(2 + 3) * 4" -d            # Print the tree, then 20
    exprparser -e "2 ^ 10" -g -f pow.gv --pdf # Also write pow.gv and pow.pdf
        """
    )

    parser.add_argument('-e', '--expression',
                        help='The expression to evaluate')
    parser.add_argument('-d', '--debug', action='store_true',
                        help='Print the syntax tree before evaluating')
    parser.add_argument('-g', '--graph', action='store_true',
                        help='Write a Graphviz description of the syntax tree')
    parser.add_argument('-f', '--graph-file', default='ast.gv',
                        help='File to save the graph to, must end in .gv (default: ast.gv)')
    parser.add_argument('--pdf', action='store_true',
                        help='Also render the graph to PDF with Graphviz dot')

    # Limits
    parser.add_argument('--max-depth', type=int, default=ParserConfig.max_depth,
                        help='Maximum parenthesis nesting (default: %(default)s)')
    parser.add_argument('--bits', type=int, default=EvaluatorConfig.integer_bits,
                        help='Signed integer width results must fit in (default: %(default)s)')
    parser.add_argument('--overflow', choices=[policy.value for policy in OverflowPolicy],
                        default=OverflowPolicy.ERROR.value,
                        help='What to do when a result does not fit (default: %(default)s)')

    parser.add_argument('-v', '--verbose', action='count', default=0,
                        help='Increase log output, repeat for debug output')
    parser.add_argument('--version', action='version', version=f'%(prog)s {__version__}')

    return parser


class Session:
    """Runs expressions through lexer, parser and evaluator and prints the outcome."""

    def __init__(
        self,
        parser_config: ParserConfig,
        evaluator_config: EvaluatorConfig,
        debug: bool = False,
        graph_file: Optional[str] = None,
        pdf: bool = False,
        stdout: TextIO = None,
        stderr: TextIO = None
    ):
        self.parser_config = parser_config
        self.evaluator = Evaluator(evaluator_config)
        self.debug = debug
        self.graph_file = graph_file
        self.pdf = pdf
        self.stdout = stdout or sys.stdout
        self.stderr = stderr or sys.stderr

    def run(self, source: str) -> bool:
        """Evaluate one expression, printing the result or the error. Returns success."""
        try:
            ast = Parser.from_source(source, self.parser_config).parse()
            if self.debug:
                print(dump(ast), file=self.stdout)
            if self.graph_file:
                self._draw(ast)
            result = self.evaluator.evaluate(ast)
        except ExprError as e:
            logger.debug("%s failed: %s", source, e.code)
            report(e, source, self.stderr)
            return False

        print(result, file=self.stdout)
        return True

    def repl(self, stdin: TextIO = None) -> None:
        """Read-eval-print loop; errors are reported and the loop goes on."""
        stdin = stdin or sys.stdin
        print(f"{PROGNAME}: Exit with ctrl+c or by typing `quit' or `q'.", file=self.stderr)

        while True:
            self.stdout.write(PROMPT)
            self.stdout.flush()
            line = stdin.readline()
            if not line:
                self.stdout.write("\n")
                return

            source = line.strip()
            if source in QUIT_KEYWORDS:
                return
            if not source:
                continue
            self.run(source)

    def _draw(self, ast) -> None:
        try:
            path = write_graph(ast, self.graph_file, pdf=self.pdf)
        except (OSError, ValueError, subprocess.CalledProcessError) as e:
            print(f"Failed to create graph: {e}.", file=self.stderr)
            return
        print(f"Successfully wrote graph data to {path}.", file=self.stderr)


def main(argv: Optional[List[str]] = None, stdin: TextIO = None,
         stdout: TextIO = None, stderr: TextIO = None) -> int:
    """Main entry point. Returns the process exit status."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.WARNING - 10 * min(args.verbose, 2),
        format="%(levelname)s %(name)s: %(message)s"
    )

    try:
        parser_config = ParserConfig(max_depth=args.max_depth)
        evaluator_config = EvaluatorConfig(integer_bits=args.bits,
                                           overflow=OverflowPolicy(args.overflow))
    except ValueError as e:
        parser.error(str(e))

    session = Session(
        parser_config,
        evaluator_config,
        debug=args.debug,
        graph_file=args.graph_file if args.graph else None,
        pdf=args.pdf,
        stdout=stdout,
        stderr=stderr
    )

    if args.expression is None:
        try:
            session.repl(stdin)
        except KeyboardInterrupt:
            print(file=session.stderr)
        return 0

    return 0 if session.run(args.expression) else 1


if __name__ == "__main__":
    sys.exit(main())
