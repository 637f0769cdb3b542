"""
Graphviz export of expression trees.

Produces an undirected dot graph with one node per tree node, labelled
with the literal value or operator symbol, and one edge per parent/child
link, left child first. Optionally renders the graph to PDF with the
`dot` executable.

Author: exprparser contributors
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Optional, Tuple, Union

from .parser.ast_nodes import Expr, Literal, BinaryOp

logger = logging.getLogger(__name__)


def to_dot(ast: Expr, name: str = "") -> str:
    """Describe `ast` as a dot `graph { ... }` block."""
    nodes: List[str] = []
    edges: List[str] = []
    # (node, id of parent node or None)
    stack: List[Tuple[Expr, Optional[str]]] = [(ast, None)]
    counter = 0

    while stack:
        current, parent_id = stack.pop()
        node_id = f"n{counter}"
        counter += 1

        if isinstance(current, Literal):
            nodes.append(f'\t{node_id} [label = "{current.value}", shape = box]')
        elif isinstance(current, BinaryOp):
            nodes.append(f'\t{node_id} [label = "{current.operator.symbol}"]')
            stack.extend((child, node_id) for child in reversed(current.children()))
        else:
            raise TypeError(f"Not an expression node: {current!r}")

        if parent_id is not None:
            edges.append(f"\t{parent_id} -- {node_id}")

    header = f"graph {name} {{" if name else "graph {"
    return "\n".join([header] + nodes + edges + ["}"]) + "\n"


def write_graph(ast: Expr, path: Union[str, Path], pdf: bool = False) -> Path:
    """
    Write the dot description of `ast` to `path`.

    Args:
        ast: Expression tree
        path: Target file, must end in `.gv` (need not exist)
        pdf: Also run `dot -Tpdf` and write the PDF next to `path`

    Returns:
        Path of the last file written

    Raises:
        ValueError: If `path` does not end in `.gv`
        OSError: If a file cannot be written or `dot` cannot be run
        subprocess.CalledProcessError: If `dot` fails
    """
    path = Path(path)
    if path.suffix != ".gv":
        raise ValueError(f"Graph file must end in `.gv', got {str(path)!r}")

    path.write_text(to_dot(ast), encoding="utf-8")
    logger.info("wrote graph description to %s", path)

    if not pdf:
        return path

    pdf_path = path.with_suffix(".pdf")
    subprocess.run(["dot", "-Tpdf", str(path), "-o", str(pdf_path)], check=True)
    logger.info("rendered graph to %s", pdf_path)
    return pdf_path
