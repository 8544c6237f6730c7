"""Preorder drawing of expression trees as indented text."""

from __future__ import annotations

import sys
from typing import Iterator, List, Optional, TextIO

from .nodes import BinaryOperatorNode, ExpressionNode, UnaryOperatorNode

FANCY_BLANK = "  "
FANCY_LINE = "║ "
FANCY_BRANCH = "╠═"
FANCY_CORNER = "╚═"
BLANK = "  "
LINE = "| "
BRANCH = "+-"
CORNER = "+-"
WHITESPACE = " "


def _lines(
    node: ExpressionNode,
    path: List[bool],
    space: bool,
    blank: str,
    line: str,
    branch: str,
    corner: str,
) -> Iterator[str]:
    gap = WHITESPACE if space else ""
    head = "".join((line if more else blank) + gap for more in path[:-1])
    if path:
        head += (branch if path[-1] else corner) + gap
    yield head + str(node) + "\n"
    if space:
        yield "".join((line if more else blank) + gap for more in path) + "\n"

    if isinstance(node, UnaryOperatorNode):
        yield from _lines(node.operand, path + [False], space, blank, line, branch, corner)
    elif isinstance(node, BinaryOperatorNode):
        yield from _lines(node.left, path + [True], space, blank, line, branch, corner)
        yield from _lines(node.right, path + [False], space, blank, line, branch, corner)


def render_preorder(
    root: ExpressionNode,
    space: bool,
    blank: str,
    line: str,
    branch: str,
    corner: str,
) -> str:
    """Draw the tree below root, one node per line, with the given glyphs.

    With space set, each glyph is followed by a blank and every node line
    by a connector-only line.
    """
    return "".join(_lines(root, [], space, blank, line, branch, corner))


def print_preorder(root: ExpressionNode, file: Optional[TextIO] = None) -> None:
    """Write the tree with plain ASCII glyphs."""
    out = sys.stdout if file is None else file
    out.write(render_preorder(root, False, BLANK, LINE, BRANCH, CORNER))


def print_preorder_fancy(root: ExpressionNode, file: Optional[TextIO] = None) -> None:
    """Write the tree with box-drawing glyphs and spacing."""
    out = sys.stdout if file is None else file
    out.write(
        render_preorder(root, True, FANCY_BLANK, FANCY_LINE, FANCY_BRANCH, FANCY_CORNER)
    )