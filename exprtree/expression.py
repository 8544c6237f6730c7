"""A parsed expression together with its variables."""

from __future__ import annotations

import sys
from typing import Iterable, List, Optional, TextIO, Tuple

from .nodes import ExpressionNode, VariableNode
from .treeprint import render_preorder

NPOS = -1

_TREE_BLANK = "   "
_TREE_LINE = "│  "
_TREE_BRANCH = "├─>"
_TREE_CORNER = "└─>"


class Expression:
    """An expression tree and the variables it refers to, in order."""

    def __init__(self, root: ExpressionNode, variables: Iterable[VariableNode]) -> None:
        self.root = root
        self._variables: List[VariableNode] = list(variables)

    @property
    def variables(self) -> Tuple[VariableNode, ...]:
        return tuple(self._variables)

    def __len__(self) -> int:
        return len(self._variables)

    def evaluate(self) -> float:
        """Value of the expression for the current variable values."""
        return self.root.evaluate()

    def set_variable_value(self, index: int, value: float) -> None:
        self._variables[index].value = float(value)

    def get_variable_value(self, index: int) -> float:
        return self._variables[index].value

    def get_variable_name(self, index: int) -> str:
        return self._variables[index].name

    def has_variable(self, name: str) -> bool:
        return any(var.name == name for var in self._variables)

    def find_variable(self, name: str) -> int:
        """Index of the named variable, or NPOS when absent."""
        return next(
            (index for index, var in enumerate(self._variables) if var.name == name),
            NPOS,
        )

    def render_tree(self) -> str:
        """Draw the expression tree in preorder."""
        return render_preorder(
            self.root, False, _TREE_BLANK, _TREE_LINE, _TREE_BRANCH, _TREE_CORNER
        )

    def print_tree(self, file: Optional[TextIO] = None) -> None:
        out = sys.stdout if file is None else file
        out.write(self.render_tree())