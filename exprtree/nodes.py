"""Nodes of an arithmetic expression tree."""

from __future__ import annotations

import math
from typing import Tuple


def _format_number(value: float) -> str:
    return format(value, "g")


def _is_odd_integer(value: float) -> bool:
    return math.isfinite(value) and value == int(value) and int(value) % 2 == 1


def _divide(left: float, right: float) -> float:
    if right == 0:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, left) * math.copysign(1.0, right)
    return left / right


def _remainder(left: float, right: float) -> float:
    try:
        return math.fmod(left, right)
    except ValueError:
        return math.nan


def _power(base: float, exponent: float) -> float:
    try:
        return math.pow(base, exponent)
    except OverflowError:
        if base < 0 and _is_odd_integer(exponent):
            return -math.inf
        return math.inf
    except ValueError:
        if base == 0 and exponent < 0:
            if _is_odd_integer(exponent):
                return math.copysign(math.inf, base)
            return math.inf
        return math.nan


_BINARY_OPERATIONS = {
    "+": lambda left, right: left + right,
    "-": lambda left, right: left - right,
    "*": lambda left, right: left * right,
    "/": _divide,
    "%": _remainder,
    "^": _power,
}


class ExpressionNode:
    """Base of all tree nodes; evaluates to zero and prints as nothing."""

    def evaluate(self) -> float:
        return 0.0

    @property
    def children(self) -> Tuple["ExpressionNode", ...]:
        """The operands below this node, left to right."""
        return ()

    def __str__(self) -> str:
        return ""


class ConstantNode(ExpressionNode):
    """A fixed number."""

    def __init__(self, value: float) -> None:
        self.value = float(value)

    def evaluate(self) -> float:
        return self.value

    def __str__(self) -> str:
        return _format_number(self.value)

    def __repr__(self) -> str:
        return f"ConstantNode({self.value!r})"


class VariableNode(ExpressionNode):
    """A named value that starts at zero and may be changed."""

    def __init__(self, name: str) -> None:
        self.name = name
        self.value = 0.0

    def evaluate(self) -> float:
        return self.value

    def __str__(self) -> str:
        return self.name

    def __repr__(self) -> str:
        return f"VariableNode({self.name!r})"


class UnaryOperatorNode(ExpressionNode):
    """An operator applied to one operand; only negation yields non-zero."""

    def __init__(self, operation: str, operand: ExpressionNode) -> None:
        self.operation = operation
        self.operand = operand

    def evaluate(self) -> float:
        if self.operation == "-":
            return -self.operand.evaluate()
        return 0.0

    @property
    def children(self) -> Tuple[ExpressionNode, ...]:
        return (self.operand,)

    def __str__(self) -> str:
        return self.operation

    def __repr__(self) -> str:
        return f"UnaryOperatorNode({self.operation!r}, {self.operand!r})"


class BinaryOperatorNode(ExpressionNode):
    """An operator applied to a left and a right operand."""

    def __init__(self, operation: str, left: ExpressionNode, right: ExpressionNode) -> None:
        self.operation = operation
        self.left = left
        self.right = right

    def evaluate(self) -> float:
        apply = _BINARY_OPERATIONS.get(self.operation)
        if apply is None:
            return 0.0
        return apply(self.left.evaluate(), self.right.evaluate())

    @property
    def children(self) -> Tuple[ExpressionNode, ...]:
        return (self.left, self.right)

    def __str__(self) -> str:
        return self.operation

    def __repr__(self) -> str:
        return f"BinaryOperatorNode({self.operation!r}, {self.left!r}, {self.right!r})"