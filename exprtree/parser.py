"""Builds an expression tree from postfix tokens."""

from __future__ import annotations

import re
from typing import Dict, Iterable, List

from .deque import Deque
from .expression import Expression
from .nodes import (
    BinaryOperatorNode,
    ConstantNode,
    ExpressionNode,
    UnaryOperatorNode,
    VariableNode,
)
from .tokens import Token, TokenType

_NUMBER_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


class ParseError(ValueError):
    """Raised when postfix tokens do not form an expression."""


def _to_number(text: str) -> float:
    """Read the longest leading number in text."""
    match = _NUMBER_PREFIX.match(text)
    if match is None:
        raise ParseError(f"not a number: {text!r}")
    return float(match.group())


class Parser:
    """Turns postfix tokens into an Expression; equal names share one variable."""

    def __init__(self, postfix: Iterable[Token]) -> None:
        self.reset(postfix)

    def reset(self, postfix: Iterable[Token]) -> None:
        self._postfix = Deque(postfix)

    @staticmethod
    def _pop(stack: List[ExpressionNode], token: Token) -> ExpressionNode:
        if not stack:
            raise ParseError(f"operator {token.value!r} is missing an operand")
        return stack.pop()

    def parse(self) -> Expression:
        """Build the tree; the bottom of the operand stack becomes the root."""
        stack: List[ExpressionNode] = []
        variables: Dict[str, VariableNode] = {}
        for token in self._postfix:
            node: ExpressionNode
            if token.type is TokenType.CONSTANT:
                node = ConstantNode(_to_number(token.value))
            elif token.type is TokenType.VARIABLE:
                node = variables.setdefault(token.value, VariableNode(token.value))
            elif token.type is TokenType.BINARY_OPERATOR:
                right = self._pop(stack, token)
                left = self._pop(stack, token)
                node = BinaryOperatorNode(token.value, left, right)
            elif token.type is TokenType.UNARY_OPERATOR:
                node = UnaryOperatorNode(token.value, self._pop(stack, token))
            else:
                raise ParseError(f"unexpected token {token!r}")
            stack.append(node)
        if not stack:
            raise ParseError("empty expression")
        return Expression(stack[0], variables.values())


def parse(postfix: Iterable[Token]) -> Expression:
    """Build an Expression from postfix tokens."""
    return Parser(postfix).parse()