"""Converts infix tokens into postfix order with the shunting-yard algorithm."""

from __future__ import annotations

from enum import Enum, auto
from typing import Iterable

from .deque import Deque
from .tokens import Token, TokenType

_PRECEDENCE = {"+": 1, "-": 1, "*": 2, "/": 2, "%": 2, "^": 3}
_OPERATOR_TYPES = (TokenType.BINARY_OPERATOR, TokenType.UNARY_OPERATOR)


class Associativity(Enum):
    LEFT = auto()
    RIGHT = auto()


def precedence(token: Token) -> int:
    """Binding strength of an operator token; 0 for anything else."""
    if token.value == "-" and token.type is TokenType.UNARY_OPERATOR:
        return 2
    return _PRECEDENCE.get(token.value, 0)


def associativity(token: Token) -> Associativity:
    """Side from which equal-precedence operators group."""
    if token.value == "^":
        return Associativity.RIGHT
    if token.value == "-" and token.type is not TokenType.BINARY_OPERATOR:
        return Associativity.RIGHT
    return Associativity.LEFT


def _should_pop(op: Token, top: Token) -> bool:
    if op.type is TokenType.UNARY_OPERATOR:
        return False
    op_prec = precedence(op)
    top_prec = precedence(top)
    if top_prec < op_prec:
        return False
    if top_prec == op_prec:
        return associativity(op) is Associativity.LEFT
    return True


class PostFix:
    """Reorders a sequence of infix tokens into postfix order."""

    def __init__(self, infix: Iterable[Token]) -> None:
        self.reset(infix)

    def reset(self, infix: Iterable[Token]) -> None:
        self._infix = Deque(infix)

    def postfix(self) -> Deque[Token]:
        """Return the tokens in postfix order; parentheses are dropped."""
        output: Deque[Token] = Deque()
        stack: Deque[Token] = Deque()
        for token in self._infix:
            if token.type in (TokenType.CONSTANT, TokenType.VARIABLE):
                output.push_back(token)
            elif token.type is TokenType.PARENTHESES and token.value == "(":
                stack.push_back(token)
            elif token.type is TokenType.PARENTHESES and token.value == ")":
                while stack and stack.back().type is not TokenType.PARENTHESES:
                    output.push_back(stack.pop_back())
                stack.pop_back()
            elif token.type in _OPERATOR_TYPES:
                while stack and _should_pop(token, stack.back()):
                    output.push_back(stack.pop_back())
                stack.push_back(token)
            else:
                raise ValueError(f"unexpected token {token!r}")
        while stack:
            top = stack.pop_back()
            if top.type is not TokenType.PARENTHESES:
                output.push_back(top)
        return output


def to_postfix(tokens: Iterable[Token]) -> Deque[Token]:
    """Return the given infix tokens in postfix order."""
    return PostFix(tokens).postfix()