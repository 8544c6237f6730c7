"""Lexical tokens produced when scanning an arithmetic expression."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class TokenType(Enum):
    """The kind of a lexical token."""

    NONE = auto()
    CONSTANT = auto()
    VARIABLE = auto()
    BINARY_OPERATOR = auto()
    UNARY_OPERATOR = auto()
    PARENTHESES = auto()


@dataclass(frozen=True)
class Token:
    """A typed piece of expression text."""

    type: TokenType = TokenType.NONE
    value: str = ""

    def __str__(self) -> str:
        return self.value