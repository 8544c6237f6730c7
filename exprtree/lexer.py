"""Splits expression text into tokens."""

from __future__ import annotations

from .deque import Deque
from .tokens import Token, TokenType

_END = "\0"
_SPACE = " \t\n\v\f\r"
_BLANK = " \t"
_DIGITS = "0123456789"
_NUMERIC = _DIGITS + "."
_OPERATORS = "+-*/%^"
_PARENS = "()"


class LexError(ValueError):
    """Raised when the text holds a character no token can start with."""


def _is_alpha(char: str) -> bool:
    return char.isascii() and char.isalpha()


class Lexer:
    """Turns expression text into constants, variables, operators and parentheses.

    An operator that follows the start of the text, an opening parenthesis
    or another operator is unary; any other operator is binary.
    """

    def __init__(self, text: str) -> None:
        self.reset(text)

    def reset(self, text: str) -> None:
        """Start over on new text."""
        self._text = text
        self._pos = 0
        self._prev_op = True
        self._tokens: list[Token] = []

    def _done(self) -> bool:
        return self._pos >= len(self._text)

    def _peek(self) -> str:
        return _END if self._done() else self._text[self._pos]

    def _skip_space(self) -> None:
        while self._peek() in _SPACE:
            self._pos += 1

    def _lex_number(self) -> Token:
        start = self._pos
        while self._peek() in _NUMERIC:
            self._pos += 1
        self._prev_op = False
        return Token(TokenType.CONSTANT, self._text[start:self._pos])

    def _lex_parenthesis(self) -> Token:
        char = self._peek()
        self._prev_op = char == "("
        self._pos += 1
        return Token(TokenType.PARENTHESES, char)

    def _lex_operator(self) -> Token:
        char = self._peek()
        kind = TokenType.UNARY_OPERATOR if self._prev_op else TokenType.BINARY_OPERATOR
        self._prev_op = True
        self._pos += 1
        return Token(kind, char)

    def _lex_variable(self) -> Token:
        start = self._pos
        while not self._done():
            char = self._peek()
            if char in _OPERATORS or char in _PARENS or char in _BLANK:
                break
            self._pos += 1
        self._prev_op = False
        return Token(TokenType.VARIABLE, self._text[start:self._pos])

    def tokenize(self) -> Deque[Token]:
        """Scan the rest of the text and return every token found so far."""
        while not self._done():
            self._skip_space()
            char = self._peek()
            if char in _DIGITS:
                self._tokens.append(self._lex_number())
            elif char in _PARENS:
                self._tokens.append(self._lex_parenthesis())
            elif char in _OPERATORS:
                self._tokens.append(self._lex_operator())
            elif _is_alpha(char):
                self._tokens.append(self._lex_variable())
            elif not self._done():
                raise LexError(f"unexpected character {char!r} at position {self._pos}")
        return Deque(self._tokens)


def tokenize(text: str) -> Deque[Token]:
    """Return the tokens of an expression."""
    return Lexer(text).tokenize()