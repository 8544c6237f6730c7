import pytest

from exprtree.lexer import Lexer, LexError, tokenize
from exprtree.tokens import Token, TokenType


def _pairs(tokens):
    return [(t.type, t.value) for t in tokens]


def test_simple_binary_expression():
    assert _pairs(tokenize("3 + 4")) == [
        (TokenType.CONSTANT, "3"),
        (TokenType.BINARY_OPERATOR, "+"),
        (TokenType.CONSTANT, "4"),
    ]


def test_leading_minus_is_unary():
    assert _pairs(tokenize("-5^4")) == [
        (TokenType.UNARY_OPERATOR, "-"),
        (TokenType.CONSTANT, "5"),
        (TokenType.BINARY_OPERATOR, "^"),
        (TokenType.CONSTANT, "4"),
    ]


def test_minus_after_open_paren_and_operator_is_unary():
    tokens = list(tokenize("(-3)*-b"))
    assert tokens[1] == Token(TokenType.UNARY_OPERATOR, "-")
    assert tokens[4] == Token(TokenType.BINARY_OPERATOR, "*")
    assert tokens[5] == Token(TokenType.UNARY_OPERATOR, "-")


def test_minus_after_close_paren_and_variable_is_binary():
    tokens = list(tokenize("(a)-b-c"))
    operators = [t for t in tokens if t.value == "-"]
    assert all(t.type is TokenType.BINARY_OPERATOR for t in operators)
    assert len(operators) == 2


def test_decimal_number_is_one_constant():
    assert _pairs(tokenize("1.5")) == [(TokenType.CONSTANT, "1.5")]


def test_variable_runs_until_operator_paren_or_blank():
    assert _pairs(tokenize("ab1*c d")) == [
        (TokenType.VARIABLE, "ab1"),
        (TokenType.BINARY_OPERATOR, "*"),
        (TokenType.VARIABLE, "c"),
        (TokenType.VARIABLE, "d"),
    ]


def test_whitespace_is_ignored():
    assert _pairs(tokenize("  7 \t")) == [(TokenType.CONSTANT, "7")]


def test_empty_text_has_no_tokens():
    assert tokenize("").empty()


def test_unknown_character_raises():
    with pytest.raises(LexError):
        tokenize("1 $ 2")


def test_reset_starts_over():
    lexer = Lexer("1+2")
    assert len(lexer.tokenize()) == 3
    lexer.reset("x")
    assert _pairs(lexer.tokenize()) == [(TokenType.VARIABLE, "x")]


def test_token_values_rejoin_to_text_without_spaces():
    text = "(a + 12) % 3 ^ -b / c2"
    assert "".join(t.value for t in tokenize(text)) == text.replace(" ", "")