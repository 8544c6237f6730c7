import dataclasses

import pytest

from exprtree.tokens import Token, TokenType


def test_default_token_is_empty_none():
    token = Token()
    assert token.type is TokenType.NONE
    assert token.value == ""


def test_type_only_token_has_empty_value():
    token = Token(TokenType.PARENTHESES)
    assert token.type is TokenType.PARENTHESES
    assert token.value == ""


def test_str_is_value():
    assert str(Token(TokenType.VARIABLE, "abc")) == "abc"


def test_equality_by_type_and_value():
    assert Token(TokenType.CONSTANT, "5") == Token(TokenType.CONSTANT, "5")
    assert not Token(TokenType.UNARY_OPERATOR, "-") == Token(TokenType.BINARY_OPERATOR, "-")


def test_token_is_immutable():
    token = Token(TokenType.CONSTANT, "1")
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.value = "2"
    assert token.value == "1"
    assert token.type is TokenType.CONSTANT