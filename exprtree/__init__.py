"""Tokenize, convert to postfix, parse and evaluate arithmetic expressions as trees."""

__version__ = "0.1.0"
__all__ = [
    "cli",
    "console",
    "deque",
    "expression",
    "lexer",
    "nodes",
    "parser",
    "postfix",
    "tokens",
    "treeprint",
]