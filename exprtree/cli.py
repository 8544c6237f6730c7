"""Command that generates or reads an expression and shows each processing stage."""

from __future__ import annotations

import argparse
import random
import sys
import time
from typing import List, Optional

from .console import banner, divider
from .lexer import LexError, tokenize
from .parser import ParseError, parse
from .postfix import to_postfix

_OPERATORS = "+-*/%^"
_VARIABLE_NAMES = "abcd"


def _chance(rng: random.Random, probability: float) -> bool:
    return rng.random() <= probability


def random_operator(rng: Optional[random.Random] = None) -> str:
    """Pick one of the six binary operators at random."""
    rng = rng if rng is not None else random.Random()
    return rng.choice(_OPERATORS)


def random_expression(
    min_len: int = 2, max_len: int = 10, rng: Optional[random.Random] = None
) -> str:
    """Build a random well-formed expression of between min_len and max_len operands."""
    rng = rng if rng is not None else random.Random()
    length = rng.randint(min_len, max_len)
    open_parens = 0
    parts: List[str] = []
    for index in range(length):
        if index > 0:
            parts.append(random_operator(rng))
        if _chance(rng, 0.5):
            open_parens += 1
            parts.append("(")
        if _chance(rng, 1.0 / 3.0):
            parts.append("-")
        if _chance(rng, 2.0 / 3.0):
            parts.append(str(rng.randint(0, 100)))
        else:
            parts.append(rng.choice(_VARIABLE_NAMES))
        if _chance(rng, 0.40) and open_parens > 0:
            open_parens -= 1
            parts.append(")")
    parts.append(")" * open_parens)
    return "".join(parts)


def _build_arg_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="exprtree",
        description="Tokenize, reorder, parse and evaluate an arithmetic expression.",
    )
    parser.add_argument("expression", nargs="?", help="expression to use instead of a random one")
    parser.add_argument("--seed", type=int, default=None, help="seed for the random generator")
    parser.add_argument("--min-length", type=int, default=2, help="fewest operands (default 2)")
    parser.add_argument("--max-length", type=int, default=10, help="most operands (default 10)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the expression pipeline and print every stage."""
    args = _build_arg_parser().parse_args(argv)
    if args.min_length > args.max_length:
        print("exprtree: --min-length exceeds --max-length", file=sys.stderr)
        return 2
    rng = random.Random(args.seed if args.seed is not None else int(time.time()))

    banner("Expression Parser")

    divider("String Expression")
    text = args.expression
    if text is None:
        text = random_expression(args.min_length, args.max_length, rng)
    print(text)

    try:
        divider("Tokens")
        tokens = tokenize(text)
        print(tokens)

        divider("Postfix")
        postfix_tokens = to_postfix(tokens)
        print(postfix_tokens)

        divider("Variables")
        expression = parse(postfix_tokens)
    except (LexError, ParseError) as exc:
        print(f"exprtree: {exc}", file=sys.stderr)
        return 1

    for index in range(len(expression)):
        expression.set_variable_value(index, float(rng.randint(-10, 10)))
        name = expression.get_variable_name(index)
        value = expression.get_variable_value(index)
        print(f"{name} = {format(value, 'g')}")

    divider("Evaluation")
    print(format(expression.evaluate(), "g"))

    divider("Tree")
    expression.print_tree()
    return 0


if __name__ == "__main__":
    sys.exit(main())