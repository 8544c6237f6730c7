# exprtree

Parse arithmetic expressions into trees and evaluate them.

An expression goes through four stages:

1. **Lexing** (`exprtree.lexer`) splits text into tokens: constants
   (digits and dots), variables (starting with an ASCII letter and running
   until an operator, a parenthesis, a space or a tab), parentheses, and
   unary or binary operators (`+ - * / % ^`). An operator at the start, after
   another operator or after `(` is unary. Any other character raises
   `LexError`.
2. **Postfix conversion** (`exprtree.postfix`) reorders tokens with the
   shunting-yard algorithm. `^` binds tightest, then `*`, `/`, `%` and unary
   `-`, then binary `+` and `-`. `^` and unary `-` are right-associative;
   everything else is left-associative. Parentheses are dropped.
3. **Parsing** (`exprtree.parser`) builds an `Expression` from the postfix
   tokens. Each variable name gives one `VariableNode`, shared by every use,
   so one assignment updates them all. An operator without enough operands,
   or no tokens at all, raises `ParseError`.
4. **Evaluation** computes the tree's value from the current variable values,
   which start at zero. Division by zero gives an infinity or NaN rather than
   an error. A unary operator other than `-` evaluates to zero.

## Installation

```
pip install .
```

## Library use

```python
from exprtree.lexer import tokenize
from exprtree.postfix import to_postfix
from exprtree.parser import parse

tokens = tokenize("(a + 2) * -b ^ 2")
postfix = to_postfix(tokens)
print(postfix)                # [a, 2, +, b, 2, ^, -, *]

expression = parse(postfix)
expression.set_variable_value(expression.find_variable("a"), 3)
expression.set_variable_value(expression.find_variable("b"), 4)
print(expression.evaluate())  # -80.0

expression.print_tree()       # draws the tree in preorder
```

`Expression` also has `get_variable_value`, `get_variable_name`,
`has_variable`, and `find_variable`, which returns `NPOS` (-1) for an unknown
name. `len(expression)` is the number of variables, and
`Expression.render_tree()` gives the tree drawing as a string.

`exprtree.treeprint` has `print_preorder` (ASCII connectors) and
`print_preorder_fancy` (box-drawing connectors with extra spacing) for any
node, and `render_preorder` for choosing your own connectors.

`exprtree.console` has `divider` and `banner` for sectioned console output
80 columns wide.

## Command line

```
exprtree
exprtree "(a + 2) * -b ^ 2"
exprtree --seed 42 --min-length 3 --max-length 6
```

With no expression given, the command builds a random one with between
`--min-length` (default 2) and `--max-length` (default 10) operands. It then
shows the tokens and the postfix form, gives each variable a random whole
value from -10 to 10, and prints the result and the expression tree.
`--seed` makes the run repeatable; without it the current time is the seed.

The exit status is 0 on success, 1 when the expression cannot be lexed or
parsed, and 2 for bad options.

## Limitations

The command does not let you choose variable values; they are always
random. There is no interactive session, and numbers are plain decimals:
no exponents and no functions such as `sin` or `sqrt`.

## Running the tests

```
pip install .[test]
pytest
```