# funcplot

funcplot reads a math expression in one variable, `x`, and draws its graph
in the terminal. The graph is 80 columns wide and 25 rows high. It is made of
`.` and `*` characters.

## Installation

```
pip install .
```

## Usage

Send one expression on standard input:

```
echo "sin(cos(2*x))" | funcplot
```

The program reads one line. It prints that line back, then prints the graph.
On the graph, x runs from 0 to 4π over the 80 columns. y is 1 on the top row
and -1 on the bottom row. A point outside that band is not drawn. If the
expression is not valid, the program prints `n/a` (with no newline) instead
of a graph. If standard input is empty, it prints nothing.

`funcplot --help` shows a short description. The command takes no other
options.

### Supported syntax

- whole and decimal numbers such as `3` or `0.5`, and the variable `x`
- the binary operators `+ - * /`
- a unary minus or plus at the start of the expression, straight after `(`,
  or straight after a binary operator: `-x`, `2*(-x)`, `x*-1`. A space between
  the operator and the sign is not allowed, so `x * -1` is rejected.
- parentheses
- the functions `sin`, `cos`, `tan`, `ctg`, `sqrt` and `ln`, each followed
  directly by its argument in parentheses
- spaces between tokens, but not at the end of the expression

Division by zero gives no point. So does `sqrt` of a negative number, and
`ln` of zero or a negative number. Intermediate results are kept to ten
significant digits.

## Library use

The steps of the program can also be called on their own:

```python
from funcplot.validation import validate, tildas
from funcplot.notation import infix_to_postfix
from funcplot.plotting import evaluate_rpn, render_plot, plot_function

expr = "sin(x)*-1"
if validate(expr):
    postfix = infix_to_postfix(tildas(expr))   # "x sin 1 ~ *"
    print(evaluate_rpn(postfix, 0.5))
    plot_function(postfix, 0, 12.566370614359172, 1, -1)
```

- `funcplot.validation`:
  - `validate(expression)` returns `True` if the expression is non-empty and
    well formed.
  - `tildas(expression)` rewrites unary `+` and `-` as `~`.
  - `check_balanced_brackets`, `check_valid_chars`, `check_syntax` and
    `is_function_token` are the separate checks that `validate` uses.
- `funcplot.notation`:
  - `infix_to_postfix(infix)` turns an infix expression, with unary signs
    already written as `~`, into a postfix string. Its tokens are separated by
    single spaces.
  - `precedence(op)` and `is_function(token)` describe operators.
- `funcplot.plotting`:
  - `evaluate_rpn(postfix, x)` works out a postfix expression at `x`. It
    returns NaN for an empty expression.
  - `apply_unary(op, a)` and `apply_binary(op, a, b)` apply one operator.
  - `render_plot(postfix, xmin, xmax, ymin, ymax)` returns the graph as a
    string. Row 0 stands for `ymin` and the last row for `ymax`.
    `plot_function(...)` writes the same string to standard output.
- `funcplot.cli.main(argv=None)` is the command's entry point.

## Running the tests

```
pip install .[test]
pytest
```