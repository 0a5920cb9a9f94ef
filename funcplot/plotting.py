"""Evaluation of postfix expressions and text plots of their graphs."""

from __future__ import annotations

import math
import re
import sys

from funcplot.notation import is_function

WIDTH = 80
HEIGHT = 25
EMPTY = "."
MARK = "*"

_NUMBER_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def _guarded(func, a: float) -> float:
    try:
        return func(a)
    except (ValueError, OverflowError):
        return math.nan


def _cotangent(a: float) -> float:
    t = math.tan(a)
    if t == 0:
        return math.copysign(math.inf, t)
    return 1.0 / t


_UNARY = {
    "~": lambda a: -a,
    "sin": lambda a: _guarded(math.sin, a),
    "cos": lambda a: _guarded(math.cos, a),
    "tan": lambda a: _guarded(math.tan, a),
    "ctg": lambda a: _guarded(_cotangent, a),
    "sqrt": lambda a: math.sqrt(a) if a >= 0 else math.nan,
    "ln": lambda a: math.log(a) if a > 0 else math.nan,
}

_BINARY = {
    "+": lambda a, b: a + b,
    "-": lambda a, b: a - b,
    "*": lambda a, b: a * b,
    "/": lambda a, b: a / b if b != 0 else math.nan,
}


def apply_unary(op: str, a: float) -> float:
    """Apply a unary operator or function; NaN outside its domain or for unknown *op*."""
    func = _UNARY.get(op)
    return func(a) if func else math.nan


def apply_binary(op: str, a: float, b: float) -> float:
    """Apply a binary operator; NaN on division by zero or for unknown *op*."""
    func = _BINARY.get(op)
    return func(a, b) if func else math.nan


def _parse_number(token: str) -> float:
    """Value of the longest numeric prefix of *token*, or 0.0 if there is none."""
    match = _NUMBER_PREFIX.match(token)
    return float(match.group()) if match else 0.0


def _store(value: float) -> float:
    """Keep ten significant digits, as every intermediate result does."""
    return float(format(value, ".10g"))


def _pop(stack: list[float]) -> float:
    return stack.pop() if stack else 1.0


def evaluate_rpn(postfix: str, x: float) -> float:
    """Evaluate a space-separated postfix expression at *x*.

    Returns NaN for an empty expression.  A missing operand counts as 1.
    """
    stack: list[float] = []
    for token in postfix.split():
        if token == "x":
            stack.append(_store(x))
        elif token[0].isdigit() and token[0].isascii() or (
            token[0] == "-" and token[1:2].isdigit() and token[1:2].isascii()
        ):
            stack.append(_parse_number(token))
        elif token == "~" or is_function(token):
            stack.append(_store(apply_unary(token, _pop(stack))))
        else:
            b = _pop(stack)
            a = _pop(stack)
            stack.append(_store(apply_binary(token, a, b)))
    return stack[-1] if stack else math.nan


def _round_half_away(value: float) -> float:
    if not math.isfinite(value):
        return value
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), value)


def _plot_row(postfix: str, x: float, ymin: float, ymax: float) -> int | None:
    y = _round_half_away(evaluate_rpn(postfix, x) * 1e10) / 1e10
    try:
        row = _round_half_away((y - ymin) / (ymax - ymin) * (HEIGHT - 1))
    except ZeroDivisionError:
        return None
    if not math.isfinite(row):
        return None
    row_index = int(row)
    return row_index if 0 <= row_index < HEIGHT else None


def render_plot(postfix: str, xmin: float, xmax: float, ymin: float, ymax: float) -> str:
    """Return the graph as HEIGHT lines of WIDTH characters, each ending in a newline.

    Row 0 corresponds to *ymin* and the last row to *ymax*.
    """
    grid = [[EMPTY] * WIDTH for _ in range(HEIGHT)]
    for col in range(WIDTH):
        x = xmin + (xmax - xmin) * col / (WIDTH - 1)
        row = _plot_row(postfix, x, ymin, ymax)
        if row is not None:
            grid[row][col] = MARK
    return "".join("".join(line) + "\n" for line in grid)


def plot_function(postfix: str, xmin: float, xmax: float, ymin: float, ymax: float) -> None:
    """Write the graph of *postfix* to standard output."""
    sys.stdout.write(render_plot(postfix, xmin, xmax, ymin, ymax))