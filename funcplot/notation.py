"""Conversion of infix expressions to space-separated postfix notation.

The converter is a shunting-yard parser.  It expects unary signs to have
been rewritten to ``~`` already (see :func:`funcplot.validation.tildas`).
"""

from __future__ import annotations

from collections.abc import Callable

FUNCTIONS = frozenset({"sin", "cos", "tan", "ctg", "sqrt", "ln"})

_PRECEDENCE: dict[str, int] = {
    "+": 1,
    "-": 1,
    "*": 2,
    "/": 2,
    "~": 3,
    **{name: 4 for name in FUNCTIONS},
}


def precedence(op: str) -> int:
    """Return the binding strength of *op*; unknown tokens bind weakest (0)."""
    return _PRECEDENCE.get(op, 0)


def is_function(token: str) -> bool:
    """Return True if *token* names a supported function."""
    return token in FUNCTIONS


def _is_digit(ch: str) -> bool:
    return "0" <= ch <= "9"


def _is_alpha(ch: str) -> bool:
    return "a" <= ch <= "z" or "A" <= ch <= "Z"


def _read_while(text: str, start: int, accept: Callable[[str], bool]) -> tuple[str, int]:
    end = start
    while end < len(text) and accept(text[end]):
        end += 1
    return text[start:end], end


def _close_group(stack: list[str], output: list[str]) -> None:
    """Flush operators down to the matching ``(`` and a function that owns it."""
    while stack and stack[-1] != "(":
        output.append(stack.pop())
    if stack:
        stack.pop()
    if stack and is_function(stack[-1]):
        output.append(stack.pop())


def infix_to_postfix(infix: str) -> str:
    """Return the postfix form of *infix* with tokens separated by single spaces."""
    output: list[str] = []
    stack: list[str] = []
    i = 0
    while i < len(infix):
        ch = infix[i]
        if ch == " ":
            i += 1
        elif _is_digit(ch) or ch == "x":
            token, i = _read_while(infix, i, lambda c: _is_digit(c) or c in ".x")
            output.append(token)
        elif _is_alpha(ch):
            token, i = _read_while(infix, i, _is_alpha)
            stack.append(token)
        elif ch == "(":
            stack.append(ch)
            i += 1
        elif ch == ")":
            i += 1
            _close_group(stack, output)
        else:
            i += 1
            while stack and precedence(stack[-1]) >= precedence(ch):
                output.append(stack.pop())
            stack.append(ch)
    output.extend(reversed(stack))
    return " ".join(output)