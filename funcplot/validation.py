"""Validation of function expressions typed by the user.

An expression is built from numbers, the variable ``x``, the binary
operators ``+ - * /``, unary minus or plus, parentheses and the functions
``sin cos tan ctg sqrt ln``.  Unary signs are first rewritten to ``~``
by :func:`tildas`.
"""

from __future__ import annotations

FUNCTION_PREFIXES: tuple[str, ...] = ("sin(", "cos(", "tan(", "ctg(", "sqrt(", "ln(")
BINARY_OPERATORS = frozenset("+-*/")

_VALID_CHARS = frozenset("0123456789.x()+-*/~ sincotagqrl")

# Order matters: the first matching token wins.
_TOKENS: tuple[str, ...] = (
    *"0123456789",
    *FUNCTION_PREFIXES,
    "x",
    "(",
    ")",
    "+",
    "-",
    "*",
    "/",
    ".",
    "~",
    " ",
)


def tildas(expression: str) -> str:
    """Return *expression* with unary ``+`` and ``-`` replaced by ``~``.

    A sign is unary when it starts the expression or follows ``(`` or a
    binary operator.
    """
    chars: list[str] = []
    for ch in expression:
        if ch in "+-" and (not chars or chars[-1] == "(" or chars[-1] in BINARY_OPERATORS):
            ch = "~"
        chars.append(ch)
    return "".join(chars)


def check_balanced_brackets(expression: str) -> bool:
    """Return True if every ``)`` closes an earlier ``(`` and none is left open."""
    balance = 0
    for ch in expression:
        if ch == "(":
            balance += 1
        elif ch == ")":
            balance -= 1
            if balance < 0:
                return False
    return balance == 0


def is_function_token(token: str) -> bool:
    """Return True if *token* starts with a function name and its ``(``."""
    return token.startswith(FUNCTION_PREFIXES)


def _closing_index(text: str, start: int) -> int | None:
    """Index just past the ``)`` closing a group whose body begins at *start*."""
    balance = 1
    pos = start
    while pos < len(text) and balance > 0:
        if text[pos] == "(":
            balance += 1
        elif text[pos] == ")":
            balance -= 1
        pos += 1
    return pos if balance == 0 else None


def _bracketed(text: str, start: int) -> int | None:
    """Check a parenthesised body starting at *start*; return the index after it."""
    end = _closing_index(text, start)
    if end is None:
        return None
    body = text[start:end - 1]
    if not body.strip(" ") or not check_syntax(body):
        return None
    return end


def _match_token(text: str) -> int | None:
    """Length of the first known token at the start of *text*, if any."""
    for token in _TOKENS:
        if not text.startswith(token):
            continue
        if is_function_token(token):
            end = _bracketed(text, len(token))
            if end is not None:
                return end
        else:
            return len(token)
    return None


def check_valid_chars(expression: str) -> bool:
    """Return True if the expression is made only of known tokens and characters."""
    i = 0
    while i < len(expression):
        step = _match_token(expression[i:])
        if step:
            i += step
        elif expression[i] in _VALID_CHARS:
            i += 1
        else:
            return False
    return True


def _skip_spaces(text: str, i: int) -> int:
    while i < len(text) and text[i] == " ":
        i += 1
    return i


def _number(text: str, i: int) -> int | None:
    has_decimal = False
    while i < len(text) and (text[i].isdigit() and text[i].isascii() or (text[i] == "." and not has_decimal)):
        if text[i] == ".":
            has_decimal = True
        i += 1
    if text[i - 1] == "." or (i < len(text) and text[i] == "."):
        return None
    return i


def _operand(text: str, i: int) -> int | None:
    """Parse one operand at *i*; return the index after it, or None."""
    if i >= len(text):
        return None
    ch = text[i]
    if ch == "~":
        i = _skip_spaces(text, i + 1)
        return _operand(text, i) if i < len(text) else None
    if "0" <= ch <= "9":
        return _number(text, i)
    if ch == "x":
        return i + 1
    if ch == "(":
        return _bracketed(text, i + 1)
    for prefix in FUNCTION_PREFIXES:
        if text.startswith(prefix, i):
            return _bracketed(text, i + len(prefix))
    return None


def check_syntax(expression: str) -> bool:
    """Return True if operands and operators alternate correctly.

    Spaces are allowed before operands and operators but not at the end.
    """
    i = 0
    expect_operand = True
    while i < len(expression):
        i = _skip_spaces(expression, i)
        if i >= len(expression):
            return False
        if expect_operand:
            end = _operand(expression, i)
            if end is None:
                return False
            i = end
            expect_operand = False
        elif expression[i] in BINARY_OPERATORS:
            i += 1
            expect_operand = True
        elif expression[i] == ")":
            i += 1
        else:
            return False
    return not expect_operand


def validate(expression: str) -> bool:
    """Return True if *expression* is a non-empty, well-formed function expression."""
    if not expression:
        return False
    modified = tildas(expression)
    return (
        check_balanced_brackets(modified)
        and check_valid_chars(modified)
        and check_syntax(modified)
    )