"""Infix to postfix conversion and evaluation of single-digit expressions."""

from __future__ import annotations

import operator
import os
import sys
from collections.abc import Callable, Sequence

_DIGITS = frozenset("0123456789")
_OPERATORS = frozenset("+-*/")


def precedence(op: str) -> int:
    """Binding strength of an operator: 2 for * and /, 1 for + and -, else 0."""
    if op in ("*", "/"):
        return 2
    if op in ("+", "-"):
        return 1
    return 0


def is_operator(char: str) -> bool:
    """Whether char is one of + - * /."""
    return char in _OPERATORS


def infix_to_postfix(infix: str) -> str:
    """Convert an infix expression of single digits to postfix.

    Characters other than digits, operators and parentheses are skipped.
    Unmatched '(' are flushed to the end of the output.
    """
    output: list[str] = []
    stack: list[str] = []
    for char in infix:
        if char in _DIGITS:
            output.append(char)
        elif char == "(":
            stack.append(char)
        elif char == ")":
            while stack and stack[-1] != "(":
                output.append(stack.pop())
            if stack:
                stack.pop()
        elif is_operator(char):
            while stack and precedence(stack[-1]) >= precedence(char):
                output.append(stack.pop())
            stack.append(char)
    output.extend(reversed(stack))
    return "".join(output)


def _divide(a: int, b: int) -> int:
    """Integer division truncating toward zero."""
    if b == 0:
        raise ZeroDivisionError("division by zero")
    quotient = abs(a) // abs(b)
    return quotient if (a < 0) == (b < 0) else -quotient


_APPLY: dict[str, Callable[[int, int], int]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": _divide,
}


def evaluate_postfix(postfix: str) -> int:
    """Evaluate a postfix expression of single digits; other characters are skipped."""
    values: list[int] = []
    for char in postfix:
        if char in _DIGITS:
            values.append(int(char))
        elif is_operator(char):
            if len(values) < 2:
                raise ValueError(f"operator {char!r} is missing an operand")
            right = values.pop()
            left = values.pop()
            values.append(_APPLY[char](left, right))
    if not values:
        raise ValueError("expression has no operands")
    return values[-1]


def evaluate(expression: str) -> int:
    """Evaluate an infix expression of single digits."""
    return evaluate_postfix(infix_to_postfix(expression))


def main(argv: Sequence[str] | None = None) -> int:
    """Evaluate the single expression given on the command line."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) != 1:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "dsalgos-eval"
        print(f"Usage: {prog} <expression>")
        return 1
    try:
        result = evaluate(args[0])
    except (ValueError, ZeroDivisionError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1
    print(f"Result: {result}")
    return 0