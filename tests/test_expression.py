import operator
from collections import Counter

import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsalgos.expression import (
    evaluate,
    evaluate_postfix,
    infix_to_postfix,
    is_operator,
    main,
    precedence,
)

_OPS = {"+": operator.add, "-": operator.sub, "*": operator.mul}
_digit = st.integers(0, 9)


def _combine(parts):
    (left_text, left_value), op, (right_text, right_value) = parts
    return f"({left_text}{op}{right_text})", _OPS[op](left_value, right_value)


_expressions = st.recursive(
    _digit.map(lambda d: (str(d), d)),
    lambda children: st.tuples(children, st.sampled_from(sorted(_OPS)), children).map(_combine),
    max_leaves=12,
)


def test_precedence_ordering():
    assert precedence("*") == precedence("/")
    assert precedence("+") == precedence("-")
    assert precedence("*") > precedence("+") > precedence("(")
    assert precedence("x") == precedence("(")


def test_is_operator():
    assert all(is_operator(c) for c in "+-*/")
    assert not any(is_operator(c) for c in "()0a^ ")


def test_postfix_respects_precedence():
    assert infix_to_postfix("1+2*3") == "123*+"


def test_postfix_respects_parentheses():
    assert infix_to_postfix("(1+2)*3") == "12+3*"


def test_unmatched_open_paren_is_flushed():
    assert infix_to_postfix("(1+2") == "12+("


def test_postfix_skips_spaces():
    assert infix_to_postfix("1 + 2 * 3") == infix_to_postfix("1+2*3")


@given(_expressions)
def test_postfix_keeps_digits_and_operators(pair):
    text, _ = pair
    postfix = infix_to_postfix(text)
    digits = [c for c in text if c.isdigit()]
    assert [c for c in postfix if c.isdigit()] == digits
    assert Counter(c for c in postfix if is_operator(c)) == Counter(c for c in text if is_operator(c))
    assert "(" not in postfix and ")" not in postfix


@given(_expressions)
def test_evaluate_parenthesised_expressions(pair):
    text, value = pair
    assert evaluate(text) == value


@given(_digit, _digit, _digit)
def test_evaluate_unparenthesised_precedence(a, b, c):
    assert evaluate(f"{a}+{b}*{c}") == a + b * c
    assert evaluate(f"{a}*{b}-{c}") == a * b - c
    assert evaluate(f"{a}-{b}-{c}") == a - b - c


@given(_digit, st.integers(1, 9))
def test_division_truncates_toward_zero(a, b):
    assert evaluate(f"{a}/{b}") == a // b
    assert evaluate(f"(0-{a})/{b}") == -(a // b)


def test_evaluate_postfix_directly():
    assert evaluate_postfix("34+2*") == (3 + 4) * 2


def test_division_by_zero():
    with pytest.raises(ZeroDivisionError):
        evaluate("1/0")


@pytest.mark.parametrize("text", ["", "+", "1+", "()"])
def test_malformed_expressions(text):
    with pytest.raises(ValueError):
        evaluate(text)


def test_evaluate_postfix_missing_operand():
    with pytest.raises(ValueError):
        evaluate_postfix("1+")


def test_main_prints_result(capsys):
    assert main(["2*3+4"]) == 0
    assert capsys.readouterr().out == f"Result: {2 * 3 + 4}\n"


def test_main_usage(capsys):
    assert main([]) == 1
    assert capsys.readouterr().out.startswith("Usage:")


def test_main_too_many_arguments(capsys):
    assert main(["1", "2"]) == 1
    assert "<expression>" in capsys.readouterr().out


def test_main_reports_division_by_zero(capsys):
    assert main(["1/0"]) == 1
    assert "division by zero" in capsys.readouterr().err


def test_main_reports_malformed(capsys):
    assert main(["+"]) == 1
    assert "error" in capsys.readouterr().err