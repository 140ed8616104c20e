import math

import pytest

from expr_lang.core.token import Token, OPERATOR, number
from expr_lang.errors import (
    DivisionByZeroError, InvalidOperatorError, MalformedExpressionError,
    MismatchedParenthesesError
)
from expr_lang.lexer import Lexer, normalize
from expr_lang.reducer import calculate, open_brackets, reduce_expression


def reduce_text(text):
    return reduce_expression(open_brackets(Lexer(normalize(text)).tokenize()))


def test_calculate_basic_operators():
    assert calculate(10, 2, '/') == 5.0
    assert calculate(5, 2, '/') == 2.5
    assert calculate(10, -2, '/') == -5.0
    assert calculate(-10, -2, '/') == 5.0
    assert calculate(3, 4, '*') == 12.0
    assert calculate(3, 4, '+') == 7.0
    assert calculate(3, 4, '-') == -1.0


def test_calculate_modulo_follows_dividend_sign():
    assert calculate(7, 3, '%') == 1.0
    assert calculate(-7, 3, '%') == -1.0
    assert calculate(7, -3, '%') == 1.0
    assert calculate(5.5, 2, '%') == 1.5


def test_calculate_division_by_zero():
    with pytest.raises(DivisionByZeroError):
        calculate(10, 0, '/')
    with pytest.raises(DivisionByZeroError):
        calculate(10, 0, '%')
    with pytest.raises(ZeroDivisionError):
        calculate(1, 0.0, '/')


def test_calculate_invalid_operator():
    with pytest.raises(InvalidOperatorError):
        calculate(1, 2, '^')


@pytest.mark.parametrize("text, expected", [
    ("5", 5.0),
    ("2 + 3 * 4", 14.0),
    ("10 + 20 / 4", 15.0),
    ("10 + 7 % 3", 11.0),
    ("10 - 3 - 2", 5.0),
    ("1 * 8 - 7 + 6 / 2 + 3 % 2", 5.0),
    ("2 * 3 * 4 / 6", 4.0),
])
def test_reduce_precedence(text, expected):
    assert reduce_text(text) == expected


def test_reduce_keeps_left_column():
    tokens = [number(2, 1), Token(OPERATOR, '*', 2), number(3, 3)]
    assert reduce_expression(tokens) == 6.0


@pytest.mark.parametrize("text", ["", "+", "2 +", "+ 2", "2 3", "2 + + 3", "2 + $"])
def test_reduce_malformed(text):
    with pytest.raises(MalformedExpressionError):
        reduce_text(text)


def test_reduce_unknown_operator():
    with pytest.raises(InvalidOperatorError):
        reduce_text("2 ^ 3")


def test_open_brackets_simple_and_nested():
    assert reduce_text("( 2 + 3 )") == 5.0
    assert reduce_text("( 1 + ( 2 + 3 ) )") == 6.0
    assert reduce_text("( 2 + 3 ) * 4") == 20.0
    assert reduce_text("( ( 2 + 3 ) * 2 )") == 10.0


def test_open_brackets_multiple_nested():
    result = reduce_text("( 1 * ( ( 8 - 7 ) ) + 6 / ( 2 + 3 ) % 2 )")
    assert result == pytest.approx(2.2)


def test_open_brackets_returns_flat_stream():
    flat = open_brackets(Lexer("( 2 + 3 ) * ( 4 - 1 )").tokenize())
    assert [t.value for t in flat] == [5.0, '*', 3.0]


def test_open_brackets_deep_nesting():
    depth = 5000
    text = "(" * depth + "1" + ")" * depth
    assert reduce_text(text) == 1.0


@pytest.mark.parametrize("text", ["( 2 + 3", "2 + 3 )", ") 2 (", "( ( 1 )"])
def test_open_brackets_mismatched(text):
    with pytest.raises(MismatchedParenthesesError):
        open_brackets(Lexer(text).tokenize())


def test_empty_parentheses_are_malformed():
    with pytest.raises(MalformedExpressionError):
        reduce_text("( )")


def test_modulo_of_infinite_dividend_is_nan():
    assert math.isnan(calculate(math.inf, 3, '%'))
    assert math.isnan(calculate(-math.inf, 2.5, '%'))
    assert calculate(3, math.inf, '%') == 3.0
    assert math.isnan(reduce_text("9" * 400 + " % 3"))
