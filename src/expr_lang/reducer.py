# reducer.py
# Bracket resolution and precedence-ordered reduction of token streams that
# hold only numbers, binary operators and parentheses.

import math

from .core.token import NUMBER, OPERATOR, LPAREN, RPAREN, number
from .errors import (
    DivisionByZeroError, InvalidOperatorError, MalformedExpressionError,
    MismatchedParenthesesError
)

# Operators grouped by precedence tier, highest first
PRECEDENCE_TIERS = (('*', '/', '%'), ('+', '-'))
KNOWN_OPERATORS = {op for tier in PRECEDENCE_TIERS for op in tier}


def calculate(left, right, operator):
    """Apply a binary operator to two floats."""
    if operator == '*':
        return left * right
    elif operator == '/':
        if right == 0:
            raise DivisionByZeroError(operator)
        return left / right
    elif operator == '%':
        if right == 0:
            raise DivisionByZeroError(operator)
        if math.isinf(left):
            return math.nan
        # Remainder takes the sign of the dividend
        return math.fmod(left, right)
    elif operator == '+':
        return left + right
    elif operator == '-':
        return left - right
    raise InvalidOperatorError(operator)


def _check_shape(tokens):
    if not tokens:
        raise MalformedExpressionError("Empty expression")
    for i, tok in enumerate(tokens):
        expected = NUMBER if i % 2 == 0 else OPERATOR
        if tok.type != expected:
            raise MalformedExpressionError(
                f"Unexpected '{tok.value}' at column {tok.column}, expected {expected.lower()}")
        if tok.type == OPERATOR and tok.value not in KNOWN_OPERATORS:
            raise InvalidOperatorError(tok.value)
    if tokens[-1].type != NUMBER:
        last = tokens[-1]
        raise MalformedExpressionError(
            f"Expression ends with operator '{last.value}' at column {last.column}")


def _reduce_tier(tokens, operators):
    """One left-to-right pass collapsing every operator of a single tier."""
    reduced = [tokens[0]]
    for i in range(1, len(tokens), 2):
        op, right = tokens[i], tokens[i + 1]
        if op.value in operators:
            left = reduced[-1]
            reduced[-1] = number(calculate(left.value, right.value, op.value), left.column)
        else:
            reduced.append(op)
            reduced.append(right)
    return reduced


def reduce_expression(tokens):
    """Reduce a flat NUMBER/OPERATOR stream to a single float.

    Multiplicative operators are applied first, then additive ones, each
    tier left to right.
    """
    _check_shape(tokens)
    for operators in PRECEDENCE_TIERS:
        tokens = _reduce_tier(tokens, operators)
    return tokens[0].value


def open_brackets(tokens):
    """Replace every parenthesised group by its reduced value.

    Groups are reduced as their closing parenthesis is reached, so inner
    groups always collapse before the group enclosing them.
    """
    output = []
    stack = []
    for tok in tokens:
        if tok.type == LPAREN:
            stack.append((len(output), tok))
        elif tok.type == RPAREN:
            if not stack:
                raise MismatchedParenthesesError(
                    f"Unmatched ')' at column {tok.column}")
            start, opening = stack.pop()
            group = output[start:]
            del output[start:]
            output.append(number(reduce_expression(group), opening.column))
        else:
            output.append(tok)
    if stack:
        _, opening = stack[-1]
        raise MismatchedParenthesesError(
            f"Unmatched '(' at column {opening.column}")
    return output
