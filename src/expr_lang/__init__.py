"""
Expression Interpreter

Evaluates arithmetic and assignment expressions over named numeric variables,
with operator precedence, parentheses and C-style increment/decrement.
"""

from .errors import (
    ExpressionError, UndefinedVariableError, InvalidOperatorError,
    DivisionByZeroError, MismatchedParenthesesError, InvalidAssignmentError,
    MalformedExpressionError
)
from .interpreter import Interpreter
from .main import run_expressions
from .scope import Var, VariableTable

__version__ = "0.1.0"
__all__ = [
    "Interpreter",
    "run_expressions",
    "Var",
    "VariableTable",
    "ExpressionError",
    "UndefinedVariableError",
    "InvalidOperatorError",
    "DivisionByZeroError",
    "MismatchedParenthesesError",
    "InvalidAssignmentError",
    "MalformedExpressionError",
]
