"""
Error kinds raised while evaluating expressions.

Each error also derives from the builtin exception normally raised for the
same condition, so callers can catch either ExpressionError or the builtin.
"""


class ExpressionError(Exception):
    """Base class for every evaluation failure."""


class UndefinedVariableError(ExpressionError, NameError):
    def __init__(self, name, column=None):
        self.name = name
        message = f"Variable '{name}' not defined"
        if column is not None:
            message += f" at column {column}"
        super().__init__(message)


class InvalidOperatorError(ExpressionError, ValueError):
    def __init__(self, operator):
        self.operator = operator
        super().__init__(f"Invalid operator: {operator}")


class DivisionByZeroError(ExpressionError, ZeroDivisionError):
    def __init__(self, operator='/'):
        self.operator = operator
        super().__init__(f"Division by zero in '{operator}' operation")


class MismatchedParenthesesError(ExpressionError, SyntaxError):
    pass


class InvalidAssignmentError(ExpressionError, SyntaxError):
    pass


class MalformedExpressionError(ExpressionError, SyntaxError):
    pass
