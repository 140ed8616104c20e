import math
from decimal import Decimal

import pyarrow as pa
import pyarrow.csv as pa_csv

from .core.token import IDENTIFIER, INCREMENT, number
from .errors import InvalidAssignmentError
from .lexer import Lexer, normalize, IDENTIFIER_RE
from .reducer import calculate, open_brackets, reduce_expression
from .scope import VariableTable

# Compound markers are tried before the bare '=' marker
ASSIGNMENT_OPERATORS = {
    '+=': '+',
    '-=': '-',
    '*=': '*',
    '/=': '/',
    '%=': '%',
    '=': None,
}


class Interpreter:
    def __init__(self, variables=None):
        self.variables = VariableTable(variables)  # Bindings shared by every evaluation

    def set_variable(self, name, value):
        self.variables.set(name, value)

    def evaluate(self, expression):
        """Evaluates one expression and returns its value as a float.

        Supports +, -, *, /, %, ++, -- (prefix and postfix), parentheses and
        the assignment forms =, +=, -=, *=, /=, %=. Tokens must be separated
        by spaces; parentheses need not be.

        Examples:
            "x++ + ++b * ( d - 8 ) + x"   where x=5, b=2, d=3
            "a = x + 8 + c * 3"           assigns the result to 'a'
        """
        expression = normalize(expression)
        words = expression.split(' ') if expression else []

        for marker, operator in ASSIGNMENT_OPERATORS.items():
            if marker in words:
                return self._evaluate_assignment(expression, words, marker, operator)

        tokens = Lexer(expression).tokenize()
        values = self._process_tokens(tokens)
        flat = open_brackets(values)
        return reduce_expression(flat)

    def _process_tokens(self, tokens):
        """Resolves increments and variable references left to right.

        The variable table is updated as each increment is met, so later
        tokens see values already changed by earlier ones. Nothing is rolled
        back if a later token fails.
        """
        processed = []
        for tok in tokens:
            if tok.type == INCREMENT:
                name, delta, is_prefix = tok.value
                var = self.variables.lookup(name, tok.column)
                old_value = var.value
                var.value = old_value + delta
                processed.append(number(var.value if is_prefix else old_value, tok.column))
            elif tok.type == IDENTIFIER:
                processed.append(number(self.variables.get(tok.value, tok.column), tok.column))
            else:
                processed.append(tok)
        return processed

    def _evaluate_assignment(self, expression, words, marker, operator):
        """Evaluates 'name <marker> expression' and stores the result."""
        index = words.index(marker)
        if words.count(marker) != 1 or index == 0 or index == len(words) - 1:
            raise InvalidAssignmentError(f"Invalid assignment expression: {expression}")
        target = words[:index]
        if len(target) != 1 or not IDENTIFIER_RE.match(target[0]):
            raise InvalidAssignmentError(
                f"Invalid assignment target '{' '.join(target)}' in: {expression}")
        var_name = target[0]

        value = self.evaluate(' '.join(words[index + 1:]))

        if operator is not None:
            current = self.variables.get(var_name)
            value = calculate(current, value, operator)

        self.variables.set(var_name, value)
        return value

    def process_expressions(self, expressions):
        """Evaluates each non-blank expression in order and returns the variable table."""
        for expression in expressions:
            expression = expression.strip()
            if expression:
                self.evaluate(expression)
        return self.variables

    def format_output(self, results=None):
        """Formats variables as (name1=value1,name2=value2,...) sorted by name."""
        if results is None:
            results = self.variables
        pairs = [f"{name}={format_value(value)}" for name, value in sorted(results.items())]
        return '(' + ','.join(pairs) + ')'

    def get_variables_csv(self):
        """Returns the variable table in CSV format with a name,value header."""
        sink = pa.BufferOutputStream()
        pa_csv.write_csv(self.variables.to_arrow(), sink)
        return sink.getvalue().to_pybytes().decode('utf-8')


def format_value(value):
    # Whole numbers print without a decimal point, fractions without an exponent
    if not math.isfinite(value):
        return repr(value)
    if value == math.floor(value):
        return str(int(value))
    return format(Decimal(repr(value)), "f")
