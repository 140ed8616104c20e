# Normalizer and lexer for arithmetic/assignment expressions.
# Expressions are whitespace separated: numbers, operators and identifiers
# must be separated by spaces, parentheses need not be.

import re

from .core.token import (
    Token, NUMBER, OPERATOR, LPAREN, RPAREN, IDENTIFIER, INCREMENT, UNKNOWN
)

NUMBER_RE = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)$')
IDENTIFIER_RE = re.compile(r'^[A-Za-z_][A-Za-z0-9_]*$')
OPERATOR_RE = re.compile(r'^[^\w\s()]+$')

STEP_OPERATORS = {'++': 1, '--': -1}


def normalize(expression):
    """Put single spaces around parentheses and collapse all other whitespace."""
    expression = expression.replace('(', ' ( ').replace(')', ' ) ')
    return re.sub(r'\s+', ' ', expression).strip()


# Lexer turns a normalized expression into tagged tokens
class Lexer:
    def __init__(self, text):
        self.text = text  # Already normalized
        self.tokens = []

    def tokenize(self):
        """Classify every space separated unit. Never raises: anything
        unrecognised becomes an UNKNOWN token and fails during reduction."""
        if not self.text:
            return self.tokens
        for column, word in enumerate(self.text.split(' '), start=1):
            self.tokens.append(self._classify(word, column))
        return self.tokens

    def _classify(self, word, column):
        if word == '(':
            return Token(LPAREN, word, column)
        if word == ')':
            return Token(RPAREN, word, column)
        # ++x / --x
        prefix = word[:2]
        if prefix in STEP_OPERATORS:
            return Token(INCREMENT, (word[2:].strip(), STEP_OPERATORS[prefix], True), column)
        # x++ / x--
        suffix = word[-2:]
        if suffix in STEP_OPERATORS:
            return Token(INCREMENT, (word[:-2].strip(), STEP_OPERATORS[suffix], False), column)
        if NUMBER_RE.match(word):
            return Token(NUMBER, float(word), column)
        if IDENTIFIER_RE.match(word):
            return Token(IDENTIFIER, word, column)
        if OPERATOR_RE.match(word):
            return Token(OPERATOR, word, column)
        return Token(UNKNOWN, word, column)
