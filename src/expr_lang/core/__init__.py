from .token import (
    Token, NUMBER, OPERATOR, LPAREN, RPAREN, IDENTIFIER, INCREMENT, UNKNOWN
)

__all__ = ['Token', 'NUMBER', 'OPERATOR', 'LPAREN', 'RPAREN',
           'IDENTIFIER', 'INCREMENT', 'UNKNOWN']
