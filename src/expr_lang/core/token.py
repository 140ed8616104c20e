# Token types produced by the lexer
NUMBER = 'NUMBER'          # Numeric literal or an already reduced value
OPERATOR = 'OPERATOR'      # Binary operator symbol (+, -, *, /, %)
LPAREN = 'LPAREN'
RPAREN = 'RPAREN'
IDENTIFIER = 'IDENTIFIER'  # Plain variable reference
INCREMENT = 'INCREMENT'    # ++x, --x, x++, x--
UNKNOWN = 'UNKNOWN'        # Anything the lexer could not classify


class Token:
    def __init__(self, type, value, column=1):
        self.type = type      # One of the token types above
        self.value = value    # float for NUMBER, (name, delta, is_prefix) for INCREMENT, text otherwise
        self.column = column  # Position of the token in the normalized expression (1-based)

    def __eq__(self, other):
        if not isinstance(other, Token):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def __repr__(self):
        return f"Token({self.type}, {self.value!r}, col={self.column})"


def number(value, column=1):
    """Build a NUMBER token holding a float."""
    return Token(NUMBER, float(value), column)
