"""
Variable table for the expression interpreter.
Holds the numeric bindings that every evaluation step reads and writes.
"""

import pyarrow as pa

from .errors import UndefinedVariableError


class Var:
    def __init__(self, name, value):
        self.name = name
        self.value = float(value)

    def __repr__(self):
        return f"Var(name='{self.name}', value={self.value})"


class VariableTable:
    """Mapping of variable name to Var, owned by one interpreter session.

    Entries are created or overwritten but never removed.
    """

    def __init__(self, variables=None):
        self.variables = {}
        for name, value in (variables or {}).items():
            self.set(name, value)

    def set(self, name, value):
        var = self.variables.get(name)
        if var is None:
            self.variables[name] = Var(name, value)
        else:
            # Update in place so every holder of the Var sees the new value
            var.value = float(value)

    def lookup(self, name, column=None):
        try:
            return self.variables[name]
        except KeyError:
            raise UndefinedVariableError(name, column) from None

    def get(self, name, column=None):
        return self.lookup(name, column).value

    def contains(self, name):
        return name in self.variables

    def items(self):
        """Return (name, value) pairs sorted by name."""
        return [(name, self.variables[name].value) for name in sorted(self.variables)]

    def to_dict(self):
        return dict(self.items())

    def to_arrow(self):
        """Return the table as a pyarrow Table with 'name' and 'value' columns."""
        pairs = self.items()
        return pa.table({
            'name': pa.array([name for name, _ in pairs], type=pa.string()),
            'value': pa.array([value for _, value in pairs], type=pa.float64()),
        })

    def __contains__(self, name):
        return self.contains(name)

    def __iter__(self):
        return iter(sorted(self.variables))

    def __len__(self):
        return len(self.variables)

    def __repr__(self):
        return f"VariableTable({self.to_dict()})"
