"""Variable storage for the lox interpreter. There is a single, flat, global scope."""

from lox.lang.error import LoxRuntimeError


class Environment:
    """Maps variable names (lexemes) to runtime values."""

    def __init__(self):
        self.values = {}

    def define(self, name, value):
        """Binds name to value. Redefining an existing name silently replaces its value."""
        self.values[name] = value

    def get(self, name):
        """Value bound to the Token name, raises LoxRuntimeError if it was never defined."""
        try:
            return self.values[name.lexeme]
        except KeyError:
            raise LoxRuntimeError(name, f"Undefined variable '{name.lexeme}'.")

    def __contains__(self, name):
        return name in self.values

    def __repr__(self):
        return f"Environment({self.values!r})"
