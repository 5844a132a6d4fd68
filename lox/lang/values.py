"""Runtime values in lox are plain Python objects, one type per lox type:

```
number  -> float
string  -> str
boolean -> bool
nil     -> None
```

Nothing is coerced. Because bool is a subclass of int in Python, every check here compares exact types rather than
using isinstance or ==, so that true is never equal to 1 and never accepted as a number.
"""

import math

from lox.lang.error import LoxRuntimeError


def is_number(value):
    return type(value) is float


def is_truthy(value):
    """false and nil are falsy; everything else (0 and "" included) is truthy."""
    if value is None:
        return False
    if type(value) is bool:
        return value
    return True


def is_equal(a, b):
    """Type-aware equality. Values of different lox types are never equal, and it is reflexive for every value, nan
    included.
    """
    if type(a) is not type(b):
        return False
    if is_number(a) and math.isnan(a) and math.isnan(b):
        return True
    return a == b


def check_number_operand(operator, operand):
    """Returns operand if it is a number, raises LoxRuntimeError at operator otherwise."""
    if is_number(operand):
        return operand
    raise LoxRuntimeError(operator, "Operand must be a number.")


def check_number_operands(operator, left, right):
    if is_number(left) and is_number(right):
        return left, right
    raise LoxRuntimeError(operator, "Operands must be numbers.")


def stringify(value):
    """Text shown by print. Integral numbers drop their fractional part: 6.0 -> 6."""
    if value is None:
        return "nil"
    if type(value) is bool:
        return "true" if value else "false"
    if is_number(value):
        if value.is_integer():
            return str(int(value))
        return repr(value)
    return str(value)
