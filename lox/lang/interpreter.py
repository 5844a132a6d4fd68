"""Tree-walking interpreter for lox. Executes statements in order against a single Environment, evaluating
expressions to runtime values (see values.py for what those are).
"""

import math
import operator
import sys

from lox.lang.environment import Environment
from lox.lang.error import ErrorHandler, LoxRuntimeError
from lox.lang.token import TokenType
from lox.lang.tree import ExprVisitor, StmtVisitor
from lox.lang.values import check_number_operand, check_number_operands, is_equal, is_truthy, stringify


def _divide(left, right):
    """IEEE 754 division: x/0 is +-inf and 0/0 is nan instead of an error."""
    try:
        return left / right
    except ZeroDivisionError:
        if left == 0 or math.isnan(left):
            return math.nan
        return math.copysign(math.inf, math.copysign(1.0, left) * math.copysign(1.0, right))


class Interpreter(ExprVisitor, StmtVisitor):
    """Evaluates lox programs. One Interpreter keeps its Environment across interpret calls, which is how the shell
    remembers variables from one line to the next.
    """
    ARITHMETIC = {
        TokenType.MINUS: operator.sub,
        TokenType.SLASH: _divide,
        TokenType.STAR: operator.mul,
        TokenType.PLUS: operator.add,  # numbers only, strings are not concatenated
        TokenType.GREATER: operator.gt,
        TokenType.GREATER_EQUAL: operator.ge,
        TokenType.LESS: operator.lt,
        TokenType.LESS_EQUAL: operator.le,
    }

    def __init__(self, error_handler=None, out=None):
        self.error_handler = error_handler if error_handler is not None else ErrorHandler()
        self.out = out
        self.environment = Environment()
        self.last_value = None  # value of the last expression statement run

    def interpret(self, statements):
        """Executes statements in order. Returns None on success; on the first runtime error, reports it, stops, and
        returns the LoxRuntimeError.
        """
        try:
            for stmt in statements:
                self.execute(stmt)
        except LoxRuntimeError as error:
            self.error_handler.report(error)
            return error
        return None

    def execute(self, stmt):
        stmt.accept(self)

    def evaluate(self, expr):
        return expr.accept(self)

    # statements

    def visit_expression_stmt(self, stmt):
        self.last_value = self.evaluate(stmt.expression)

    def visit_print_stmt(self, stmt):
        value = self.evaluate(stmt.expression)
        print(stringify(value), file=self.out if self.out is not None else sys.stdout)

    def visit_var_stmt(self, stmt):
        value = None
        if stmt.initializer is not None:
            value = self.evaluate(stmt.initializer)
        self.environment.define(stmt.name.lexeme, value)

    # expressions

    def visit_literal_expr(self, expr):
        return expr.value

    def visit_grouping_expr(self, expr):
        return self.evaluate(expr.expression)

    def visit_variable_expr(self, expr):
        return self.environment.get(expr.name)

    def visit_unary_expr(self, expr):
        right = self.evaluate(expr.right)

        if expr.operator.type is TokenType.MINUS:
            return -check_number_operand(expr.operator, right)
        if expr.operator.type is TokenType.BANG:
            return not is_truthy(right)

        raise LoxRuntimeError(expr.operator, f"Unknown unary operator '{expr.operator.lexeme}'.")

    def visit_binary_expr(self, expr):
        left = self.evaluate(expr.left)
        right = self.evaluate(expr.right)
        op = expr.operator.type

        if op is TokenType.EQUAL_EQUAL:
            return is_equal(left, right)
        if op is TokenType.BANG_EQUAL:
            return not is_equal(left, right)

        if op in Interpreter.ARITHMETIC:
            left, right = check_number_operands(expr.operator, left, right)
            return Interpreter.ARITHMETIC[op](left, right)

        raise LoxRuntimeError(expr.operator, f"Unknown binary operator '{expr.operator.lexeme}'.")
