"""Debug printer that renders syntax trees in a fully parenthesized prefix form, e.g. `-123 * (45.67)` becomes
`(* (- 123) (group 45.67))`. Used by `lox --ast`.
"""

from lox.lang.tree import ExprVisitor, StmtVisitor
from lox.lang.values import stringify


class AstPrinter(ExprVisitor, StmtVisitor):
    """Printing is a pure function of the tree: nothing is mutated, and the same tree always gives the same text."""

    def print(self, node):
        return node.accept(self)

    def parenthesize(self, name, *nodes):
        parts = [name] + [node.accept(self) for node in nodes]
        return f"({' '.join(parts)})"

    def visit_binary_expr(self, expr):
        return self.parenthesize(expr.operator.lexeme, expr.left, expr.right)

    def visit_grouping_expr(self, expr):
        return self.parenthesize("group", expr.expression)

    def visit_literal_expr(self, expr):
        if isinstance(expr.value, str):
            return f"\"{expr.value}\""
        return stringify(expr.value)

    def visit_unary_expr(self, expr):
        return self.parenthesize(expr.operator.lexeme, expr.right)

    def visit_variable_expr(self, expr):
        return expr.name.lexeme

    def visit_expression_stmt(self, stmt):
        return self.parenthesize(";", stmt.expression)

    def visit_print_stmt(self, stmt):
        return self.parenthesize("print", stmt.expression)

    def visit_var_stmt(self, stmt):
        if stmt.initializer is None:
            return f"(var {stmt.name.lexeme})"
        return self.parenthesize(f"var {stmt.name.lexeme}", stmt.initializer)
