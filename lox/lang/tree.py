"""Abstract syntax tree for lox. Formally, the node set is closed:

```
Expr ::= Binary(left: Expr, operator: Token, right: Expr)
       | Grouping(expression: Expr)
       | Literal(value: float | str | bool | None)
       | Unary(operator: Token, right: Expr)
       | Variable(name: Token)

Stmt ::= Expression(expression: Expr)
       | Print(expression: Expr)
       | Var(name: Token, initializer: Expr | None)
```

Operations over the tree (interpreting, printing) are visitors. ExprVisitor and StmtVisitor declare one abstract
method per node class, so a visitor that forgets a node cannot be instantiated. Nodes are frozen dataclasses: they
compare structurally and cannot be changed once the Parser has built them.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from lox.lang.token import Token


class ExprVisitor(ABC):

    @abstractmethod
    def visit_binary_expr(self, expr): ...

    @abstractmethod
    def visit_grouping_expr(self, expr): ...

    @abstractmethod
    def visit_literal_expr(self, expr): ...

    @abstractmethod
    def visit_unary_expr(self, expr): ...

    @abstractmethod
    def visit_variable_expr(self, expr): ...


class StmtVisitor(ABC):

    @abstractmethod
    def visit_expression_stmt(self, stmt): ...

    @abstractmethod
    def visit_print_stmt(self, stmt): ...

    @abstractmethod
    def visit_var_stmt(self, stmt): ...


class Expr(ABC):
    """Superclass of every expression node."""

    @abstractmethod
    def accept(self, visitor):
        """Dispatches to the visitor method for this node class and returns its result."""


class Stmt(ABC):
    """Superclass of every statement node."""

    @abstractmethod
    def accept(self, visitor):
        """Dispatches to the visitor method for this node class and returns its result."""


@dataclass(frozen=True)
class Binary(Expr):
    left: Expr
    operator: Token
    right: Expr

    def accept(self, visitor):
        return visitor.visit_binary_expr(self)


@dataclass(frozen=True)
class Grouping(Expr):
    expression: Expr

    def accept(self, visitor):
        return visitor.visit_grouping_expr(self)


@dataclass(frozen=True)
class Literal(Expr):
    value: Any

    def accept(self, visitor):
        return visitor.visit_literal_expr(self)


@dataclass(frozen=True)
class Unary(Expr):
    operator: Token
    right: Expr

    def accept(self, visitor):
        return visitor.visit_unary_expr(self)


@dataclass(frozen=True)
class Variable(Expr):
    name: Token

    def accept(self, visitor):
        return visitor.visit_variable_expr(self)


@dataclass(frozen=True)
class Expression(Stmt):
    expression: Expr

    def accept(self, visitor):
        return visitor.visit_expression_stmt(self)


@dataclass(frozen=True)
class Print(Stmt):
    expression: Expr

    def accept(self, visitor):
        return visitor.visit_print_stmt(self)


@dataclass(frozen=True)
class Var(Stmt):
    name: Token
    initializer: Optional[Expr] = None

    def accept(self, visitor):
        return visitor.visit_var_stmt(self)
