"""Recursive-descent parser for lox. Grammar, from lowest to highest binding:

```
program     -> declaration* EOF
declaration -> "var" IDENTIFIER ( "=" expression )? ";"
             | statement
statement   -> "print" expression ";"
             | expression ";"
expression  -> equality
equality    -> comparison ( ( "!=" | "==" ) comparison )*
comparison  -> term ( ( ">" | ">=" | "<" | "<=" ) term )*
term        -> factor ( ( "-" | "+" ) factor )*
factor      -> unary ( ( "/" | "*" ) unary )*
unary       -> ( "!" | "-" ) unary
             | primary
primary     -> NUMBER | STRING | "true" | "false" | "nil"
             | "(" expression ")" | IDENTIFIER
```

Every binary level is left-associative: 8 - 4 - 2 = ((8 - 4) - 2). Unary operators nest to the right.

A syntax error unwinds to the enclosing declaration as a ParseError. There it is reported, the parser skips ahead to
the next statement boundary and carries on, so one pass reports every independent syntax error in the source.
"""

from lox.lang.error import ErrorHandler, ParseError
from lox.lang.token import TokenType
from lox.lang.tree import Binary, Expression, Grouping, Literal, Print, Unary, Var, Variable


class Parser:
    """Single-use parser over a token list produced by Scanner (which must end with EOF)."""
    SYNC_KEYWORDS = {
        TokenType.CLASS,
        TokenType.FUN,
        TokenType.VAR,
        TokenType.FOR,
        TokenType.IF,
        TokenType.WHILE,
        TokenType.PRINT,
        TokenType.RETURN,
    }

    def __init__(self, tokens, error_handler=None):
        self.tokens = tokens
        self.error_handler = error_handler if error_handler is not None else ErrorHandler()
        self.errors = []
        self.current = 0

    def parse(self):
        """Returns the list of statements that parsed cleanly. Check self.errors (or the ErrorHandler) before running
        them: a program with any syntax error should not be interpreted.
        """
        statements = []
        while not self.is_at_end():
            stmt = self.declaration()
            if stmt is not None:
                statements.append(stmt)
        return statements

    # statements

    def declaration(self):
        try:
            if self.match(TokenType.VAR):
                return self.var_declaration()
            return self.statement()
        except ParseError as error:
            self.errors.append(error)
            self.error_handler.report(error)
            self.synchronize()
            return None

    def var_declaration(self):
        name = self.consume(TokenType.IDENTIFIER, "Expect variable name.")

        initializer = None
        if self.match(TokenType.EQUAL):
            initializer = self.expression()

        self.consume(TokenType.SEMICOLON, "Expect ';' after variable declaration.")
        return Var(name, initializer)

    def statement(self):
        if self.match(TokenType.PRINT):
            return self.print_statement()
        return self.expression_statement()

    def print_statement(self):
        value = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after value.")
        return Print(value)

    def expression_statement(self):
        expr = self.expression()
        self.consume(TokenType.SEMICOLON, "Expect ';' after expression.")
        return Expression(expr)

    # expressions

    def expression(self):
        return self.equality()

    def _binary(self, operand, *operators):
        """Parses a left-associative chain operand (operator operand)* for one precedence level."""
        expr = operand()
        while self.match(*operators):
            operator = self.previous()
            right = operand()
            expr = Binary(expr, operator, right)
        return expr

    def equality(self):
        return self._binary(self.comparison, TokenType.BANG_EQUAL, TokenType.EQUAL_EQUAL)

    def comparison(self):
        return self._binary(self.term, TokenType.GREATER, TokenType.GREATER_EQUAL, TokenType.LESS,
                            TokenType.LESS_EQUAL)

    def term(self):
        return self._binary(self.factor, TokenType.MINUS, TokenType.PLUS)

    def factor(self):
        return self._binary(self.unary, TokenType.SLASH, TokenType.STAR)

    def unary(self):
        if self.match(TokenType.BANG, TokenType.MINUS):
            operator = self.previous()
            return Unary(operator, self.unary())
        return self.primary()

    def primary(self):
        if self.match(TokenType.FALSE):
            return Literal(False)
        if self.match(TokenType.TRUE):
            return Literal(True)
        if self.match(TokenType.NIL):
            return Literal(None)

        if self.match(TokenType.NUMBER, TokenType.STRING):
            return Literal(self.previous().literal)

        if self.match(TokenType.IDENTIFIER):
            return Variable(self.previous())

        if self.match(TokenType.LEFT_PAREN):
            expr = self.expression()
            self.consume(TokenType.RIGHT_PAREN, "Expect ')' after expression.")
            return Grouping(expr)

        raise ParseError(self.peek(), "Expect expression.")

    # helpers

    def match(self, *token_types):
        """Consumes the current token if it is any of token_types."""
        for token_type in token_types:
            if self.check(token_type):
                self.advance()
                return True
        return False

    def consume(self, token_type, msg):
        if self.check(token_type):
            return self.advance()
        raise ParseError(self.peek(), msg)

    def check(self, token_type):
        if self.is_at_end():
            return False
        return self.peek().type is token_type

    def advance(self):
        if not self.is_at_end():
            self.current += 1
        return self.previous()

    def is_at_end(self):
        return self.peek().type is TokenType.EOF

    def peek(self):
        return self.tokens[self.current]

    def previous(self):
        return self.tokens[self.current - 1]

    def synchronize(self):
        """Discards tokens until just after a ";" or just before a keyword that starts a statement."""
        self.advance()
        while not self.is_at_end():
            if self.previous().type is TokenType.SEMICOLON:
                return
            if self.peek().type in Parser.SYNC_KEYWORDS:
                return
            self.advance()
