"""Session control for the lox language: runs source text through the scan -> parse -> interpret pipeline, either one
line at a time (shell) or for a whole script file.
"""

import os
import sys

from lox.lang.error import UsageError
from lox.lang.interpreter import Interpreter
from lox.lang.parser import Parser
from lox.lang.printer import AstPrinter
from lox.lang.scanner import Scanner


class Session:
    """Governs a lox session. Variables defined by one run stay defined for the next."""
    EXTENSION = ".lox"

    def __init__(self, error_handler, out=None, print_ast=False):
        self.error_handler = error_handler
        self.out = out
        self.print_ast = print_ast  # print the syntax tree of each statement before running it

        self.interpreter = Interpreter(error_handler, out)
        self.printer = AstPrinter()

    def run(self, source):
        """Runs source. Returns the value of the last expression statement, or None if nothing ran (a scan or syntax
        error stops the pipeline before interpreting, a runtime error stops it midway).
        """
        scanner = Scanner(source, self.error_handler)
        parser = Parser(scanner.scan_tokens(), self.error_handler)
        statements = parser.parse()

        if scanner.errors or parser.errors:
            return None

        if self.print_ast:
            for stmt in statements:
                print(self.printer.print(stmt), file=self.out if self.out is not None else sys.stdout)

        self.interpreter.last_value = None
        if self.interpreter.interpret(statements) is not None:
            return None
        return self.interpreter.last_value

    def run_file(self, path):
        """Runs the script at path, which must be a readable .lox file."""
        if not path.endswith(Session.EXTENSION):
            raise UsageError(f"'{path}' is not a {Session.EXTENSION} file")

        try:
            with open(path, "r", encoding="utf-8") as file:
                source = file.read()
        except OSError:
            raise UsageError(f"'{os.path.abspath(path)}' could not be opened")

        return self.run(source)
