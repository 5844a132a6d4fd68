"""Error handling for the lox language. Only LoxErrors should be encountered during running: if another type of error
is raised and makes it all the way to ErrorHandler, it is assumed to be an internal issue.

There is no process-wide error state: every ErrorHandler keeps its own flags, and whoever owns the handler (the CLI,
the shell, a test) decides what to do with them.
"""

import sys

from termcolor import colored

from lox.lang.token import TokenType


class LoxError(Exception):
    """Any diagnostic produced while scanning, parsing or running lox source. line is the source line of the offending
    input and where is a short context string (" at 'x'", " at end") placed right after "Error".
    """

    def __init__(self, msg, line=None, where=""):
        super().__init__(msg)
        self.msg = msg
        self.line = line
        self.where = where

    def __str__(self):
        if self.line is None:
            return f"Error{self.where}: {self.msg}"
        return f"[line {self.line}] Error{self.where}: {self.msg}"


class ScanError(LoxError):
    """Unexpected character or unterminated string. Reported, never raised past the Scanner."""


class ParseError(LoxError):
    """Token sequence does not match the grammar at token."""

    def __init__(self, token, msg):
        where = " at end" if token.type is TokenType.EOF else f" at '{token.lexeme}'"
        super().__init__(msg, token.line, where)
        self.token = token


class LoxRuntimeError(LoxError):
    """Type mismatch or undefined variable while interpreting. Stops the current run."""

    def __init__(self, token, msg):
        super().__init__(msg, token.line)
        self.token = token

    def __str__(self):
        return f"{self.msg}\n[line {self.line}]"


class UsageError(LoxError):
    """Invalid invocation of the command-line interpreter."""


class Interrupt(LoxError):
    """Ctrl-C while running or reading input."""


class ErrorHandler:
    """Collects and prints lox errors. Also a context manager that will silently suppress Python errors and report
    them as lox errors instead.
    """
    ERROR = "red"

    OK = 0
    USAGE = 64
    DATA_ERROR = 65
    SOFTWARE = 70
    INTERRUPTED = 130

    def __init__(self, fatal=False, out=None):
        self.fatal = fatal
        self.out = out
        self.errors = []

        self.had_error = False
        self.had_runtime_error = False
        self.had_usage_error = False
        self.interrupted = False

    @property
    def exit_code(self):
        """Process exit code matching the worst error seen so far."""
        if self.interrupted:
            return ErrorHandler.INTERRUPTED
        if self.had_usage_error:
            return ErrorHandler.USAGE
        if self.had_error:
            return ErrorHandler.DATA_ERROR
        if self.had_runtime_error:
            return ErrorHandler.SOFTWARE
        return ErrorHandler.OK

    def reset(self):
        """Forgets reported errors. Called by the shell after every line."""
        self.errors = []
        self.had_error = False
        self.had_runtime_error = False
        self.had_usage_error = False
        self.interrupted = False

    def _print(self, msg):
        print(msg, file=self.out if self.out is not None else sys.stdout)

    def report(self, error, internal=False):
        """Prints error and records it. error must be a LoxError."""
        self.errors.append(error)

        if isinstance(error, LoxRuntimeError):
            self.had_runtime_error = True
        elif isinstance(error, UsageError):
            self.had_usage_error = True
        elif isinstance(error, Interrupt):
            self.interrupted = True
        else:
            self.had_error = True

        error_msg = ""
        if internal:
            error_msg += colored("[internal] ", ErrorHandler.ERROR, attrs=["bold"])
        error_msg += colored(str(error), ErrorHandler.ERROR, attrs=["bold"])
        self._print(error_msg)

        if self.fatal:
            sys.exit(self.exit_code)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        do_exit = False
        if exc_type is KeyboardInterrupt:
            self.report(Interrupt("keyboard interrupt"))
        elif exc_type is SystemExit:
            do_exit = True
        elif exc_type is RecursionError:
            self.report(LoxError("maximum recursion depth exceeded"))
        elif exc_type is not None and issubclass(exc_type, LoxError):
            self.report(exc_val)
        elif exc_type is not None:
            self.report(LoxError(f"unknown error: '{exc_type.__name__}: {exc_val}'"), internal=True)
            do_exit = True

        return not do_exit
