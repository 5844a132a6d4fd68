"""Runs lox scripts, or an interactive shell when no script is given. Called from the lox console script.

Exit codes follow sysexits.h: 64 for invalid invocation, 65 for scan/syntax errors, 70 for runtime errors, and
130 when interrupted with Ctrl-C.
"""

import argparse
import sys

from lox.lang.error import ErrorHandler
from lox.lang.session import Session
from lox.lang.shell import Shell


class ArgumentParser(argparse.ArgumentParser):
    """argparse exits with 2 on bad arguments, lox exits with 64."""

    def error(self, message):
        self.print_usage(sys.stderr)
        self.exit(ErrorHandler.USAGE, f"{self.prog}: error: {message}\n")


def main(argv=None):
    """Runs lox interpreter. Returns the process exit code."""
    parser = ArgumentParser(prog="lox")
    parser.add_argument("file", help="script to run (if empty, goes to command-line mode)", nargs="?")
    parser.add_argument("--ast", action="store_true", help="print the syntax tree of each statement before running it")
    args = parser.parse_args(argv)

    with ErrorHandler() as error_handler:
        sess = Session(error_handler, print_ast=args.ast)

        if args.file is not None:
            sess.run_file(args.file)
        else:
            Shell(sess).cmdloop()

    return error_handler.exit_code


if __name__ == "__main__":
    sys.exit(main())
