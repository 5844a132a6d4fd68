"""Handles interactive/command-line mode for the lox interpreter. Uses cmd as backend."""

import cmd


class Shell(cmd.Cmd):
    """lox interpreter shell."""
    intro = "lox interpreter :: Python backend\nType 'help' for more information, 'exit' to quit."
    prompt = "> "

    def __init__(self, sess, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.sess = sess
        self.sess.error_handler.fatal = False  # errors in one line must not end the shell

    def onecmd(self, line):
        """Only a bare command word is a shell command: 'exit * 2;' is lox even though it starts with 'exit'."""
        command = line.strip()
        if command in ("exit", ".exit"):
            return self.do_exit("")
        if command == "EOF":
            return self.do_EOF("")
        if command in ("help", "?"):
            return self.do_help("")
        if not command:
            return self.emptyline()
        return self.default(line)

    def default(self, line):
        """Runs one line of lox source."""
        with self.sess.error_handler:  # needed because cmd.Cmd automatically exits on Exception
            self.sess.run(line)
        self.sess.error_handler.reset()

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        print("Welcome to the lox interpreter!\n\n"
              "Type statements and they are run straight away. Try 'var x = 1 + 5;' to \n"
              "bind 6 to 'x', then 'print x * 2;' to see 12. Variables are remembered \n"
              "until the shell exits.", file=self.stdout)

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return False

    def do_EOF(self, arg):
        """Exits interpreter."""
        print(file=self.stdout)
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
