"""Interactive read-evaluate-print loop for Inty. Uses cmd as backend."""

import cmd
from typing import Optional

from .errors import IntyError
from .interpreter import Interpreter
from .values import to_string


class Shell(cmd.Cmd):
    """Inty interpreter shell.

    Every line is evaluated against the same interpreter, so `let`
    bindings from earlier lines stay visible. A failing line reports its
    error and the session carries on with the bindings made so far.
    """
    intro = "Inty interpreter\nType 'help' for more information, 'exit' to leave."
    prompt = ">> "

    def __init__(self, interpreter: Optional[Interpreter] = None, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.interpreter = interpreter if interpreter is not None else Interpreter()

    def default(self, line):
        """Evaluates an arbitrary line of Inty code."""
        try:
            results = self.interpreter.run_source(line)
        except IntyError as e:
            print(f"error: {e}", file=self.stdout)
            return
        for value in results:
            if value is not None:
                print(to_string(value), file=self.stdout)

    def do_help(self, arg):
        """Prints a short introduction to the language."""
        print("Inty evaluates integer, boolean and list expressions.\n\n"
              "Try 'let x = 2 ^ 3' followed by 'x * 2'. Statements on one line are\n"
              "separated by ';', blocks '{ ... }' open a new scope, and\n"
              "'if <test> <stmt> else <stmt>' picks a branch.", file=self.stdout)

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
