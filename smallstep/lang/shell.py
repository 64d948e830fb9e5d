"""Handles interactive/command-line mode for the SIMPLE interpreter. Uses cmd as backend.

SIMPLE has no parser, so the shell does not read programs: it loads the bundled ones (see programs.py) and steps
through them, one reduction at a time or all the way to normal form.
"""

import cmd

from smallstep.lang.error import ErrorHandler, GenericException
from smallstep.lang.programs import PROGRAMS, get_program
from smallstep.lang.trace import Tracer


class Shell(cmd.Cmd):
    """Small-step stepper shell."""
    intro = "SIMPLE small-step interpreter :: Python backend\nType '?' or 'help' for more information."
    prompt = "> "
    STEP_LIMIT = 10000  # default bound for 'run'

    def __init__(self, error_handler=None, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.error_handler = error_handler if error_handler else ErrorHandler(fatal=False)
        self.error_handler.fatal = False  # cmd.Cmd should survive errors

        self.program = None
        self.machine = None

    @staticmethod
    def _count(arg, default):
        """Parses an optional step count argument."""
        if not arg:
            return default
        try:
            count = int(arg)
            if count < 0:
                raise ValueError(count)
        except ValueError:
            raise GenericException("'{}' is not a valid number of steps", arg)
        return count

    def _require_machine(self):
        if self.machine is None:
            raise GenericException("no program loaded (try 'list', then 'load NAME')", diagnosis=False)
        return self.machine

    def default(self, line):
        """Unknown commands are errors."""
        with self.error_handler:
            raise GenericException("unknown command '{}'", line.split(" ")[0], diagnosis=False)

    def do_list(self, arg):
        """Lists the bundled programs: list"""
        for name, program in PROGRAMS.items():
            print(f"{name:<12}{program.description}")

    def do_load(self, arg):
        """Loads a bundled program into a fresh machine: load NAME"""
        with self.error_handler:
            self.program = get_program(arg.strip())
            self.machine = self.program.machine()
            self.error_handler.register_program(self.program.name)
            print(self.machine)

    def do_reset(self, arg):
        """Reloads the current program from its first state: reset"""
        with self.error_handler:
            self._require_machine()
            self.machine = self.program.machine()
            print(self.machine)

    def do_step(self, arg):
        """Reduces the current program by N steps (default 1), printing every new state: step [N]"""
        with self.error_handler:
            machine = self._require_machine()
            for __ in range(Shell._count(arg, 1)):
                if not machine.reducible:
                    self.error_handler.warn("'{}' is already in normal form", machine.display(), diagnosis=False)
                    break

                self.error_handler.register_step(self.program.name, machine.display(), machine.steps)
                machine.step()
                print(machine)

            self.error_handler.remove_step(self.program.name)

    def do_run(self, arg):
        """Reduces the current program to normal form, giving up after N steps (default 10000): run [N]"""
        with self.error_handler:
            machine = self._require_machine()
            machine.observer = Tracer(self.program.name, self.error_handler, start=machine.steps)
            try:
                machine.run(Shell._count(arg, Shell.STEP_LIMIT))
            finally:
                machine.observer = None

    def do_show(self, arg):
        """Prints the current state of the program: show"""
        with self.error_handler:
            print(self._require_machine())

    def do_env(self, arg):
        """Prints the current environment of the program: env"""
        with self.error_handler:
            print(self._require_machine().environment.display())

    def do_help(self, arg):
        """Doesnt return docs, but rather a short intro."""
        if arg:
            return super().do_help(arg)
        print("Welcome to the SIMPLE small-step interpreter!\n\n"
              "SIMPLE programs are trees of numbers, booleans, variables, +, *, <, assignments, \n"
              "if/else, sequences and while-loops. Running one means rewriting the tree one small \n"
              "step at a time until nothing is left to reduce.\n\n"
              "Try it out by typing 'load while', then 'step' a few times, then 'run'. Type \n"
              "'list' to see every bundled program, and 'help COMMAND' for help on a command.")

    def emptyline(self):
        """Do not repeat previous command on empty line."""
        return ""

    def do_EOF(self, arg):
        """Exits interpreter."""
        print()
        return self.do_exit(arg)

    def do_exit(self, arg):
        """Exits interpreter."""
        return True
