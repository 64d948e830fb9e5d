"""Runs a bundled SIMPLE program and prints its small-step trace, or opens the interactive shell. Uses the error
handling context manager. Called from the smallstep console script or `python -m smallstep`.
"""

import argparse

from smallstep.lang.error import ErrorHandler
from smallstep.lang.programs import PROGRAMS, get_program
from smallstep.lang.shell import Shell
from smallstep.lang.trace import Tracer

STEP_LIMIT = 10000
DESCRIPTION = "Runs a bundled SIMPLE program and prints its small-step trace, or opens the interactive shell."


def main(argv=None):
    """Runs the SIMPLE interpreter. Called from the smallstep console script."""
    with ErrorHandler() as error_handler:
        parser = argparse.ArgumentParser(prog="smallstep", description=DESCRIPTION)
        parser.add_argument("program", help="bundled program to run (if empty, goes to shell mode)", nargs="?")
        parser.add_argument("--list", help="list the bundled programs and exit", action="store_true")
        parser.add_argument("--quiet", help="only print the final state", action="store_true")
        parser.add_argument("--max-steps", help=f"give up after this many steps, 0 for never (default {STEP_LIMIT})",
                            type=int, default=STEP_LIMIT)
        args = parser.parse_args(argv)

        if args.list:
            for name, program in PROGRAMS.items():
                print(f"{name:<12}{program.description}")

        elif args.program is not None:
            program = get_program(args.program)
            machine = program.machine(Tracer(program.name, error_handler, quiet=args.quiet))
            machine.run(args.max_steps if args.max_steps > 0 else None)

        else:
            Shell(error_handler).cmdloop()
